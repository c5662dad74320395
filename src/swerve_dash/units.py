from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PolarVector:
    """2D vector as magnitude (>= 0) and direction in radians (-pi..pi]."""

    magnitude: float
    angle_radians: float


def to_degrees(radians: float) -> float:
    """Convert radians to degrees without wrapping."""
    return radians * 180.0 / math.pi


def cartesian_to_polar(vx: float, vy: float) -> PolarVector:
    """Convert velocity components to polar form; (0, 0) has angle 0."""
    return PolarVector(magnitude=math.hypot(vx, vy), angle_radians=math.atan2(vy, vx))
