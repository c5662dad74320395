"""Mapping of physical speeds into the bounded ranges used for drawing.

Linear speeds map to -1..1 as a fraction of the configured maximum. Angular
speeds map to degrees of arc, where the configured maximum corresponds to a
full turn; the result is capped at 359 so a saturated arc never collapses to 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidConfig

LINEAR_LIMIT: float = 1.0
ANGULAR_SCALE: float = 360.0
ANGULAR_LIMIT: float = 359.0


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def _clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(max_val, value))


@dataclass(frozen=True, slots=True)
class NormalizationConfig:
    """Configured maxima used to normalize linear and angular speeds.

    - `max_linear_speed` is the linear speed (m/s) drawn as a full-length vector.
    - `max_angular_speed` is the angular speed (deg/s) drawn as a full turn.
    """

    max_linear_speed: float
    max_angular_speed: float

    def __post_init__(self) -> None:
        for name in ("max_linear_speed", "max_angular_speed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfig(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfig(f"{name} must be a finite number greater than zero, got {value!r}")

    def normalize_linear(self, value: float) -> float:
        """Map a linear speed to -1..1, saturating at the configured maximum."""
        return _sign(value) * _clamp(abs(value) / self.max_linear_speed, 0.0, LINEAR_LIMIT)

    def normalize_angular(self, value: float) -> float:
        """Map an angular speed in deg/s to an arc span in -359..359 degrees."""
        return _sign(value) * _clamp(ANGULAR_SCALE * abs(value) / self.max_angular_speed, 0.0, ANGULAR_LIMIT)
