"""Synthetic swerve telemetry for running the dashboard without a robot.

Module states come from rigid-body inverse kinematics: each module's velocity
is the chassis velocity plus omega x r for the module's position r.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any

from .channel import DataChannelRecord
from .telemetry import SWERVE_TELEMETRY_TYPE, STRUCT_FORMAT, StructuredTypeDescriptor


@dataclass(frozen=True, slots=True)
class ModuleLayout:
    """Module positions (m) in robot frame, +x forward and +y left.

    Order is front-left, front-right, back-left, back-right, matching the
    corners of the drawn chassis.
    """

    positions: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError("ModuleLayout.positions must not be empty")

    @classmethod
    def square(cls, half_track: float = 0.3) -> ModuleLayout:
        h = half_track
        return cls(positions=((h, h), (h, -h), (-h, h), (-h, -h)))


def _module_struct(speed: float, angle_radians: float) -> dict[str, Any]:
    return {"speed": speed, "angle": {"value": angle_radians}}


def module_states_for(vx: float, vy: float, omega: float, layout: ModuleLayout) -> list[dict[str, Any]]:
    """Raw ``SwerveModuleState`` structs for a chassis velocity.

    Args:
        vx: Forward velocity (m/s).
        vy: Leftward velocity (m/s).
        omega: Yaw rate (rad/s), counter-clockwise positive.
        layout: Module positions.

    Returns:
        One struct per module, in layout order.
    """
    states: list[dict[str, Any]] = []
    for x, y in layout.positions:
        mvx = vx - omega * y
        mvy = vy + omega * x
        speed = math.hypot(mvx, mvy)
        # Standing modules keep pointing forward instead of snapping to atan2(0, 0).
        angle = math.atan2(mvy, mvx) if speed > 1e-9 else 0.0
        states.append(_module_struct(speed, angle))
    return states


def _chassis_struct(vx: float, vy: float, omega: float) -> dict[str, float]:
    return {"vx": vx, "vy": vy, "omega": omega}


class DemoFeed:
    """Produce ``SwerveTelemetry`` records for a robot driving a slow figure-eight."""

    def __init__(
        self,
        *,
        layout: ModuleLayout | None = None,
        max_linear_speed: float = 4.0,
        max_angular_speed: float = math.pi,
        period_s: float = 12.0,
        measurement_lag: float = 0.85,
    ) -> None:
        self._layout = layout or ModuleLayout.square()
        self._max_linear = max_linear_speed
        self._max_angular = max_angular_speed
        self._period = max(1.0, period_s)
        self._lag = max(0.0, min(1.0, measurement_lag))
        self._heading = 0.0
        self._elapsed = 0.0
        self._structured_type = StructuredTypeDescriptor(format=STRUCT_FORMAT, name=SWERVE_TELEMETRY_TYPE)

    @property
    def structured_type(self) -> StructuredTypeDescriptor:
        return self._structured_type

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def reset(self) -> None:
        self._heading = 0.0
        self._elapsed = 0.0

    def _desired(self, t: float) -> tuple[float, float, float]:
        phase = 2.0 * math.pi * t / self._period
        vx = self._max_linear * math.sin(phase)
        vy = 0.5 * self._max_linear * math.sin(2.0 * phase)
        omega = self._max_angular * 0.5 * math.cos(phase)
        return vx, vy, omega

    def next_record(self, dt: float) -> DataChannelRecord:
        """Advance the feed by ``dt`` seconds and return the new record."""
        self._elapsed += max(0.0, dt)
        dvx, dvy, domega = self._desired(self._elapsed)
        # Measured speeds trail the command slightly.
        cvx, cvy, comega = (component * self._lag for component in (dvx, dvy, domega))
        self._heading = math.remainder(self._heading + comega * dt, 2.0 * math.pi)

        value = {
            "rotation": {"value": self._heading},
            "currentStates": module_states_for(cvx, cvy, comega, self._layout),
            "desiredStates": module_states_for(dvx, dvy, domega, self._layout),
            "currentSpeeds": _chassis_struct(cvx, cvy, comega),
            "desiredSpeeds": _chassis_struct(dvx, dvy, domega),
        }
        return DataChannelRecord(value=value, timestamp=time.monotonic())
