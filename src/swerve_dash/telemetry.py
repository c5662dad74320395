"""Decoding of raw swerve telemetry values into normalized snapshots.

Two source layouts are understood:

- an array of ``SwerveModuleState`` structs (measured module states only);
- a ``SwerveTelemetry`` struct carrying pose rotation, measured and desired
  module states, and measured and desired chassis speeds.

Anything else decodes to ``None``: the data source is simply not one this
widget can draw.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import MalformedPayload
from .units import cartesian_to_polar, to_degrees

logger = logging.getLogger(__name__)

Normalizer = Callable[[float], float]

STRUCT_FORMAT = "struct"
MODULE_STATE_TYPE = "SwerveModuleState"
SWERVE_TELEMETRY_TYPE = "SwerveTelemetry"


def _ensure_finite(owner: str, **fields: float) -> None:
    for name, value in fields.items():
        if not math.isfinite(value):
            raise ValueError(f"{owner}.{name} must be finite, got {value!r}")


@dataclass(frozen=True, slots=True)
class ModuleState:
    """Kinematic state of one swerve module.

    - `speed` is normalized in range -1..1 (sign is direction of travel).
    - `angle` is the steering angle in degrees, not wrapped.
    """

    speed: float
    angle: float

    def __post_init__(self) -> None:
        _ensure_finite("ModuleState", speed=self.speed, angle=self.angle)


@dataclass(frozen=True, slots=True)
class ChassisSpeed:
    """Translational and rotational velocity of the whole robot.

    - `speed` is the normalized magnitude in range -1..1.
    - `angle` is the direction of travel in degrees.
    - `omega` is the normalized rotation in range -359..359 degrees of arc.
    """

    speed: float
    angle: float
    omega: float

    def __post_init__(self) -> None:
        _ensure_finite("ChassisSpeed", speed=self.speed, angle=self.angle, omega=self.omega)


@dataclass(frozen=True, slots=True)
class SwerveTelemetry:
    """Decoded swerve frame; all angular values are in degrees."""

    rotation: float | None = None
    current_states: tuple[ModuleState, ...] | None = None
    desired_states: tuple[ModuleState, ...] | None = None
    current_speeds: ChassisSpeed | None = None
    desired_speeds: ChassisSpeed | None = None


@dataclass(frozen=True, slots=True)
class StructuredTypeDescriptor:
    """Describes how to interpret a data channel value."""

    format: str
    name: str
    is_array: bool = False


class ShapeKind(enum.Enum):
    MODULE_STATES = "module_states"
    SWERVE_TELEMETRY = "swerve_telemetry"
    UNRECOGNIZED = "unrecognized"


def classify_shape(structured_type: StructuredTypeDescriptor) -> ShapeKind:
    """Return which known layout, if any, a type descriptor identifies."""
    if structured_type.format != STRUCT_FORMAT:
        return ShapeKind.UNRECOGNIZED
    if structured_type.name == MODULE_STATE_TYPE and structured_type.is_array:
        return ShapeKind.MODULE_STATES
    if structured_type.name == SWERVE_TELEMETRY_TYPE:
        return ShapeKind.SWERVE_TELEMETRY
    return ShapeKind.UNRECOGNIZED


def _field(raw: Any, name: str) -> Any:
    """Read a struct field from a mapping or an object with attributes."""
    if isinstance(raw, Mapping):
        return raw[name]
    try:
        return getattr(raw, name)
    except AttributeError as exc:
        raise KeyError(name) from exc


def _number(raw: Any, name: str) -> float:
    value = _field(raw, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {name!r} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"field {name!r} must be finite, got {value!r}")
    return float(value)


def _sequence(raw: Any, name: str | None = None) -> Sequence[Any]:
    value = raw if name is None else _field(raw, name)
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise TypeError(f"expected a sequence of structs, got {type(value).__name__}")
    return value


def _degrees(raw: Any, name: str) -> float:
    """Read a radian field as degrees."""
    value = to_degrees(_number(raw, name))
    if not math.isfinite(value):
        raise ValueError(f"field {name!r} is out of range")
    return value


def _read_module_state(raw: Any) -> tuple[float, float]:
    """(speed m/s, angle deg) of a ``SwerveModuleState`` struct."""
    return _number(raw, "speed"), _degrees(_field(raw, "angle"), "value")


def _read_chassis_speed(raw: Any) -> tuple[float, float, float]:
    """(vx, vy, omega deg/s) of a ``ChassisSpeeds`` struct."""
    return _number(raw, "vx"), _number(raw, "vy"), _degrees(raw, "omega")


def _module_state(raw: tuple[float, float], normalize_linear: Normalizer) -> ModuleState:
    speed, angle = raw
    return ModuleState(speed=normalize_linear(speed), angle=angle)


def _chassis_speed(
    raw: tuple[float, float, float], normalize_linear: Normalizer, normalize_angular: Normalizer
) -> ChassisSpeed:
    vx, vy, omega = raw
    polar = cartesian_to_polar(vx, vy)
    return ChassisSpeed(
        speed=normalize_linear(polar.magnitude),
        angle=to_degrees(polar.angle_radians),
        omega=normalize_angular(omega),
    )


def parse_module_state(raw: Any, normalize_linear: Normalizer) -> ModuleState:
    """Build a :class:`ModuleState` from a raw ``SwerveModuleState`` struct."""
    return _module_state(_read_module_state(raw), normalize_linear)


def parse_chassis_speed(raw: Any, normalize_linear: Normalizer, normalize_angular: Normalizer) -> ChassisSpeed:
    """Build a :class:`ChassisSpeed` from a raw ``ChassisSpeeds`` struct.

    The (vx, vy) vector becomes a magnitude and heading; omega arrives in
    radians per second and is normalized in degrees per second.
    """
    return _chassis_speed(_read_chassis_speed(raw), normalize_linear, normalize_angular)


def _read_states(raw: Any, name: str | None = None) -> list[tuple[float, float]]:
    return [_read_module_state(item) for item in _sequence(raw, name)]


def to_swerve_telemetry(
    value: Any,
    structured_type: StructuredTypeDescriptor,
    normalize_linear: Normalizer,
    normalize_angular: Normalizer,
) -> SwerveTelemetry | None:
    """Construct :class:`SwerveTelemetry` from a raw channel value.

    Args:
        value: Raw structured value (mappings/sequences as decoded from the channel).
        structured_type: Descriptor identifying the value's layout.
        normalize_linear: Maps a linear speed (m/s) into -1..1.
        normalize_angular: Maps an angular speed (deg/s) into -359..359.

    Returns:
        The decoded snapshot, or ``None`` when there is no value or the layout
        is not one of the known swerve shapes.

    Raises:
        MalformedPayload: The value claims a known layout but does not match it.
        ValueError: A normalizer returned a non-finite value.
    """
    if value is None:
        return None

    kind = classify_shape(structured_type)
    if kind is ShapeKind.UNRECOGNIZED:
        logger.debug("Unrecognized swerve data type %s/%s", structured_type.format, structured_type.name)
        return None

    # Every raw field is read and checked before any normalizer runs.
    try:
        if kind is ShapeKind.MODULE_STATES:
            states = _read_states(value)
        else:
            rotation = _degrees(_field(value, "rotation"), "value")
            current_states = _read_states(value, "currentStates")
            desired_states = _read_states(value, "desiredStates")
            current_speeds = _read_chassis_speed(_field(value, "currentSpeeds"))
            desired_speeds = _read_chassis_speed(_field(value, "desiredSpeeds"))
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedPayload(f"{structured_type.name} payload does not match its layout: {exc}") from exc

    if kind is ShapeKind.MODULE_STATES:
        return SwerveTelemetry(
            rotation=0.0,
            current_states=tuple(_module_state(s, normalize_linear) for s in states),
        )
    return SwerveTelemetry(
        rotation=rotation,
        current_states=tuple(_module_state(s, normalize_linear) for s in current_states),
        desired_states=tuple(_module_state(s, normalize_linear) for s in desired_states),
        current_speeds=_chassis_speed(current_speeds, normalize_linear, normalize_angular),
        desired_speeds=_chassis_speed(desired_speeds, normalize_linear, normalize_angular),
    )
