"""Swerve drivetrain telemetry widget."""

from .errors import InvalidConfig, MalformedPayload, SwerveDashError
from .normalization import NormalizationConfig
from .telemetry import (
    ChassisSpeed,
    ModuleState,
    StructuredTypeDescriptor,
    SwerveTelemetry,
    to_swerve_telemetry,
)

__all__ = [
    "ChassisSpeed",
    "InvalidConfig",
    "MalformedPayload",
    "ModuleState",
    "NormalizationConfig",
    "StructuredTypeDescriptor",
    "SwerveDashError",
    "SwerveTelemetry",
    "to_swerve_telemetry",
]
