"""Slot transform between a data channel and the swerve widget.

The host dashboard hands the widget the records of its bound data channel and
the channel's structured type. Only the most recent record is drawn.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .telemetry import (
    MODULE_STATE_TYPE,
    SWERVE_TELEMETRY_TYPE,
    ChassisSpeed,
    ModuleState,
    StructuredTypeDescriptor,
    SwerveTelemetry,
    to_swerve_telemetry,
)

if TYPE_CHECKING:
    from .config import SwerveWidgetConfig

ACCEPTED_TYPE_NAMES: tuple[str, ...] = (SWERVE_TELEMETRY_TYPE, MODULE_STATE_TYPE)
DEFAULT_TITLE = "Swerve"

# Shown in the widget gallery before any data source is bound.
PREVIEW_TELEMETRY = SwerveTelemetry(
    current_states=tuple(ModuleState(speed=0.5, angle=-45.0) for _ in range(4)),
    current_speeds=ChassisSpeed(speed=0.5, angle=-45.0, omega=0.0),
)


@dataclass(frozen=True, slots=True)
class DataChannelRecord:
    """One sample of a data channel."""

    value: Any
    timestamp: float = 0.0


class WidgetMode(enum.Enum):
    TEMPLATE = "template"
    DESIGN = "design"
    RUNTIME = "runtime"


def accepts(structured_type: StructuredTypeDescriptor | None) -> bool:
    """Return True when the widget can be bound to a channel of this type."""
    return structured_type is not None and structured_type.name in ACCEPTED_TYPE_NAMES


def transform(
    records: Sequence[DataChannelRecord],
    structured_type: StructuredTypeDescriptor | None,
    config: SwerveWidgetConfig,
) -> SwerveTelemetry | None:
    """Decode the latest record of a channel using the widget's speed bounds."""
    if not records or structured_type is None:
        return None

    normalization = config.normalization()
    return to_swerve_telemetry(
        records[-1].value,
        structured_type,
        normalization.normalize_linear,
        normalization.normalize_angular,
    )


def with_preview(
    mode: WidgetMode,
    data: SwerveTelemetry | None,
    preview: SwerveTelemetry = PREVIEW_TELEMETRY,
) -> tuple[SwerveTelemetry | None, bool]:
    """Pick what to draw and whether it is placeholder data.

    Template mode always draws the preview; design mode falls back to it
    while no data has arrived.
    """
    if mode is WidgetMode.TEMPLATE:
        return preview, True
    if mode is WidgetMode.DESIGN and data is None:
        return preview, True
    return data, False


def format_slot_title(slot: str | None) -> str:
    """Title for a widget without an explicit one: the channel's last path segment."""
    if not slot:
        return DEFAULT_TITLE
    segments = [segment for segment in slot.split("/") if segment.strip()]
    return segments[-1].strip() if segments else DEFAULT_TITLE
