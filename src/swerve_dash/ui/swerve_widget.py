"""Swerve drivetrain widget.

Combines a title with the robot diagram and applies the slot transform to the
records of the bound data channel.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from ..channel import (
    DataChannelRecord,
    WidgetMode,
    accepts,
    format_slot_title,
    transform,
    with_preview,
)
from ..config import SwerveWidgetConfig
from ..errors import MalformedPayload
from ..telemetry import StructuredTypeDescriptor, SwerveTelemetry
from .robot_swerve import RobotSwerveView

logger = logging.getLogger(__name__)

PREVIEW_TITLE = "Preview"


class SwerveWidget(QWidget):
    """Dashboard widget drawing the latest swerve telemetry of a data channel.

    The widget keeps the last decoded snapshot so that configuration changes
    (title, chassis rotation, visible speeds) repaint without new data.
    Records are decoded with the widget's configured speed bounds, so a bounds
    change takes effect with the next record.
    """

    def __init__(
        self,
        *,
        config: SwerveWidgetConfig | None = None,
        slot: str = "",
        mode: WidgetMode = WidgetMode.RUNTIME,
        parent: Optional[QWidget] = None,
    ) -> None:
        """Initialize the swerve widget.

        Args:
            config: Widget settings; defaults are used when omitted.
            slot: Name of the bound data channel, used for the default title.
            mode: Template, design or runtime rendering mode.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._config = config or SwerveWidgetConfig()
        self._slot = slot
        self._mode = mode
        self._data: SwerveTelemetry | None = None
        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        self._title_label = QLabel()
        self._title_label.setObjectName("swerveTitle")
        font = self._title_label.font()
        font.setBold(True)
        self._title_label.setFont(font)
        self._title_label.setTextInteractionFlags(Qt.NoTextInteraction)
        self._title_label.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Fixed)

        self._view = RobotSwerveView()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(4)
        layout.addWidget(self._title_label)
        layout.addWidget(self._view, stretch=1)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def config(self) -> SwerveWidgetConfig:
        return self._config

    @property
    def mode(self) -> WidgetMode:
        return self._mode

    @property
    def data(self) -> SwerveTelemetry | None:
        """Return the last decoded snapshot (None when nothing is drawable)."""
        return self._data

    @property
    def view(self) -> RobotSwerveView:
        return self._view

    @property
    def title(self) -> str:
        return self._title_label.text()

    def set_config(self, config: SwerveWidgetConfig) -> None:
        self._config = config
        self._refresh()

    def set_mode(self, mode: WidgetMode) -> None:
        self._mode = mode
        self._refresh()

    def set_slot(self, slot: str) -> None:
        self._slot = slot
        self._refresh()

    def update_records(
        self,
        records: Sequence[DataChannelRecord],
        structured_type: StructuredTypeDescriptor | None,
    ) -> SwerveTelemetry | None:
        """Decode the latest record and redraw.

        A payload that claims a swerve layout but does not match it is logged
        and clears the diagram. Channels of other types draw nothing.
        """
        if not accepts(structured_type):
            logger.debug("Ignoring records of unsupported type %s", structured_type)
            self._data = None
            self._refresh()
            return None
        try:
            self._data = transform(records, structured_type, self._config)
        except MalformedPayload as exc:
            logger.warning("Dropping malformed swerve telemetry: %s", exc)
            self._data = None
        self._refresh()
        return self._data

    def clear(self) -> None:
        self._data = None
        self._refresh()

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _refresh(self) -> None:
        if self._mode is WidgetMode.TEMPLATE:
            self._title_label.setText(PREVIEW_TITLE)
        else:
            self._title_label.setText(self._config.title or format_slot_title(self._slot))

        shown, preview = with_preview(self._mode, self._data)
        self._view.set_telemetry(
            shown,
            chassis_rotation=self._config.chassis_rotation,
            chassis_speeds_visible=self._config.chassis_speeds_visible,
            preview=preview,
        )
