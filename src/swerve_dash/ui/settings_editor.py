"""Settings editor for the swerve widget.

Provides UI controls for the widget title, chassis rotation and chassis speed
visibility, and the speed bounds used to scale vectors and arcs.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import (
    QCheckBox,
    QDoubleSpinBox,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QWidget,
)

from swerve_dash.config import (
    DEFAULT_MAX_ANGULAR_SPEED,
    DEFAULT_MAX_LINEAR_SPEED,
    MIN_SPEED_BOUND,
    SwerveWidgetConfig,
)
from swerve_dash.ui.utils import clamp, section_header


_MAX_LINEAR_SPEED_LIMIT: float = 50.0
_MAX_ANGULAR_SPEED_LIMIT: float = 7200.0


class SwerveSettingsEditor(QGroupBox):
    """Widget for swerve widget settings.

    Provides controls for:
    - Optional widget title
    - Rotating the chassis per the robot's pose
    - Chassis speed visibility
    - Maximum linear (m/s) and angular (deg/s) speeds
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        config: SwerveWidgetConfig | None = None,
        on_config_changed: Callable[[SwerveWidgetConfig], None] | None = None,
    ) -> None:
        """Initialize the settings editor.

        Args:
            parent: Parent widget.
            config: Initial settings.
            on_config_changed: Callback receiving the new settings on any change.
        """
        super().__init__("Swerve", parent)
        self._on_config_changed = on_config_changed or (lambda _: None)
        self._build_ui()
        self.set_config(config or SwerveWidgetConfig())

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def config(self) -> SwerveWidgetConfig:
        """Return the settings currently shown in the editor."""
        return SwerveWidgetConfig(
            title=self._title_edit.text().strip(),
            chassis_rotation=self._chassis_rotation_checkbox.isChecked(),
            chassis_speeds_visible=self._chassis_speeds_checkbox.isChecked(),
            max_linear_speed=float(self._max_linear_spin.value()),
            max_angular_speed=float(self._max_angular_spin.value()),
        )

    def set_config(self, config: SwerveWidgetConfig) -> None:
        """Show the given settings without emitting change callbacks."""
        widgets = (
            self._title_edit,
            self._chassis_rotation_checkbox,
            self._chassis_speeds_checkbox,
            self._max_linear_spin,
            self._max_angular_spin,
        )
        for widget in widgets:
            widget.blockSignals(True)
        self._title_edit.setText(config.title)
        self._chassis_rotation_checkbox.setChecked(config.chassis_rotation)
        self._chassis_speeds_checkbox.setChecked(config.chassis_speeds_visible)
        self._max_linear_spin.setValue(clamp(config.max_linear_speed, MIN_SPEED_BOUND, _MAX_LINEAR_SPEED_LIMIT))
        self._max_angular_spin.setValue(clamp(config.max_angular_speed, MIN_SPEED_BOUND, _MAX_ANGULAR_SPEED_LIMIT))
        for widget in widgets:
            widget.blockSignals(False)

    # -------------------------------------------------------------------------
    # UI construction
    # -------------------------------------------------------------------------

    def _build_ui(self) -> None:
        form = QFormLayout(self)

        self._title_edit = QLineEdit()
        self._title_edit.setObjectName("swerveTitleEdit")
        self._title_edit.setPlaceholderText("Optional widget title")
        self._title_edit.textChanged.connect(self._emit_changed)
        form.addRow("Title:", self._title_edit)

        self._chassis_rotation_checkbox = QCheckBox("Rotate chassis per robot's pose")
        self._chassis_rotation_checkbox.stateChanged.connect(self._emit_changed)
        form.addRow("", self._chassis_rotation_checkbox)

        self._chassis_speeds_checkbox = QCheckBox("Show chassis speeds")
        self._chassis_speeds_checkbox.stateChanged.connect(self._emit_changed)
        form.addRow("", self._chassis_speeds_checkbox)

        form.addRow(section_header("Speed vector scaling options"))

        # Bounds start at 1 so normalization never divides by zero.
        self._max_linear_spin = QDoubleSpinBox()
        self._max_linear_spin.setObjectName("maxLinearSpeed")
        self._max_linear_spin.setAccessibleName("Maximum linear speed")
        self._max_linear_spin.setRange(MIN_SPEED_BOUND, _MAX_LINEAR_SPEED_LIMIT)
        self._max_linear_spin.setDecimals(1)
        self._max_linear_spin.setSingleStep(0.1)
        self._max_linear_spin.setValue(DEFAULT_MAX_LINEAR_SPEED)
        self._max_linear_spin.valueChanged.connect(self._emit_changed)
        form.addRow("Maximum linear speed (m/s):", self._max_linear_spin)

        self._max_angular_spin = QDoubleSpinBox()
        self._max_angular_spin.setObjectName("maxAngularSpeed")
        self._max_angular_spin.setAccessibleName("Maximum angular speed")
        self._max_angular_spin.setRange(MIN_SPEED_BOUND, _MAX_ANGULAR_SPEED_LIMIT)
        self._max_angular_spin.setDecimals(0)
        self._max_angular_spin.setSingleStep(1.0)
        self._max_angular_spin.setValue(DEFAULT_MAX_ANGULAR_SPEED)
        self._max_angular_spin.valueChanged.connect(self._emit_changed)
        form.addRow("Maximum angular speed (deg/s):", self._max_angular_spin)

    # -------------------------------------------------------------------------
    # Internal callbacks
    # -------------------------------------------------------------------------

    def _emit_changed(self, *_args) -> None:
        self._on_config_changed(self.config())
