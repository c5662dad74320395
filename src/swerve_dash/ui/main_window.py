"""Main window for the Swerve Dash application.

Design notes:
- The swerve widget is fed from the demo feed on a QTimer.
- Widget settings are edited in SwerveSettingsEditor and persisted to
  `config.ini` via `swerve_dash.config`, debounced.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from ..channel import DataChannelRecord, WidgetMode
from ..config import (
    DemoConfig,
    MAX_UPDATE_HZ,
    MIN_UPDATE_HZ,
    SwerveWidgetConfig,
    load_demo_config,
    load_widget_config,
    save_demo_config,
    save_widget_config,
)
from ..demo_feed import DemoFeed
from .settings_editor import SwerveSettingsEditor
from .swerve_widget import SwerveWidget
from .utils import clamp_int

logger = logging.getLogger(__name__)

_UI_SAVE_DEBOUNCE_MS = 250
_DEMO_SLOT = "/SmartDashboard/Drive/SwerveTelemetry"


class MainWindow(QMainWindow):
    """Main application window for Swerve Dash.

    Shows the swerve widget next to its settings editor, with controls to
    start/stop the demo feed and to switch the widget into preview mode.
    """

    def __init__(self, *, app_name: str, version: str) -> None:
        """Initialize the main window with widget, editor, timers and state."""
        super().__init__()
        self._app_name = app_name
        self._version = version
        self.setWindowTitle(f"{self._app_name} - v{self._version}")

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        self._widget_config: SwerveWidgetConfig = load_widget_config()
        self._demo_config: DemoConfig = load_demo_config()
        self._feed = DemoFeed()
        self._last_record: DataChannelRecord | None = None

        self.resize(self._demo_config.window_width, self._demo_config.window_height)
        self._build_ui()
        self._setup_timers()
        self._update_status()

    def _build_ui(self) -> None:
        """Build the main UI."""
        self._swerve_widget = SwerveWidget(config=self._widget_config, slot=_DEMO_SLOT)
        self._editor = SwerveSettingsEditor(
            config=self._widget_config,
            on_config_changed=self._on_config_changed,
        )

        self._start_button = QPushButton("Start")
        self._start_button.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
        self._start_button.clicked.connect(self._on_start_stop)

        self._reset_button = QPushButton("Reset")
        self._reset_button.setIcon(self.style().standardIcon(QStyle.SP_BrowserReload))
        self._reset_button.clicked.connect(self._on_reset)

        self._preview_checkbox = QCheckBox("Preview mode")
        self._preview_checkbox.stateChanged.connect(self._on_preview_toggled)

        control_bar = QHBoxLayout()
        control_bar.addWidget(self._start_button)
        control_bar.addWidget(self._reset_button)
        control_bar.addStretch()

        side = QVBoxLayout()
        side.addWidget(self._editor)
        side.addWidget(self._preview_checkbox)
        side.addLayout(control_bar)
        side.addStretch()

        side_container = QWidget()
        side_container.setLayout(side)
        side_container.setFixedWidth(340)

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.addWidget(self._swerve_widget, stretch=1)
        layout.addWidget(side_container)
        self.setCentralWidget(central)

    def _setup_timers(self) -> None:
        """Create and configure timers."""
        update_hz = clamp_int(self._demo_config.update_hz, MIN_UPDATE_HZ, MAX_UPDATE_HZ)
        self._tick_interval_s = 1.0 / update_hz
        self._timer = QTimer(self)
        self._timer.setInterval(int(1000 / update_hz))
        self._timer.timeout.connect(self._on_tick)

        self._ui_save_timer = QTimer(self)
        self._ui_save_timer.setSingleShot(True)
        self._ui_save_timer.setInterval(_UI_SAVE_DEBOUNCE_MS)
        self._ui_save_timer.timeout.connect(self._save_widget_settings)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def swerve_widget(self) -> SwerveWidget:
        return self._swerve_widget

    @property
    def editor(self) -> SwerveSettingsEditor:
        return self._editor

    @property
    def is_streaming(self) -> bool:
        return self._timer.isActive()

    def start_streaming(self) -> None:
        self._timer.start()
        self._start_button.setText("Stop")
        self._start_button.setIcon(self.style().standardIcon(QStyle.SP_MediaStop))
        self._update_status()

    def stop_streaming(self) -> None:
        self._timer.stop()
        self._start_button.setText("Start")
        self._start_button.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
        self._update_status()

    # -------------------------------------------------------------------------
    # Callbacks
    # -------------------------------------------------------------------------

    def _on_tick(self) -> None:
        self._last_record = self._feed.next_record(self._tick_interval_s)
        self._swerve_widget.update_records([self._last_record], self._feed.structured_type)

    def _on_start_stop(self) -> None:
        if self.is_streaming:
            self.stop_streaming()
        else:
            self.start_streaming()

    def _on_reset(self) -> None:
        self._feed.reset()
        self._last_record = None
        self._swerve_widget.clear()
        self._update_status()

    def _on_preview_toggled(self, *_args) -> None:
        mode = WidgetMode.TEMPLATE if self._preview_checkbox.isChecked() else WidgetMode.RUNTIME
        self._swerve_widget.set_mode(mode)
        self._update_status()

    def _on_config_changed(self, config: SwerveWidgetConfig) -> None:
        self._widget_config = config
        self._swerve_widget.set_config(config)
        # Re-decode the last record so new speed bounds show immediately.
        if self._last_record is not None:
            self._swerve_widget.update_records([self._last_record], self._feed.structured_type)
        self._ui_save_timer.start()

    def _save_widget_settings(self) -> None:
        save_widget_config(self._widget_config)
        logger.info("Saved swerve widget settings")
        self._status_bar.showMessage("Settings saved", 2000)

    def _update_status(self) -> None:
        state = "streaming demo telemetry" if self.is_streaming else "idle"
        if self._swerve_widget.mode is WidgetMode.TEMPLATE:
            state += " (preview)"
        self._status_bar.showMessage(f"{self._app_name}: {state}")

    def _save_demo_settings(self) -> None:
        self._demo_config = DemoConfig(
            update_hz=self._demo_config.update_hz,
            window_width=self.width(),
            window_height=self.height(),
        )
        save_demo_config(self._demo_config)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the feed and persist pending settings and the window size."""
        self._timer.stop()
        if self._ui_save_timer.isActive():
            self._ui_save_timer.stop()
            self._save_widget_settings()
        self._save_demo_settings()
        super().closeEvent(event)
