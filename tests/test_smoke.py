"""Smoke tests for application wiring."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QDoubleSpinBox

import swerve_dash.config as config
from swerve_dash.app import APP_NAME, APP_VERSION
from swerve_dash.channel import WidgetMode
from swerve_dash.ui.main_window import MainWindow


def make_window() -> MainWindow:
    return MainWindow(app_name=APP_NAME, version=APP_VERSION)


class TestMainWindow:
    """Tests for MainWindow."""

    def test_construction(self, qapp, cfg_path: Path) -> None:
        window = make_window()
        assert APP_NAME in window.windowTitle()
        assert not window.is_streaming
        assert cfg_path.exists()

    def test_tick_feeds_widget(self, qapp, cfg_path: Path) -> None:
        window = make_window()
        window._on_tick()
        data = window.swerve_widget.data
        assert data is not None
        assert len(data.current_states) == 4

    def test_start_stop(self, qapp, cfg_path: Path) -> None:
        window = make_window()
        window.start_streaming()
        assert window.is_streaming
        window.stop_streaming()
        assert not window.is_streaming

    def test_reset_clears_widget(self, qapp, cfg_path: Path) -> None:
        window = make_window()
        window._on_tick()
        window._on_reset()
        assert window.swerve_widget.data is None

    def test_preview_toggle(self, qapp, cfg_path: Path) -> None:
        window = make_window()
        window._preview_checkbox.setChecked(True)
        assert window.swerve_widget.mode is WidgetMode.TEMPLATE
        window._preview_checkbox.setChecked(False)
        assert window.swerve_widget.mode is WidgetMode.RUNTIME

    def test_editor_changes_persist(self, qapp, cfg_path: Path) -> None:
        """Settings edits reach the widget and config.ini."""
        window = make_window()
        window.editor.findChild(QDoubleSpinBox, "maxLinearSpeed").setValue(8.0)
        assert window.swerve_widget.config.max_linear_speed == 8.0
        window._save_widget_settings()
        assert config.load_widget_config().max_linear_speed == 8.0

    def test_close_saves_window_size(self, qapp, cfg_path: Path) -> None:
        """Closing the window persists its size for the next start."""
        window = make_window()
        window.show()
        window.resize(820, 600)
        qapp.processEvents()
        width, height = window.width(), window.height()
        window.close()
        demo = config.load_demo_config()
        assert (demo.window_width, demo.window_height) == (width, height)
        assert demo.update_hz == config.DEFAULT_UPDATE_HZ

    def test_close_flushes_pending_settings(self, qapp, cfg_path: Path) -> None:
        """A settings edit still waiting on the debounce is written on close."""
        window = make_window()
        window.show()
        window.editor.findChild(QDoubleSpinBox, "maxAngularSpeed").setValue(720.0)
        window.close()
        assert config.load_widget_config().max_angular_speed == 720.0
