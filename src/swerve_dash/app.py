import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import QStandardPaths
from PySide6.QtWidgets import QApplication

if TYPE_CHECKING:
    from .ui.main_window import MainWindow

APP_NAME = "Swerve Dash"
APP_VERSION = "0.1.0"


def ensure_user_config_dir() -> Path:
    """Ensure a writable config directory exists and return it."""
    config_dir = Path(QStandardPaths.writableLocation(QStandardPaths.AppConfigLocation))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def ensure_std_streams() -> None:
    """
    Ensure stdout/stderr are usable (PyInstaller windowed apps can set them to None).
    """
    if sys.stdout is None:
        sys.stdout = open(os.devnull, "w")
    if sys.stderr is None:
        sys.stderr = sys.stdout


def create_application() -> QApplication:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    ensure_user_config_dir()
    return app


def create_main_window() -> "MainWindow":
    ensure_std_streams()
    from .ui.main_window import MainWindow  # Local import keeps QApplication creation first.

    return MainWindow(app_name=APP_NAME, version=APP_VERSION)
