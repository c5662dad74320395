"""UI package for Swerve Dash.

Exports:
    MainWindow: Main application window.
    RobotSwerveView: Top-down swerve diagram.
    SwerveWidget: Title plus diagram bound to a data channel.
    SwerveSettingsEditor: Editor for the widget settings.
"""

from .main_window import MainWindow
from .robot_swerve import RobotSwerveView
from .settings_editor import SwerveSettingsEditor
from .swerve_widget import SwerveWidget

__all__ = [
    "MainWindow",
    "RobotSwerveView",
    "SwerveSettingsEditor",
    "SwerveWidget",
]
