from __future__ import annotations

import configparser
import logging
import math
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QStandardPaths

from .normalization import NormalizationConfig

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
# Default values for all settings
# -------------------------------------------------------------------------

# Swerve widget defaults
DEFAULT_TITLE: str = ""
DEFAULT_CHASSIS_ROTATION: bool = True
DEFAULT_CHASSIS_SPEEDS_VISIBLE: bool = True
DEFAULT_MAX_LINEAR_SPEED: float = 5.0
DEFAULT_MAX_ANGULAR_SPEED: float = 360.0
MIN_SPEED_BOUND: float = 1.0

# Demo defaults
DEFAULT_UPDATE_HZ: int = 30
MIN_UPDATE_HZ: int = 5
MAX_UPDATE_HZ: int = 120
DEFAULT_WINDOW_WIDTH: int = 900
DEFAULT_WINDOW_HEIGHT: int = 640


@dataclass(frozen=True)
class SwerveWidgetConfig:
    """Swerve widget settings persisted to config.ini."""

    title: str = DEFAULT_TITLE
    chassis_rotation: bool = DEFAULT_CHASSIS_ROTATION
    chassis_speeds_visible: bool = DEFAULT_CHASSIS_SPEEDS_VISIBLE
    max_linear_speed: float = DEFAULT_MAX_LINEAR_SPEED  # m/s drawn as a full-length vector
    max_angular_speed: float = DEFAULT_MAX_ANGULAR_SPEED  # deg/s drawn as a full turn

    def normalization(self) -> NormalizationConfig:
        return NormalizationConfig(
            max_linear_speed=self.max_linear_speed,
            max_angular_speed=self.max_angular_speed,
        )


@dataclass(frozen=True)
class DemoConfig:
    """Demo feed and window settings."""

    update_hz: int = DEFAULT_UPDATE_HZ
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT


def config_path() -> Path:
    config_dir = Path(QStandardPaths.writableLocation(QStandardPaths.AppConfigLocation))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "config.ini"


def ensure_config_exists() -> None:
    """Create config.ini with all default values if it doesn't exist."""
    path = config_path()
    if path.exists():
        return

    parser = configparser.ConfigParser()
    parser["swerve"] = {
        "title": DEFAULT_TITLE,
        "chassis_rotation": "true" if DEFAULT_CHASSIS_ROTATION else "false",
        "chassis_speeds_visible": "true" if DEFAULT_CHASSIS_SPEEDS_VISIBLE else "false",
        "max_linear_speed": str(DEFAULT_MAX_LINEAR_SPEED),
        "max_angular_speed": str(DEFAULT_MAX_ANGULAR_SPEED),
    }
    parser["demo"] = {
        "update_hz": str(DEFAULT_UPDATE_HZ),
        "window_width": str(DEFAULT_WINDOW_WIDTH),
        "window_height": str(DEFAULT_WINDOW_HEIGHT),
    }

    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def _read_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    parser.read(config_path(), encoding="utf-8")
    return parser


def _write_parser(parser: configparser.ConfigParser) -> None:
    path = config_path()
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def _speed_bound(section: configparser.SectionProxy, key: str, default: float) -> float:
    """Read a speed bound, clamping it to MIN_SPEED_BOUND so normalization stays finite."""
    try:
        value = float(section.get(key, str(default)))
    except ValueError:
        logger.warning("Invalid %s in config.ini, using default %s", key, default)
        return default
    if not math.isfinite(value):
        logger.warning("Non-finite %s in config.ini, using default %s", key, default)
        return default
    return max(MIN_SPEED_BOUND, value)


def load_widget_config() -> SwerveWidgetConfig:
    """Load swerve widget settings, falling back to defaults for anything missing."""
    ensure_config_exists()
    parser = _read_parser()
    if "swerve" not in parser:
        return SwerveWidgetConfig()
    section = parser["swerve"]
    try:
        chassis_rotation = section.getboolean("chassis_rotation", fallback=DEFAULT_CHASSIS_ROTATION)
        chassis_speeds_visible = section.getboolean(
            "chassis_speeds_visible", fallback=DEFAULT_CHASSIS_SPEEDS_VISIBLE
        )
    except ValueError:
        logger.warning("Invalid boolean in [swerve] section of config.ini, using defaults")
        chassis_rotation = DEFAULT_CHASSIS_ROTATION
        chassis_speeds_visible = DEFAULT_CHASSIS_SPEEDS_VISIBLE
    return SwerveWidgetConfig(
        title=section.get("title", fallback=DEFAULT_TITLE).strip(),
        chassis_rotation=chassis_rotation,
        chassis_speeds_visible=chassis_speeds_visible,
        max_linear_speed=_speed_bound(section, "max_linear_speed", DEFAULT_MAX_LINEAR_SPEED),
        max_angular_speed=_speed_bound(section, "max_angular_speed", DEFAULT_MAX_ANGULAR_SPEED),
    )


def save_widget_config(cfg: SwerveWidgetConfig) -> None:
    parser = _read_parser()
    parser["swerve"] = {
        "title": cfg.title,
        "chassis_rotation": "true" if cfg.chassis_rotation else "false",
        "chassis_speeds_visible": "true" if cfg.chassis_speeds_visible else "false",
        "max_linear_speed": str(float(cfg.max_linear_speed)),
        "max_angular_speed": str(float(cfg.max_angular_speed)),
    }
    _write_parser(parser)


def load_demo_config() -> DemoConfig:
    ensure_config_exists()
    parser = _read_parser()
    section = parser["demo"] if "demo" in parser else {}
    try:
        update_hz = int(section.get("update_hz", str(DEFAULT_UPDATE_HZ)))
    except ValueError:
        update_hz = DEFAULT_UPDATE_HZ
    try:
        width = int(section.get("window_width", str(DEFAULT_WINDOW_WIDTH)))
        height = int(section.get("window_height", str(DEFAULT_WINDOW_HEIGHT)))
    except ValueError:
        width, height = DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
    return DemoConfig(
        update_hz=max(MIN_UPDATE_HZ, min(MAX_UPDATE_HZ, update_hz)),
        window_width=width,
        window_height=height,
    )


def save_demo_config(cfg: DemoConfig) -> None:
    parser = _read_parser()
    parser["demo"] = {
        "update_hz": str(int(cfg.update_hz)),
        "window_width": str(int(cfg.window_width)),
        "window_height": str(int(cfg.window_height)),
    }
    _write_parser(parser)
