from __future__ import annotations

import os

import pytest

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def qapp():
    """Create a QApplication for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def cfg_path(tmp_path, monkeypatch):
    """Point config.ini at a temporary directory."""
    import swerve_dash.config as config

    path = tmp_path / "config.ini"
    monkeypatch.setattr(config, "config_path", lambda: path)
    return path
