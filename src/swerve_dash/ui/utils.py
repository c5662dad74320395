"""Shared UI utilities for the swerve dashboard.

Helper functions and small widgets reused by the diagram, the widget
container and the settings editor.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QLabel, QWidget


# Stroke colors
CURRENT_STATE_COLOR = QColor("#dc2626")  # red
DESIRED_COLOR = QColor("#0284c7")  # sky
CURRENT_CHASSIS_COLOR = QColor("#16a34a")  # green
OUTLINE_COLOR = QColor("#94a3b8")
FILL_COLOR = QColor("#1f2937")

# Preview rendering
PREVIEW_OPACITY = 0.25


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value to the specified range.

    Args:
        value: The value to clamp.
        min_val: Minimum allowed value.
        max_val: Maximum allowed value.

    Returns:
        Clamped value within [min_val, max_val].
    """
    return max(min_val, min(max_val, value))


def clamp_int(value: int, min_val: int, max_val: int) -> int:
    """Clamp an integer value to the specified range."""
    return max(min_val, min(max_val, int(value)))


def section_header(text: str, parent: Optional[QWidget] = None) -> QLabel:
    """Create a bold label used to separate groups of editor rows."""
    label = QLabel(text, parent)
    label.setObjectName("sectionHeader")
    font = label.font()
    font.setBold(True)
    label.setFont(font)
    return label
