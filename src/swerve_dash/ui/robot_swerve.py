"""Top-down schematic of a four-module swerve robot.

Drawing happens in a 100x100 logical box (origin top-left, +y down) that is
scaled to the widget. Angles follow the telemetry convention: 0 points to the
front of the robot (up) and positive angles turn counter-clockwise.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QPainter, QPainterPath, QPen, QColor
from PySide6.QtWidgets import QSizePolicy, QWidget

from ..telemetry import ChassisSpeed, ModuleState, SwerveTelemetry
from .utils import (
    CURRENT_CHASSIS_COLOR,
    CURRENT_STATE_COLOR,
    DESIRED_COLOR,
    FILL_COLOR,
    OUTLINE_COLOR,
    PREVIEW_OPACITY,
)

# Geometry of the logical box
VIEW_SIZE = 100.0
VIEW_PADDING = 25.0  # room for vectors that leave the chassis
MODULE_TRANSLATIONS: tuple[tuple[float, float], ...] = ((8.0, 1.0), (83.0, 1.0), (8.0, 76.0), (83.0, 76.0))
MODULE_WELL_CENTERS: tuple[tuple[float, float], ...] = ((12.5, 12.5), (87.5, 12.5), (12.5, 87.5), (87.5, 87.5))
MODULE_WELL_RADIUS = 12.0
WHEEL_W = 9.0
WHEEL_H = 23.0
WHEEL_TREAD_Y = (3.0, 5.0, 7.5, 10.0, 13.0, 15.5, 18.0, 20.0)
ARC_RADIUS = 25.0
ARC_HEAD_SWEEP = 6.0  # degrees of arc covered by the arrow head

# Vectors
MAX_ARROW_LENGTH = 32.0
MIN_SPEED_THRESHOLD = 0.01
MIN_OMEGA_THRESHOLD = 1.0
STROKE_WIDTH = 1.5


def polar_to_cartesian(cx: float, cy: float, r: float, angle: float) -> tuple[float, float]:
    """Point at ``angle`` degrees clockwise from 12 o'clock on a circle in screen space."""
    radians = math.radians(angle - 90.0)
    return cx + r * math.cos(radians), cy + r * math.sin(radians)


def arrow_length(value: float) -> float:
    """Length of the vector drawn for a normalized speed."""
    return MAX_ARROW_LENGTH * abs(value)


def is_visible_speed(value: float | None) -> bool:
    return value is not None and abs(value) >= MIN_SPEED_THRESHOLD


def is_visible_omega(value: float | None) -> bool:
    return value is not None and abs(value) >= MIN_OMEGA_THRESHOLD


def arc_span_sixteenths(angle: float) -> int:
    """QPainter span for an arc running ``angle`` degrees clockwise on screen."""
    return int(round(-angle * 16))


class RobotSwerveView(QWidget):
    """Paints module states, chassis speeds and rotation arcs over a robot outline."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(120, 120)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self._telemetry: SwerveTelemetry | None = None
        self._chassis_rotation = True
        self._chassis_speeds_visible = True
        self._preview = False

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def telemetry(self) -> SwerveTelemetry | None:
        return self._telemetry

    @property
    def is_preview(self) -> bool:
        return self._preview

    def set_telemetry(
        self,
        telemetry: SwerveTelemetry | None,
        *,
        chassis_rotation: bool = True,
        chassis_speeds_visible: bool = True,
        preview: bool = False,
    ) -> None:
        """Replace the drawn snapshot and schedule a repaint."""
        self._telemetry = telemetry
        self._chassis_rotation = chassis_rotation
        self._chassis_speeds_visible = chassis_speeds_visible
        self._preview = preview
        self.update()

    def clear(self) -> None:
        self.set_telemetry(None)

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def paintEvent(self, event) -> None:  # type: ignore[override]
        telemetry = self._telemetry
        if telemetry is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        if self._preview:
            painter.setOpacity(PREVIEW_OPACITY)

        side = min(self.width(), self.height())
        scale = side / (VIEW_SIZE + 2 * VIEW_PADDING)
        painter.translate(self.width() / 2, self.height() / 2)
        painter.scale(scale, scale)
        if self._chassis_rotation and telemetry.rotation is not None:
            painter.rotate(-telemetry.rotation)
        painter.translate(-VIEW_SIZE / 2, -VIEW_SIZE / 2)

        self._draw_chassis(painter)
        self._draw_modules(painter, telemetry.current_states, telemetry.desired_states)
        if self._chassis_speeds_visible:
            painter.save()
            painter.translate(VIEW_SIZE / 2, VIEW_SIZE / 2)
            self._draw_chassis_speed(painter, telemetry.desired_speeds, DESIRED_COLOR)
            self._draw_chassis_speed(painter, telemetry.current_speeds, CURRENT_CHASSIS_COLOR)
            painter.restore()
        painter.end()

    def _pen(self, color: QColor, width: float = 1.0) -> QPen:
        pen = QPen(color, width)
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        if self._preview:
            pen.setStyle(Qt.DashLine)
        return pen

    def _draw_chassis(self, painter: QPainter) -> None:
        painter.setPen(self._pen(OUTLINE_COLOR))
        painter.setBrush(QBrush(FILL_COLOR))
        painter.drawRoundedRect(QRectF(0.5, 0.5, VIEW_SIZE - 1, VIEW_SIZE - 1), 12, 12)
        painter.drawRect(QRectF(12.5, 12.5, 75.0, 75.0))

        # Edge ticks
        painter.setBrush(Qt.NoBrush)
        for start, end in (((1, 50), (12, 50)), ((88, 50), (99, 50)), ((50, 1), (50, 12)), ((50, 88), (50, 99))):
            painter.drawLine(QPointF(*start), QPointF(*end))

        # Heading chevron, pointing to the front
        chevron = QPainterPath(QPointF(50, 32))
        chevron.lineTo(65, 59)
        chevron.lineTo(50, 49)
        chevron.lineTo(35, 59)
        chevron.closeSubpath()
        painter.drawPath(chevron)

        painter.setBrush(QBrush(FILL_COLOR))
        for cx, cy in MODULE_WELL_CENTERS:
            painter.drawEllipse(QPointF(cx, cy), MODULE_WELL_RADIUS, MODULE_WELL_RADIUS)

    def _draw_modules(
        self,
        painter: QPainter,
        current_states: Sequence[ModuleState] | None,
        desired_states: Sequence[ModuleState] | None,
    ) -> None:
        for index, (tx, ty) in enumerate(MODULE_TRANSLATIONS):
            current = current_states[index] if current_states and index < len(current_states) else None
            desired = desired_states[index] if desired_states and index < len(desired_states) else None

            painter.save()
            painter.translate(tx, ty)

            if desired is not None and is_visible_speed(desired.speed):
                painter.save()
                self._rotate_about_wheel_mid(painter, -desired.angle)
                self._draw_wheel_vector(painter, desired.speed, DESIRED_COLOR)
                painter.restore()

            painter.save()
            self._rotate_about_wheel_mid(painter, -(current.angle if current is not None else 0.0))
            self._draw_wheel(painter)
            if current is not None and is_visible_speed(current.speed):
                self._draw_wheel_vector(painter, current.speed, CURRENT_STATE_COLOR)
            painter.restore()

            painter.restore()

    @staticmethod
    def _rotate_about_wheel_mid(painter: QPainter, angle: float) -> None:
        painter.translate(WHEEL_W / 2, WHEEL_H / 2)
        painter.rotate(angle)
        painter.translate(-WHEEL_W / 2, -WHEEL_H / 2)

    def _draw_wheel(self, painter: QPainter) -> None:
        painter.setPen(self._pen(OUTLINE_COLOR))
        painter.setBrush(QBrush(FILL_COLOR))
        painter.drawRoundedRect(QRectF(1, 1, 7, 21), 2, 2)
        for y in WHEEL_TREAD_Y:
            painter.drawLine(QPointF(1, y), QPointF(8, y))

    def _draw_arrow(self, painter: QPainter, length: float, color: QColor) -> None:
        painter.setPen(self._pen(color, STROKE_WIDTH))
        painter.setBrush(Qt.NoBrush)
        tip = QPointF(0, -length)
        painter.drawLine(QPointF(0, 0), tip)
        painter.drawLine(tip, QPointF(-3, -length + 2.5))
        painter.drawLine(tip, QPointF(3, -length + 2.5))

    def _draw_wheel_vector(self, painter: QPainter, value: float, color: QColor) -> None:
        painter.save()
        if value < 0:
            painter.translate(WHEEL_W / 2, WHEEL_H)
            painter.rotate(-180)
        else:
            painter.translate(WHEEL_W / 2, 0)
        self._draw_arrow(painter, arrow_length(value), color)
        painter.restore()

    def _draw_chassis_speed(self, painter: QPainter, speeds: ChassisSpeed | None, color: QColor) -> None:
        if speeds is None:
            return
        if is_visible_speed(speeds.speed):
            painter.save()
            painter.rotate(-speeds.angle)
            if speeds.speed < 0:
                painter.rotate(-180)
            self._draw_arrow(painter, arrow_length(speeds.speed), color)
            painter.restore()
        if is_visible_omega(speeds.omega):
            self._draw_arc(painter, -speeds.omega, color)

    def _draw_arc(self, painter: QPainter, angle: float, color: QColor, radius: float = ARC_RADIUS) -> None:
        painter.save()
        painter.setPen(self._pen(color, STROKE_WIDTH))
        painter.setBrush(Qt.NoBrush)
        painter.drawArc(QRectF(-radius, -radius, 2 * radius, 2 * radius), 90 * 16, arc_span_sixteenths(angle))

        # Arrow head at the end of the arc, barbs trailing the direction of travel
        tip = QPointF(*polar_to_cartesian(0.0, 0.0, radius, angle))
        barb_angle = angle - math.copysign(ARC_HEAD_SWEEP, angle)
        painter.drawLine(tip, QPointF(*polar_to_cartesian(0.0, 0.0, radius + 3, barb_angle)))
        painter.drawLine(tip, QPointF(*polar_to_cartesian(0.0, 0.0, radius - 3, barb_angle)))
        painter.restore()
