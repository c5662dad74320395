"""Tests for the robot diagram view.

Pure geometry helpers are tested directly; painting is exercised by grabbing
the widget under the offscreen platform.
"""

from __future__ import annotations

import pytest

from swerve_dash.channel import PREVIEW_TELEMETRY
from swerve_dash.telemetry import ChassisSpeed, ModuleState, SwerveTelemetry
from swerve_dash.ui.robot_swerve import (
    MAX_ARROW_LENGTH,
    RobotSwerveView,
    arc_span_sixteenths,
    arrow_length,
    is_visible_omega,
    is_visible_speed,
    polar_to_cartesian,
)


# ============================================================================
# Geometry Helper Tests
# ============================================================================


class TestGeometryHelpers:
    """Tests for the pure drawing helpers."""

    def test_polar_zero_points_up(self) -> None:
        """Angle zero is 12 o'clock in screen space."""
        x, y = polar_to_cartesian(50.0, 50.0, 10.0, 0.0)
        assert x == pytest.approx(50.0)
        assert y == pytest.approx(40.0)

    def test_polar_quarter_turn(self) -> None:
        """A positive quarter turn lands at 3 o'clock."""
        x, y = polar_to_cartesian(0.0, 0.0, 10.0, 90.0)
        assert x == pytest.approx(10.0)
        assert y == pytest.approx(0.0, abs=1e-9)

    def test_arrow_length(self) -> None:
        """Arrow length scales with the magnitude of a normalized speed."""
        assert arrow_length(1.0) == MAX_ARROW_LENGTH
        assert arrow_length(-0.5) == MAX_ARROW_LENGTH / 2

    def test_visibility_thresholds(self) -> None:
        """Tiny or missing values are not drawn."""
        assert not is_visible_speed(None)
        assert not is_visible_speed(0.001)
        assert is_visible_speed(-0.5)
        assert not is_visible_omega(None)
        assert not is_visible_omega(0.5)
        assert is_visible_omega(-90.0)

    def test_arc_span(self) -> None:
        """Qt spans are in sixteenths of a degree, counter-clockwise positive."""
        assert arc_span_sixteenths(90.0) == -1440
        assert arc_span_sixteenths(-45.0) == 720


# ============================================================================
# View Tests
# ============================================================================


class TestRobotSwerveView:
    """Tests for RobotSwerveView state and painting."""

    def test_starts_empty(self, qapp) -> None:
        view = RobotSwerveView()
        assert view.telemetry is None
        assert not view.is_preview

    def test_set_and_clear(self, qapp) -> None:
        view = RobotSwerveView()
        view.set_telemetry(PREVIEW_TELEMETRY, preview=True)
        assert view.telemetry is PREVIEW_TELEMETRY
        assert view.is_preview
        view.clear()
        assert view.telemetry is None
        assert not view.is_preview

    @pytest.mark.parametrize(
        "telemetry",
        [
            None,
            PREVIEW_TELEMETRY,
            SwerveTelemetry(rotation=0.0, current_states=(ModuleState(-0.8, 30.0),)),
            SwerveTelemetry(
                rotation=135.0,
                current_states=tuple(ModuleState(0.4, a) for a in (0.0, 90.0, 180.0, -90.0)),
                desired_states=tuple(ModuleState(0.6, a) for a in (10.0, 100.0, 190.0, -80.0)),
                current_speeds=ChassisSpeed(0.5, 45.0, 120.0),
                desired_speeds=ChassisSpeed(0.7, 50.0, -200.0),
            ),
        ],
    )
    def test_paints_without_error(self, qapp, telemetry) -> None:
        """Every snapshot shape renders."""
        view = RobotSwerveView()
        view.resize(200, 160)
        view.set_telemetry(telemetry, chassis_rotation=True, chassis_speeds_visible=True)
        pixmap = view.grab()
        assert not pixmap.isNull()
        assert pixmap.width() == 200

    def test_hidden_chassis_speeds(self, qapp) -> None:
        """Chassis speeds can be switched off."""
        view = RobotSwerveView()
        view.resize(120, 120)
        view.set_telemetry(PREVIEW_TELEMETRY, chassis_rotation=False, chassis_speeds_visible=False)
        assert not view.grab().isNull()
