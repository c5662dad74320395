"""Tests for the ui.utils module."""

from __future__ import annotations

import pytest

from swerve_dash.ui.utils import clamp, clamp_int, section_header


class TestClamp:
    """Tests for clamp and clamp_int."""

    @pytest.mark.parametrize(
        "value,expected",
        [(-1.0, 0.0), (0.5, 0.5), (2.0, 1.0)],
    )
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp(value, 0.0, 1.0) == expected

    def test_clamp_int_truncates(self) -> None:
        """Floats are converted before clamping."""
        assert clamp_int(7.9, 5, 120) == 7
        assert clamp_int(500, 5, 120) == 120


class TestSectionHeader:
    """Tests for section_header."""

    def test_bold_label(self, qapp) -> None:
        label = section_header("Scaling")
        assert label.text() == "Scaling"
        assert label.objectName() == "sectionHeader"
        assert label.font().bold()
