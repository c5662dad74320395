"""Tests for the normalization module.

This module tests the speed bounds, saturation and sign handling of
NormalizationConfig.
"""

from __future__ import annotations

import math

import pytest

from swerve_dash.errors import InvalidConfig
from swerve_dash.normalization import ANGULAR_LIMIT, NormalizationConfig


@pytest.fixture
def norm() -> NormalizationConfig:
    return NormalizationConfig(max_linear_speed=5.0, max_angular_speed=360.0)


# ============================================================================
# Construction Tests
# ============================================================================


class TestConstruction:
    """Tests for NormalizationConfig validation."""

    @pytest.mark.parametrize("bound", [0.0, -1.0, math.nan, math.inf])
    def test_rejects_invalid_linear_bound(self, bound: float) -> None:
        """Non-positive or non-finite linear bounds should be rejected."""
        with pytest.raises(InvalidConfig, match="max_linear_speed"):
            NormalizationConfig(max_linear_speed=bound, max_angular_speed=360.0)

    @pytest.mark.parametrize("bound", [0.0, -360.0])
    def test_rejects_invalid_angular_bound(self, bound: float) -> None:
        """Non-positive angular bounds should be rejected."""
        with pytest.raises(InvalidConfig, match="max_angular_speed"):
            NormalizationConfig(max_linear_speed=5.0, max_angular_speed=bound)

    def test_rejects_non_numbers(self) -> None:
        """Strings are not accepted as bounds."""
        with pytest.raises(InvalidConfig):
            NormalizationConfig(max_linear_speed="5", max_angular_speed=360.0)  # type: ignore[arg-type]

    def test_invalid_config_is_value_error(self) -> None:
        """InvalidConfig can be handled as a ValueError."""
        with pytest.raises(ValueError):
            NormalizationConfig(max_linear_speed=0.0, max_angular_speed=0.0)

    def test_is_immutable(self) -> None:
        """NormalizationConfig should be frozen."""
        cfg = NormalizationConfig(max_linear_speed=5.0, max_angular_speed=360.0)
        with pytest.raises(AttributeError):
            cfg.max_linear_speed = 1.0  # type: ignore


# ============================================================================
# Linear Normalization Tests
# ============================================================================


class TestNormalizeLinear:
    """Tests for normalize_linear."""

    def test_half_speed(self, norm: NormalizationConfig) -> None:
        """Half the maximum maps to 0.5."""
        assert norm.normalize_linear(2.5) == pytest.approx(0.5)

    def test_zero(self, norm: NormalizationConfig) -> None:
        """Zero maps to zero, including negative zero."""
        assert norm.normalize_linear(0.0) == 0.0
        assert norm.normalize_linear(-0.0) == 0.0

    def test_saturates_negative(self, norm: NormalizationConfig) -> None:
        """Speeds beyond the maximum saturate at -1."""
        assert norm.normalize_linear(-10.0) == -1.0

    def test_saturates_at_bound(self, norm: NormalizationConfig) -> None:
        """The maximum itself maps to exactly 1."""
        assert norm.normalize_linear(5.0) == 1.0
        assert norm.normalize_linear(1e9) == 1.0

    @pytest.mark.parametrize("value", [0.1, 1.0, 2.5, 4.99, 5.0, 12.0])
    def test_sign_symmetry(self, norm: NormalizationConfig, value: float) -> None:
        """normalize_linear(-x) == -normalize_linear(x)."""
        assert norm.normalize_linear(-value) == -norm.normalize_linear(value)


# ============================================================================
# Angular Normalization Tests
# ============================================================================


class TestNormalizeAngular:
    """Tests for normalize_angular."""

    def test_zero(self, norm: NormalizationConfig) -> None:
        """Zero maps to zero."""
        assert norm.normalize_angular(0.0) == 0.0

    def test_boundary_clamp(self, norm: NormalizationConfig) -> None:
        """A full turn is capped just below 360."""
        assert norm.normalize_angular(-360.0) == -359.0
        assert norm.normalize_angular(360.0) == 359.0

    def test_scales_by_full_turn(self, norm: NormalizationConfig) -> None:
        """Half the maximum maps to half a turn."""
        assert norm.normalize_angular(180.0) == pytest.approx(180.0)

    def test_scale_uses_configured_maximum(self) -> None:
        """The configured maximum is the input drawn as a full turn."""
        cfg = NormalizationConfig(max_linear_speed=1.0, max_angular_speed=720.0)
        assert cfg.normalize_angular(180.0) == pytest.approx(90.0)

    @pytest.mark.parametrize("value", [361.0, 1e6, math.inf])
    def test_never_exceeds_limit(self, norm: NormalizationConfig, value: float) -> None:
        """Magnitude never exceeds 359, however large the input."""
        assert abs(norm.normalize_angular(value)) <= ANGULAR_LIMIT
        assert abs(norm.normalize_angular(-value)) <= ANGULAR_LIMIT

    @pytest.mark.parametrize("value", [0.5, 45.0, 180.0, 359.0, 1000.0])
    def test_sign_symmetry(self, norm: NormalizationConfig, value: float) -> None:
        """normalize_angular(-x) == -normalize_angular(x)."""
        assert norm.normalize_angular(-value) == -norm.normalize_angular(value)
