"""Mini README: Tests for the scalar blending helpers.

Structure:
    * clamp/lerp properties - idempotence, range and endpoint behaviour.
    * sin_phase - periodicity and range.
    * heading helpers - wrapping and shortest-arc blending.
"""

from __future__ import annotations

import math

import pytest

from skyroute.utils.math_utils import (
    clamp01,
    lerp,
    lerp_angle,
    rad_to_deg,
    sin_phase,
    wrap_degrees,
)

SAMPLE_VALUES = [-1e9, -3.5, -0.0, 0.0, 0.25, 0.5, 1.0, 1.0001, 42.0, 1e12]


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_clamp01_is_idempotent_and_in_range(value: float) -> None:
    clamped = clamp01(value)
    assert 0.0 <= clamped <= 1.0
    assert clamp01(clamped) == clamped


def test_lerp_endpoints_and_midpoint() -> None:
    assert lerp(3.0, 11.0, 0.0) == 3.0
    assert lerp(3.0, 11.0, 1.0) == 11.0
    assert lerp(3.0, 11.0, 0.5) == pytest.approx((3.0 + 11.0) / 2)


def test_lerp_never_extrapolates() -> None:
    """Factors outside [0, 1] clamp to the nearest endpoint."""

    assert lerp(-2.0, 6.0, -5.0) == -2.0
    assert lerp(-2.0, 6.0, 7.0) == 6.0


def test_rad_to_deg() -> None:
    assert rad_to_deg(math.pi) == pytest.approx(180.0)
    assert rad_to_deg(-math.pi / 2) == pytest.approx(-90.0)


@pytest.mark.parametrize("period", [0.1, 1.0, 2.0, 7.5])
@pytest.mark.parametrize("time_s", [0.0, 0.03, 0.9, 3.3, 125.75])
def test_sin_phase_is_periodic_and_bounded(time_s: float, period: float) -> None:
    value = sin_phase(time_s, period)
    assert 0.0 <= value <= 1.0
    assert sin_phase(time_s + period, period) == pytest.approx(value, abs=1e-9)


def test_sin_phase_quarter_points() -> None:
    assert sin_phase(0.0, 2.0) == pytest.approx(0.5)
    assert sin_phase(0.5, 2.0) == pytest.approx(1.0)
    assert sin_phase(1.5, 2.0) == pytest.approx(0.0)


def test_wrap_degrees() -> None:
    assert wrap_degrees(190.0) == pytest.approx(-170.0)
    assert wrap_degrees(-180.0) == pytest.approx(180.0)
    assert wrap_degrees(540.0) == pytest.approx(180.0)
    assert wrap_degrees(-725.0) == pytest.approx(-5.0)


def test_lerp_angle_takes_the_short_way_round() -> None:
    assert lerp_angle(170.0, -170.0, 0.5) == pytest.approx(180.0)
    assert lerp_angle(170.0, -170.0, 1.0) == pytest.approx(-170.0)
    assert lerp_angle(10.0, 20.0, 0.5) == pytest.approx(15.0)
    assert lerp_angle(-30.0, 45.0, 0.0) == pytest.approx(-30.0)
