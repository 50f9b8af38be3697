"""Mini README: Tests for the smoothed airplane state.

Checks smoothing limits (tiny and saturating time steps), altitude-gated
gear, lights and banking, and heading blending across the +/-180 seam.
"""

from __future__ import annotations

import math

import pytest

from skyroute.airplane import AirplaneState, AirplaneTuning
from skyroute.route import RouteSample


def _target(altitude: float = 0.0, bearing: float = 45.0, pitch: float = 3.0) -> RouteSample:
    return RouteSample(position=(1.0, 2.0), altitude=altitude, bearing=bearing, pitch=pitch)


def test_tiny_time_step_leaves_state_unchanged() -> None:
    airplane = AirplaneState(position=(0.5, 0.5), altitude=80.0, bearing=10.0, pitch=1.0)
    airplane.update(_target(altitude=900.0), 0.0)

    assert airplane.position == (0.5, 0.5)
    assert airplane.altitude == 80.0
    assert airplane.bearing == pytest.approx(10.0)
    assert airplane.pitch == 1.0
    assert airplane.anim_time_s == 0.0


def test_large_time_step_snaps_position_and_altitude() -> None:
    airplane = AirplaneState(position=(-4.0, 7.0), altitude=10.0)
    airplane.update(_target(altitude=250.0), 100.0)

    assert airplane.position == (1.0, 2.0)
    assert airplane.altitude == 250.0
    assert airplane.bearing == pytest.approx(45.0)
    assert airplane.pitch == pytest.approx(3.0)


def test_rotation_lags_translation() -> None:
    airplane = AirplaneState()
    airplane.update(_target(altitude=100.0, bearing=90.0, pitch=10.0), 10.0)

    # Position factor 0.5, rotation factor 0.1.
    assert airplane.altitude == pytest.approx(50.0)
    assert airplane.bearing == pytest.approx(9.0)
    assert airplane.pitch == pytest.approx(1.0)


def test_animation_time_accumulates() -> None:
    airplane = AirplaneState()
    for _ in range(4):
        airplane.update(_target(), 250.0)
    assert airplane.anim_time_s == pytest.approx(1.0)


def test_on_ground_effects() -> None:
    airplane = AirplaneState()
    airplane.update(_target(altitude=0.0), 16.0)

    assert airplane.front_gear_rotation == 0.0
    assert airplane.rear_gear_rotation == 0.0
    assert airplane.light_taxi_phase == 1.0
    assert airplane.roll == 0.0


def test_gear_rotation_is_monotonic_over_its_window() -> None:
    fronts = []
    for altitude in range(0, 80, 5):
        airplane = AirplaneState(altitude=float(altitude))
        airplane.update(_target(altitude=float(altitude)), 100.0)
        fronts.append(airplane.front_gear_rotation)
        assert airplane.rear_gear_rotation == pytest.approx(-airplane.front_gear_rotation)

    assert fronts == sorted(fronts)
    assert fronts[0] == 0.0
    assert fronts[5] == pytest.approx(45.0)  # 25 m is half of the 50 m window
    assert all(value == 90.0 for value in fronts[10:])


def test_lights_stay_in_range() -> None:
    airplane = AirplaneState()
    for _ in range(50):
        airplane.update(_target(altitude=60.0), 37.0)
        assert 0.75 <= airplane.light_phase <= 1.0
        assert 0.0 <= airplane.light_phase_strobe <= 1.0
        assert 0.0 <= airplane.light_taxi_phase <= 1.0
    assert airplane.light_taxi_phase == pytest.approx(0.4)


def test_banking_only_once_airborne() -> None:
    airplane = AirplaneState(altitude=200.0)
    airplane.update(_target(altitude=200.0), 100.0)

    expected = math.degrees(math.sin(0.1 * math.pi * 0.2) * 0.1)
    assert airplane.roll == pytest.approx(expected)

    low = AirplaneState(altitude=40.0)
    low.update(_target(altitude=40.0), 100.0)
    assert low.roll == 0.0


def test_bearing_blends_across_the_seam() -> None:
    airplane = AirplaneState(bearing=170.0)
    airplane.update(_target(bearing=-170.0), 50.0)
    assert airplane.bearing == pytest.approx(180.0)

    airplane.update(_target(bearing=-170.0), 100.0)
    assert airplane.bearing == pytest.approx(-170.0)


def test_from_sample_places_airplane_on_target() -> None:
    sample = _target(altitude=12.0, bearing=-30.0, pitch=2.0)
    airplane = AirplaneState.from_sample(sample)
    assert airplane.position == sample.position
    assert airplane.altitude == 12.0
    assert airplane.bearing == -30.0
    assert airplane.pitch == 2.0


def test_tuning_requires_heavier_rotation() -> None:
    with pytest.raises(ValueError):
        AirplaneTuning(position_rate=0.01, rotation_rate=0.05)
    with pytest.raises(ValueError):
        AirplaneTuning(gear_window=0.0)
