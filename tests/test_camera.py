"""Mini README: Tests for follow-camera placement and mode selection.

Structure:
    * free_camera - ground offset, cruise collapse and eye height.
    * fallback_camera - zoom/pitch interpolation.
    * resolve_camera_mode - capability probing for ``auto``.
    * driver fallback - sinks rejecting free cameras.
"""

from __future__ import annotations

import pytest

from skyroute.airplane import AirplaneState
from skyroute.animation import (
    AnimationDriver,
    CameraConfig,
    CameraMode,
    CameraUnsupportedError,
    FallbackCameraDirective,
    FreeCameraDirective,
    fallback_camera,
    free_camera,
    place_camera,
    resolve_camera_mode,
)
from skyroute.renderers.providers import RecordingSink
from skyroute.route import FlightRoute


def _airplane() -> AirplaneState:
    return AirplaneState(position=(10.0, 20.0), altitude=100.0)


def test_free_camera_on_the_ground_sits_behind_the_aircraft() -> None:
    directive = free_camera(_airplane(), route_elevation=0.0, anim_fade=0.0)

    assert directive.eye[0] == pytest.approx(10.0 - 0.0014)
    assert directive.eye[1] == pytest.approx(20.0 + 0.0014)
    assert directive.eye[2] == pytest.approx(150.0)
    assert directive.target == (10.0, 20.0, 100.0)


def test_free_camera_offset_collapses_and_rises_at_cruise() -> None:
    directive = free_camera(_airplane(), route_elevation=3000.0, anim_fade=1.0)

    assert directive.eye[0] == pytest.approx(10.0)
    assert directive.eye[1] == pytest.approx(20.0)
    assert directive.eye[2] == pytest.approx(100.0 + 50.0 + 10_000_000.0)


def test_free_camera_offset_halfway() -> None:
    config = CameraConfig(max_height=1000.0)
    directive = free_camera(_airplane(), route_elevation=100.0, anim_fade=0.5, config=config)

    assert directive.eye[0] == pytest.approx(10.0 - 0.0007)
    assert directive.eye[2] == pytest.approx(100.0 + 50.0 + 500.0)


def test_fallback_camera_interpolates_zoom_and_pitch() -> None:
    low = fallback_camera(_airplane(), anim_fade=0.0)
    high = fallback_camera(_airplane(), anim_fade=1.0)

    assert (low.zoom, low.pitch, low.bearing) == (19.0, 70.0, 0.0)
    assert (high.zoom, high.pitch) == (8.0, 45.0)
    assert low.center == (10.0, 20.0, 100.0)
    assert low.as_dict()["mode"] == "fallback"


def test_resolve_camera_mode() -> None:
    assert resolve_camera_mode("auto", True) is CameraMode.FREE
    assert resolve_camera_mode(CameraMode.AUTO, False) is CameraMode.FALLBACK
    assert resolve_camera_mode("free", False) is CameraMode.FREE
    assert resolve_camera_mode("fallback", True) is CameraMode.FALLBACK
    with pytest.raises(ValueError):
        resolve_camera_mode("orbit", True)


def test_place_camera_requires_resolved_mode() -> None:
    assert isinstance(place_camera(CameraMode.FREE, _airplane(), 0.0, 0.0), FreeCameraDirective)
    assert isinstance(
        place_camera(CameraMode.FALLBACK, _airplane(), 0.0, 0.0), FallbackCameraDirective
    )
    with pytest.raises(ValueError):
        place_camera(CameraMode.AUTO, _airplane(), 0.0, 0.0)


def _route() -> FlightRoute:
    return FlightRoute.from_points([(0.0, 0.0), (0.1, 0.0)], [0.0, 500.0])


def test_auto_mode_uses_fallback_for_sinks_without_free_camera() -> None:
    sink = RecordingSink(free_camera=False)
    driver = AnimationDriver(_route(), sink, camera_mode="auto")
    driver.run(max_frames=3)

    assert driver.camera_mode is CameraMode.FALLBACK
    assert all(isinstance(camera, FallbackCameraDirective) for camera in sink.cameras)


def test_rejected_free_camera_switches_to_fallback() -> None:
    sink = RecordingSink(reject_free_camera=True)
    driver = AnimationDriver(_route(), sink, camera_mode=CameraMode.AUTO)
    assert driver.camera_mode is CameraMode.FREE

    frames = driver.run(max_frames=3)

    assert driver.camera_mode is CameraMode.FALLBACK
    assert len(sink.cameras) == 3
    assert all(isinstance(camera, FallbackCameraDirective) for camera in sink.cameras)
    assert isinstance(frames[0].camera, FallbackCameraDirective)


def test_rejected_free_camera_propagates_without_opt_in() -> None:
    sink = RecordingSink(reject_free_camera=True)
    driver = AnimationDriver(_route(), sink, camera_fallback_on_error=False)
    driver.start()
    driver.on_frame(0.0)
    with pytest.raises(CameraUnsupportedError):
        driver.on_frame(16.0)
