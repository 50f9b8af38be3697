"""Mini README: Follow-camera placement for the animated aircraft.

Structure:
    * CameraMode - free, fallback or capability-probed ``auto``.
    * CameraConfig - offsets, heights and fallback zoom/pitch ranges.
    * FreeCameraDirective - eye position plus look-at target.
    * FallbackCameraDirective - center/zoom/bearing/pitch for renderers
      without free-form camera control.
    * CameraUnsupportedError - raised by sinks refusing free cameras.
    * free_camera / fallback_camera / place_camera / resolve_camera_mode.

Placement is a pure function of the aircraft position, its smoothed
altitude, the raw route elevation and the altitude fade. Near the ground
the eye sits diagonally behind the aircraft; the offset collapses and the
eye climbs as the flight reaches cruise altitude.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from ..airplane import AirplaneState
from ..utils.math_utils import lerp


class CameraUnsupportedError(RuntimeError):
    """Raised by a renderer that cannot honour a free camera directive."""


class CameraMode(str, Enum):
    FREE = "free"
    FALLBACK = "fallback"
    AUTO = "auto"


@dataclass(frozen=True, slots=True)
class CameraConfig:
    """Tunable camera placement constants."""

    offset_longitude: float = -0.0014
    offset_latitude: float = 0.0014
    offset_fade_altitude: float = 200.0
    base_height: float = 50.0
    max_height: float = 10_000_000.0
    fallback_zoom: Tuple[float, float] = (19.0, 8.0)
    fallback_pitch: Tuple[float, float] = (70.0, 45.0)

    def __post_init__(self) -> None:
        if self.offset_fade_altitude <= 0:
            raise ValueError("offset_fade_altitude must be positive")


@dataclass(frozen=True, slots=True)
class FreeCameraDirective:
    """Eye position and look-at target in lon/lat/meters."""

    eye: Tuple[float, float, float]
    target: Tuple[float, float, float]

    mode = CameraMode.FREE

    def as_dict(self) -> Dict[str, Any]:
        return {"mode": self.mode.value, "eye": list(self.eye), "target": list(self.target)}


@dataclass(frozen=True, slots=True)
class FallbackCameraDirective:
    """Map-style camera centred on the aircraft."""

    center: Tuple[float, float, float]
    zoom: float
    bearing: float
    pitch: float

    mode = CameraMode.FALLBACK

    def as_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "center": list(self.center),
            "zoom": self.zoom,
            "bearing": self.bearing,
            "pitch": self.pitch,
        }


CameraDirective = Union[FreeCameraDirective, FallbackCameraDirective]


def free_camera(
    airplane: AirplaneState,
    route_elevation: float,
    anim_fade: float,
    config: CameraConfig = CameraConfig(),
) -> FreeCameraDirective:
    """Place the eye behind the aircraft, rising with the altitude fade."""

    longitude, latitude = airplane.position
    offset_ratio = route_elevation / config.offset_fade_altitude
    offset_lng = lerp(config.offset_longitude, 0.0, offset_ratio)
    offset_lat = lerp(config.offset_latitude, 0.0, offset_ratio)
    eye_altitude = airplane.altitude + config.base_height + lerp(0.0, config.max_height, anim_fade)
    return FreeCameraDirective(
        eye=(longitude + offset_lng, latitude + offset_lat, eye_altitude),
        target=(longitude, latitude, airplane.altitude),
    )


def fallback_camera(
    airplane: AirplaneState, anim_fade: float, config: CameraConfig = CameraConfig()
) -> FallbackCameraDirective:
    """Center on the aircraft and zoom out as it climbs."""

    longitude, latitude = airplane.position
    return FallbackCameraDirective(
        center=(longitude, latitude, airplane.altitude),
        zoom=lerp(config.fallback_zoom[0], config.fallback_zoom[1], anim_fade),
        bearing=0.0,
        pitch=lerp(config.fallback_pitch[0], config.fallback_pitch[1], anim_fade),
    )


def resolve_camera_mode(requested: CameraMode | str, supports_free_camera: bool) -> CameraMode:
    """Turn ``auto`` into a concrete mode using the renderer's capability."""

    requested = CameraMode(requested)
    if requested is CameraMode.AUTO:
        return CameraMode.FREE if supports_free_camera else CameraMode.FALLBACK
    return requested


def place_camera(
    mode: CameraMode,
    airplane: AirplaneState,
    route_elevation: float,
    anim_fade: float,
    config: CameraConfig = CameraConfig(),
) -> CameraDirective:
    """Build the directive for a resolved ``mode``."""

    if mode is CameraMode.FREE:
        return free_camera(airplane, route_elevation, anim_fade, config)
    if mode is CameraMode.FALLBACK:
        return fallback_camera(airplane, anim_fade, config)
    raise ValueError(f"Camera mode {mode!r} must be resolved before placement")
