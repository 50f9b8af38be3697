"""Mini README: Animation loop and follow camera.

Exports the pure ``tick`` step, its configuration and state types, the
stateful ``AnimationDriver`` used by hosts, and the camera placement
helpers.
"""

from .camera import (
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
from .driver import (
    AnimationConfig,
    AnimationDriver,
    DriverState,
    EndOfRoutePolicy,
    Frame,
    altitude_fade,
    frame_delta,
    tick,
    timelapse_factor,
)

__all__ = [
    "AnimationConfig",
    "AnimationDriver",
    "CameraConfig",
    "CameraMode",
    "CameraUnsupportedError",
    "DriverState",
    "EndOfRoutePolicy",
    "FallbackCameraDirective",
    "Frame",
    "FreeCameraDirective",
    "altitude_fade",
    "fallback_camera",
    "frame_delta",
    "free_camera",
    "place_camera",
    "resolve_camera_mode",
    "tick",
    "timelapse_factor",
]
