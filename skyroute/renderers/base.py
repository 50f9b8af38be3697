"""Mini README: Abstract base class for renderer handoff.

Structure:
    * FrameSink - abstract interface receiving snapshots and camera directives.

A sink is whatever sits on the far side of the animation loop: a map
renderer binding, a recorder for tests and HTTP responses, or a file
writer. Sinks advertise whether they accept free-form camera directives so
the driver can pick a camera mode up front.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..animation.camera import CameraDirective
from ..export import RenderSnapshot
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class FrameSink(ABC):
    """Base interface for renderer integrations."""

    sink_name: str = "generic"
    supports_free_camera: bool = True

    def __init__(self) -> None:
        LOGGER.debug(
            "Initialising %s sink (free camera: %s)", self.sink_name, self.supports_free_camera
        )

    def publish_initial(self, feature: Dict[str, Any]) -> None:
        """Receive the zeroed feature placed before the first frame."""

        LOGGER.debug("Sink %s received initial feature at %s", self.sink_name, feature["geometry"])

    @abstractmethod
    def publish_frame(self, snapshot: RenderSnapshot) -> None:
        """Receive the aircraft snapshot for one frame."""

    @abstractmethod
    def apply_camera(self, directive: CameraDirective) -> None:
        """Move the camera; raise ``CameraUnsupportedError`` to refuse a free camera."""

    def close(self) -> None:
        """Release any resources held by the sink."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for interface displays."""

        return {
            "sink": self.sink_name,
            "free_camera": "supported" if self.supports_free_camera else "unsupported",
        }
