"""Mini README: In-memory sink recording every frame.

Structure:
    * RecordingSink - keeps snapshots and camera directives in lists.

Used by the HTTP interface to return headless simulations and by tests to
inspect what the driver handed over. ``free_camera=False`` makes it behave
like a renderer without free camera control; combined with
``reject_free_camera=True`` it raises on free directives instead, which
exercises the driver's fallback path.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base import FrameSink
from ..registry import REGISTRY
from ...animation.camera import CameraDirective, CameraMode, CameraUnsupportedError
from ...export import RenderSnapshot


class RecordingSink(FrameSink):
    """Keep every handed-over frame for later inspection."""

    sink_name = "recording"

    def __init__(self, *, free_camera: bool = True, reject_free_camera: bool = False) -> None:
        self.supports_free_camera = free_camera
        self.reject_free_camera = reject_free_camera
        super().__init__()
        self.initial_feature: Optional[Dict[str, Any]] = None
        self.snapshots: List[RenderSnapshot] = []
        self.cameras: List[CameraDirective] = []

    def publish_initial(self, feature: Dict[str, Any]) -> None:
        super().publish_initial(feature)
        self.initial_feature = feature

    def publish_frame(self, snapshot: RenderSnapshot) -> None:
        self.snapshots.append(snapshot)

    def apply_camera(self, directive: CameraDirective) -> None:
        if self.reject_free_camera and directive.mode is CameraMode.FREE:
            raise CameraUnsupportedError("free camera control is not available")
        self.cameras.append(directive)


REGISTRY.register(RecordingSink)
