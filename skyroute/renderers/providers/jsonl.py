"""Mini README: JSON Lines sink streaming frames to a file or stream.

Structure:
    * JsonLinesSink - writes one JSON object per frame.

Each line pairs the model-layer feature with the camera directive applied
in the same frame, so an external renderer (or a replay script) can
consume the animation without running Python.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO, Any, Dict, Optional

from ..base import FrameSink
from ..registry import REGISTRY
from ...animation.camera import CameraDirective
from ...export import RenderSnapshot
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class JsonLinesSink(FrameSink):
    """Serialise frames as JSON Lines."""

    sink_name = "jsonl"

    def __init__(self, *, path: Optional[Path] = None, stream: Optional[IO[str]] = None) -> None:
        super().__init__()
        self._owns_stream = stream is None and path is not None
        if self._owns_stream:
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
            stream = path.open("w", encoding="utf-8")
            LOGGER.info("Writing frames to %s", path)
        self._stream: IO[str] = stream or sys.stdout
        self._pending: Optional[Dict[str, Any]] = None
        self.frames_written = 0

    def _write(self, record: Dict[str, Any]) -> None:
        self._stream.write(json.dumps(record) + "\n")

    def publish_initial(self, feature: Dict[str, Any]) -> None:
        super().publish_initial(feature)
        self._write({"type": "initial", "feature": feature})

    def publish_frame(self, snapshot: RenderSnapshot) -> None:
        self._flush_pending()
        self._pending = {"type": "frame", "feature": snapshot.to_feature()}

    def apply_camera(self, directive: CameraDirective) -> None:
        if self._pending is None:
            self._write({"type": "camera", "camera": directive.as_dict()})
            return
        self._pending["camera"] = directive.as_dict()
        self._flush_pending()

    def _flush_pending(self) -> None:
        if self._pending is not None:
            self._write(self._pending)
            self.frames_written += 1
            self._pending = None

    def close(self) -> None:
        self._flush_pending()
        self._stream.flush()
        if self._owns_stream:
            self._stream.close()
        LOGGER.debug("JsonLinesSink closed after %s frames", self.frames_written)


REGISTRY.register(JsonLinesSink)
