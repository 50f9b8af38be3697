"""Mini README: Frame-driven animation of an aircraft along a flight route.

Structure:
    * EndOfRoutePolicy - loop back to the start or stop at the end.
    * AnimationConfig - frozen timing, time-lapse and camera settings.
    * DriverState - explicit per-animation state threaded through ``tick``.
    * tick - pure step: advance the route phase and smooth the aircraft.
    * frame_delta - clamp wall-clock frame deltas.
    * Frame - snapshot and camera directive produced for one frame.
    * AnimationDriver - stateful shell feeding timestamps into ``tick`` and
      handing results to a frame sink.

Progress along the route is a normalised ``phase``. Each tick advances it
by ``dt * timelapse / duration`` where the time-lapse factor grows
quadratically with the raw route elevation, so ground roll plays out in
near real time and cruise flies by. Camera and time-lapse use the raw
sampled elevation rather than the smoothed altitude to avoid filter lag.
"""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional

from ..airplane import AirplaneState, AirplaneTuning
from ..export import RenderSnapshot, initial_feature
from ..logging_utils import get_logger
from ..route import FlightRoute
from ..utils.math_utils import clamp01, lerp
from .camera import (
    CameraConfig,
    CameraDirective,
    CameraMode,
    CameraUnsupportedError,
    place_camera,
    resolve_camera_mode,
)

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..renderers.base import FrameSink

LOGGER = get_logger(__name__)


class EndOfRoutePolicy(str, Enum):
    LOOP = "loop"
    STOP = "stop"


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    """Timing and time-lapse parameters of one animation run."""

    duration_ms: float = 50_000.0
    altitude_min: float = 200.0
    altitude_max: float = 3_000.0
    timelapse_min: float = 0.001
    timelapse_max: float = 10.0
    min_frame_delta_ms: float = 1.0
    max_frame_delta_ms: float = 100.0
    end_of_route: EndOfRoutePolicy = EndOfRoutePolicy.LOOP
    camera: CameraConfig = field(default_factory=CameraConfig)
    airplane: AirplaneTuning = field(default_factory=AirplaneTuning)

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.altitude_max <= self.altitude_min:
            raise ValueError("altitude_max must exceed altitude_min")
        if not 0 < self.timelapse_min <= self.timelapse_max:
            raise ValueError("timelapse range must be positive and ordered")
        if not 0 < self.min_frame_delta_ms <= self.max_frame_delta_ms:
            raise ValueError("frame delta range must be positive and ordered")
        object.__setattr__(self, "end_of_route", EndOfRoutePolicy(self.end_of_route))


@dataclass(slots=True)
class DriverState:
    """Everything that changes between frames of one animation."""

    airplane: AirplaneState
    phase: float = 0.0
    route_elevation: float = 0.0
    anim_fade: float = 0.0
    finished: bool = False
    frame_index: int = 0

    @classmethod
    def initial(
        cls, route: FlightRoute, tuning: Optional[AirplaneTuning] = None
    ) -> Optional["DriverState"]:
        """Seed a state at the route start, or ``None`` when the route has no data."""

        start = route.sample(0.0)
        if start is None:
            return None
        return cls(airplane=AirplaneState.from_sample(start, tuning))


def altitude_fade(route_elevation: float, config: AnimationConfig) -> float:
    """0 at or below ``altitude_min``, 1 at or above ``altitude_max``."""

    return clamp01(
        (route_elevation - config.altitude_min) / (config.altitude_max - config.altitude_min)
    )


def timelapse_factor(anim_fade: float, config: AnimationConfig) -> float:
    """Quadratic ease between the minimum and maximum playback speed."""

    return lerp(config.timelapse_min, config.timelapse_max, anim_fade * anim_fade)


def tick(
    state: DriverState, route: FlightRoute, dt_ms: float, config: AnimationConfig
) -> DriverState:
    """Advance ``state`` by ``dt_ms``; the input state is left untouched."""

    if state.finished:
        return state

    anim_fade = altitude_fade(state.route_elevation, config)
    phase = state.phase + dt_ms * timelapse_factor(anim_fade, config) / config.duration_ms
    route_elevation = state.route_elevation
    finished = False
    if phase >= 1.0:
        if config.end_of_route is EndOfRoutePolicy.LOOP:
            LOGGER.debug("Route complete after %s frames; looping", state.frame_index + 1)
            phase = 0.0
            route_elevation = 0.0
        else:
            LOGGER.debug("Route complete after %s frames; stopping", state.frame_index + 1)
            phase = 1.0
            finished = True

    airplane = dataclasses.replace(state.airplane)
    target = route.sample(route.total_length * clamp01(phase))
    if target is not None:
        route_elevation = target.altitude
        airplane.update(target, dt_ms)

    return DriverState(
        airplane=airplane,
        phase=phase,
        route_elevation=route_elevation,
        anim_fade=anim_fade,
        finished=finished,
        frame_index=state.frame_index + 1,
    )


def frame_delta(previous_ms: float, now_ms: float, config: AnimationConfig) -> float:
    """Clamp a wall-clock frame delta so stalls never cause a large jump."""

    return min(max(now_ms - previous_ms, config.min_frame_delta_ms), config.max_frame_delta_ms)


@dataclass(frozen=True, slots=True)
class Frame:
    """Output of one animated frame."""

    index: int
    phase: float
    snapshot: RenderSnapshot
    camera: CameraDirective

    def as_dict(self) -> dict:
        return {
            "index": self.index,
            "phase": self.phase,
            "feature": self.snapshot.to_feature(),
            "camera": self.camera.as_dict(),
        }


class AnimationDriver:
    """Drive a route animation one frame timestamp at a time."""

    def __init__(
        self,
        route: FlightRoute,
        sink: "FrameSink",
        *,
        config: Optional[AnimationConfig] = None,
        camera_mode: CameraMode | str = CameraMode.AUTO,
        camera_fallback_on_error: bool = True,
    ) -> None:
        self.route = route
        self.sink = sink
        self.config = config or AnimationConfig()
        self.camera_mode = resolve_camera_mode(camera_mode, sink.supports_free_camera)
        self.camera_fallback_on_error = camera_fallback_on_error
        self.state: Optional[DriverState] = None
        self._last_frame_time_ms: Optional[float] = None
        self._running = False
        LOGGER.debug(
            "Initialised AnimationDriver with sink=%s camera=%s end_of_route=%s",
            sink.sink_name,
            self.camera_mode.value,
            self.config.end_of_route.value,
        )

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> bool:
        """Place the aircraft at the route start; ``False`` if the route has no data."""

        state = DriverState.initial(self.route, self.config.airplane)
        if state is None:
            LOGGER.warning("Flight route has no data; animation cannot start")
            return False
        self.state = state
        self._last_frame_time_ms = None
        self._running = True
        longitude, latitude = state.airplane.position
        self.sink.publish_initial(initial_feature(longitude, latitude, state.airplane.altitude))
        LOGGER.info("Animation started over %.1f m of route", self.route.total_length)
        return True

    def stop(self) -> None:
        """Cease scheduling further frames."""

        if self._running:
            LOGGER.info("Animation stopped")
        self._running = False

    def on_frame(self, frame_time_ms: float) -> Optional[Frame]:
        """Handle one host frame; the first call only records the timestamp."""

        if not self._running or self.state is None:
            return None
        if self._last_frame_time_ms is None:
            self._last_frame_time_ms = frame_time_ms
            return None

        dt_ms = frame_delta(self._last_frame_time_ms, frame_time_ms, self.config)
        self._last_frame_time_ms = frame_time_ms
        self.state = tick(self.state, self.route, dt_ms, self.config)

        snapshot = RenderSnapshot.from_state(self.state.airplane)
        self.sink.publish_frame(snapshot)
        camera = self._apply_camera()
        if self.state.finished:
            LOGGER.info("Animation finished at frame %s", self.state.frame_index)
            self._running = False
        return Frame(
            index=self.state.frame_index,
            phase=self.state.phase,
            snapshot=snapshot,
            camera=camera,
        )

    def _apply_camera(self) -> CameraDirective:
        state = self.state
        directive = place_camera(
            self.camera_mode,
            state.airplane,
            state.route_elevation,
            state.anim_fade,
            self.config.camera,
        )
        try:
            self.sink.apply_camera(directive)
        except CameraUnsupportedError as error:
            if self.camera_mode is not CameraMode.FREE or not self.camera_fallback_on_error:
                raise
            LOGGER.warning("Free camera rejected by %s (%s); using fallback", self.sink.sink_name, error)
            self.camera_mode = CameraMode.FALLBACK
            directive = place_camera(
                self.camera_mode,
                state.airplane,
                state.route_elevation,
                state.anim_fade,
                self.config.camera,
            )
            self.sink.apply_camera(directive)
        return directive

    def _timestamps(self, frame_interval_ms: float, realtime: bool) -> Iterator[float]:
        if realtime:
            while True:
                yield time.monotonic() * 1000.0
                time.sleep(frame_interval_ms / 1000.0)
        now = 0.0
        while True:
            yield now
            now += frame_interval_ms

    def run(
        self,
        *,
        max_frames: Optional[int] = None,
        frame_interval_ms: float = 1000.0 / 60.0,
        realtime: bool = False,
    ) -> List[Frame]:
        """Run the frame loop until stopped, finished or ``max_frames`` is reached.

        Without ``realtime`` timestamps are synthesised ``frame_interval_ms``
        apart, which makes a headless run deterministic. An unbounded
        non-realtime run on a looping route would never end, so that
        combination is rejected.
        """

        if frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be positive")
        if max_frames is None and not realtime and self.config.end_of_route is EndOfRoutePolicy.LOOP:
            raise ValueError("max_frames is required for a headless looping animation")
        if not self._running and not self.start():
            return []

        frames: List[Frame] = []
        for timestamp in self._timestamps(frame_interval_ms, realtime):
            if not self._running:
                break
            frame = self.on_frame(timestamp)
            if frame is None:
                continue
            frames.append(frame)
            if max_frames is not None and len(frames) >= max_frames:
                break
        return frames
