"""Mini README: FastAPI service exposing the route and headless simulations.

Structure:
    * create_application - application factory wiring routes to a loaded route.

The service returns JSON only: the route as a GeoJSON feature, single route
samples, and headless animation runs recorded through the in-memory sink.
A browser-side or native renderer can replay the returned features and
camera directives frame by frame.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..animation import AnimationDriver, CameraMode, EndOfRoutePolicy
from ..configuration import SkyrouteSettings, get_settings
from ..logging_utils import get_logger
from ..renderers import REGISTRY
from ..route import FlightRoute
from ..utils.geojson import route_to_geojson

LOGGER = get_logger(__name__)

MAX_SIMULATED_FRAMES = 10_000


def create_application(
    settings: Optional[SkyrouteSettings] = None, route: Optional[FlightRoute] = None
) -> FastAPI:
    """Create the FastAPI application bound to one flight route."""

    settings = settings or get_settings()
    if route is None:
        route = FlightRoute.from_geojson_file(
            settings.route_file, elevation_policy=settings.elevation_policy
        )
    base_config = settings.animation_config()

    app = FastAPI(title="skyroute", version="0.1.0")

    def _require_route() -> None:
        if route.is_empty:
            raise HTTPException(status_code=503, detail="Flight route has no data")

    @app.get("/route")
    async def get_route() -> JSONResponse:
        """Return the loaded route as a GeoJSON Feature."""

        _require_route()
        return JSONResponse(route_to_geojson(route))

    @app.get("/route/sample")
    async def sample_route(distance: float = 0.0) -> JSONResponse:
        """Sample the route ``distance`` meters from its start."""

        _require_route()
        if not math.isfinite(distance):
            raise HTTPException(status_code=400, detail="distance must be a finite number")
        sample = route.sample(distance)
        LOGGER.debug("Sampled route at %.1f m", distance)
        return JSONResponse(
            {
                "distance": min(max(distance, 0.0), route.total_length),
                "position": list(sample.position),
                "altitude": sample.altitude,
                "bearing": sample.bearing,
                "pitch": sample.pitch,
            }
        )

    @app.get("/simulate")
    async def simulate(
        frames: int = 120,
        frame_interval_ms: Optional[float] = None,
        camera_mode: Optional[str] = None,
        end_of_route: Optional[str] = None,
    ) -> JSONResponse:
        """Run the animation headlessly and return every recorded frame."""

        if not 1 <= frames <= MAX_SIMULATED_FRAMES:
            raise HTTPException(
                status_code=400, detail=f"frames must be between 1 and {MAX_SIMULATED_FRAMES}"
            )
        interval = frame_interval_ms if frame_interval_ms is not None else settings.frame_interval_ms
        try:
            mode = CameraMode(camera_mode) if camera_mode else settings.camera_mode
            policy = EndOfRoutePolicy(end_of_route) if end_of_route else base_config.end_of_route
            if not math.isfinite(interval) or interval <= 0:
                raise ValueError("frame_interval_ms must be a positive finite number")
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        sink = REGISTRY.create("recording")
        driver = AnimationDriver(
            route,
            sink,
            config=replace(base_config, end_of_route=policy),
            camera_mode=mode,
            camera_fallback_on_error=settings.camera_fallback_on_error,
        )
        if not driver.start():
            raise HTTPException(status_code=503, detail="Flight route has no data")
        recorded = driver.run(max_frames=frames, frame_interval_ms=interval)
        LOGGER.info("Simulated %s frames (camera=%s)", len(recorded), driver.camera_mode.value)
        return JSONResponse(
            {
                "total_length_m": route.total_length,
                "camera_mode": driver.camera_mode.value,
                "end_of_route": policy.value,
                "initial": sink.initial_feature,
                "frames": [frame.as_dict() for frame in recorded],
            }
        )

    return app
