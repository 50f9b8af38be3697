"""Mini README: Centralised configuration models and helpers for skyroute.

Structure:
    * SkyrouteSettings - pydantic settings describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SKYROUTE_*`` environment variables (or
    a ``.env`` file) and call ``animation_config`` to obtain the frozen
    configuration the animation driver consumes. The settings are cached so
    validation happens once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .animation import AnimationConfig, CameraConfig, CameraMode, EndOfRoutePolicy
from .route import ElevationPolicy

DEFAULT_ROUTE_FILE = Path(__file__).parent / "data" / "flightpath.geojson"


class SkyrouteSettings(BaseSettings):
    """Runtime configuration for the skyroute animation."""

    model_config = SettingsConfigDict(
        env_prefix="SKYROUTE_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    log_level: str = Field("INFO", description="Root logging level name.")
    route_file: Path = Field(
        DEFAULT_ROUTE_FILE,
        description="GeoJSON LineString route with a parallel 'elevation' property.",
    )
    elevation_policy: ElevationPolicy = Field(
        ElevationPolicy.PAD,
        description="'pad' fills missing elevations with 0; 'strict' rejects mismatches.",
    )
    animation_duration_ms: float = Field(
        50_000.0, gt=0, description="Route duration at a time-lapse factor of 1."
    )
    altitude_min: float = Field(200.0, description="Elevation where time-lapse starts ramping.")
    altitude_max: float = Field(3_000.0, description="Elevation of full time-lapse.")
    timelapse_min: float = Field(0.001, gt=0)
    timelapse_max: float = Field(10.0, gt=0)
    min_frame_delta_ms: float = Field(1.0, gt=0)
    max_frame_delta_ms: float = Field(100.0, gt=0)
    end_of_route: EndOfRoutePolicy = Field(
        EndOfRoutePolicy.LOOP,
        description="'loop' restarts the route when complete; 'stop' ends the animation.",
    )
    camera_mode: CameraMode = Field(
        CameraMode.AUTO,
        description="'free', 'fallback', or 'auto' to follow the renderer's capability.",
    )
    camera_fallback_on_error: bool = Field(
        True, description="Switch to the fallback camera when a renderer rejects a free camera."
    )
    camera_base_height: float = Field(50.0, description="Camera height above the aircraft.")
    camera_max_height: float = Field(
        10_000_000.0, description="Extra camera height at full altitude fade."
    )
    frame_interval_ms: float = Field(
        1000.0 / 60.0, gt=0, description="Frame spacing for headless simulations."
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("route_file", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories in configured paths."""

        return Path(value).expanduser()

    @model_validator(mode="after")
    def _check_ranges(self) -> "SkyrouteSettings":
        if self.altitude_max <= self.altitude_min:
            raise ValueError("altitude_max must exceed altitude_min")
        if self.timelapse_max < self.timelapse_min:
            raise ValueError("timelapse_max must not be below timelapse_min")
        if self.max_frame_delta_ms < self.min_frame_delta_ms:
            raise ValueError("max_frame_delta_ms must not be below min_frame_delta_ms")
        return self

    def animation_config(self) -> AnimationConfig:
        """Build the frozen driver configuration from these settings."""

        return AnimationConfig(
            duration_ms=self.animation_duration_ms,
            altitude_min=self.altitude_min,
            altitude_max=self.altitude_max,
            timelapse_min=self.timelapse_min,
            timelapse_max=self.timelapse_max,
            min_frame_delta_ms=self.min_frame_delta_ms,
            max_frame_delta_ms=self.max_frame_delta_ms,
            end_of_route=self.end_of_route,
            camera=CameraConfig(
                base_height=self.camera_base_height, max_height=self.camera_max_height
            ),
        )


@lru_cache()
def get_settings() -> SkyrouteSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SkyrouteSettings()
