"""Mini README: Entry point CLI for skyroute.

This script exposes a Typer CLI with two commands: ``serve`` starts the
FastAPI service with configurable host, port and production flags, and
``simulate`` runs the animation headlessly, streaming frames as JSON Lines
to stdout or a file. Settings come from ``SKYROUTE_*`` environment
variables when available; command options override them.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from skyroute.animation import AnimationDriver, CameraMode, EndOfRoutePolicy
from skyroute.configuration import get_settings
from skyroute.logging_utils import configure_root_logger
from skyroute.renderers import REGISTRY
from skyroute.route import FlightRoute

cli = typer.Typer(help="Animate an aircraft along a flight route.")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting skyroute on {effective_host}:{effective_port}.\n"
        f"Route data is served at http://{browser_host}:{effective_port}/route"
    )
    uvicorn.run(
        "skyroute.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def simulate(
    frames: int = typer.Option(600, min=1, help="Number of frames to emit."),
    interval: float = typer.Option(None, help="Milliseconds between frames."),
    camera_mode: CameraMode = typer.Option(None, help="Camera mode override."),
    end_of_route: EndOfRoutePolicy = typer.Option(None, help="End-of-route policy override."),
    route_file: Optional[Path] = typer.Option(None, help="GeoJSON route to animate."),
    output: Optional[Path] = typer.Option(None, help="Write JSON Lines here instead of stdout."),
) -> None:
    """Run the animation without a renderer and emit frames as JSON Lines."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    route = FlightRoute.from_geojson_file(
        route_file or settings.route_file, elevation_policy=settings.elevation_policy
    )
    config = settings.animation_config()
    if end_of_route is not None:
        config = replace(config, end_of_route=end_of_route)

    sink = REGISTRY.create("jsonl", path=output)
    try:
        driver = AnimationDriver(
            route,
            sink,
            config=config,
            camera_mode=camera_mode or settings.camera_mode,
            camera_fallback_on_error=settings.camera_fallback_on_error,
        )
        if not driver.start():
            typer.echo("Flight route has no data; nothing to animate.", err=True)
            raise typer.Exit(code=1)
        driver.run(max_frames=frames, frame_interval_ms=interval or settings.frame_interval_ms)
    finally:
        sink.close()


if __name__ == "__main__":
    cli()
