"""Mini README: Interfaces (HTTP) for skyroute.

Exports the FastAPI application factory serving route data and headless
simulations. The CLI entry point lives in ``main_flight_replay.py``.
"""

from .web_app import create_application

__all__ = ["create_application"]
