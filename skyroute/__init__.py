"""Mini README: Core package initializer for skyroute.

skyroute animates an aircraft along a geographic route: it samples the
route by distance, smooths the aircraft state, and hands frame snapshots
and follow-camera directives to a renderer. Only the logger factory is
imported here so that ``import skyroute`` stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
