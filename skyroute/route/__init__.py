"""Mini README: Route subsystem for loading and sampling flight paths.

Exports the route container plus the value types it produces so the
animation driver and interfaces never reach into module internals.
"""

from .flight_route import (
    ElevationPolicy,
    FlightRoute,
    MalformedRouteError,
    RoutePoint,
    RouteSample,
)

__all__ = [
    "ElevationPolicy",
    "FlightRoute",
    "MalformedRouteError",
    "RoutePoint",
    "RouteSample",
]
