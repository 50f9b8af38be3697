"""Mini README: Utility helpers for skyroute.

Exports the scalar blending primitives used throughout the animation code
and the GeoJSON helpers used to read and publish routes.
"""

from .geojson import parse_route_geojson, route_to_geojson
from .math_utils import clamp01, lerp, lerp_angle, rad_to_deg, sin_phase, wrap_degrees

__all__ = [
    "clamp01",
    "lerp",
    "lerp_angle",
    "parse_route_geojson",
    "rad_to_deg",
    "route_to_geojson",
    "sin_phase",
    "wrap_degrees",
]
