"""Mini README: GeoJSON helpers for flight route descriptions.

This module reads the line-string route format used by the renderer (one
feature whose ``properties.elevation`` array runs parallel to its
coordinates) and writes a loaded route back out as a Feature. Keeping the
parsing isolated avoids importing web framework dependencies when running
unit tests or reusing the helper in other modules.
"""

from __future__ import annotations

import json
import numbers
from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from ..logging_utils import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..route import FlightRoute

LOGGER = get_logger(__name__)

ELEVATION_PROPERTY = "elevation"


def _line_feature(geojson: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Return ``(geometry, properties)`` for the first route feature in the payload."""

    payload_type = geojson.get("type")
    if payload_type == "FeatureCollection":
        features = geojson.get("features") or []
        if not features:
            raise ValueError("FeatureCollection contains no features")
        geojson = features[0]
        if not isinstance(geojson, dict):
            raise ValueError("Route feature must be an object")
        payload_type = geojson.get("type")

    if payload_type == "Feature":
        geometry = geojson.get("geometry") or {}
        properties = geojson.get("properties") or {}
    else:
        geometry = geojson
        properties = {}

    if geometry.get("type") != "LineString":
        raise ValueError("Only LineString route geometries are supported")
    return geometry, properties


def _elevations_from(properties: Dict[str, Any]) -> List[float]:
    raw = properties.get(ELEVATION_PROPERTY)
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(
        isinstance(value, numbers.Real) and not isinstance(value, bool) for value in raw
    ):
        LOGGER.warning("Ignoring malformed '%s' property on route feature", ELEVATION_PROPERTY)
        return []
    return [float(value) for value in raw]


def parse_route_geojson(route_geojson: str) -> Tuple[List[Tuple[float, float]], List[float]]:
    """Validate GeoJSON and return ``(coordinates, elevations)`` for a route line.

    Coordinates are ``(longitude, latitude)`` tuples; a third ordinate on a
    position is ignored because altitude comes from the elevation property.
    """

    try:
        geojson = json.loads(route_geojson)
    except json.JSONDecodeError as error:
        raise ValueError("Route GeoJSON payload is invalid JSON") from error
    if not isinstance(geojson, dict):
        raise ValueError("Route GeoJSON payload must be an object")

    geometry, properties = _line_feature(geojson)
    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError("LineString coordinates are required")

    points: List[Tuple[float, float]] = []
    for position in coordinates:
        if not isinstance(position, (list, tuple)) or len(position) < 2:
            raise ValueError(f"Invalid route position: {position!r}")
        try:
            points.append((float(position[0]), float(position[1])))
        except (TypeError, ValueError) as error:
            raise ValueError(f"Invalid route position: {position!r}") from error
    return points, _elevations_from(properties)


def route_to_geojson(route: "FlightRoute") -> Dict[str, Any]:
    """Return a GeoJSON Feature describing the loaded route."""

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[point.longitude, point.latitude] for point in route.points],
        },
        "properties": {
            ELEVATION_PROPERTY: [point.elevation for point in route.points],
            "total_length_m": route.total_length,
        },
    }
