"""Mini README: Flight route sampling by arc-length distance.

Structure:
    * RoutePoint - immutable lon/lat/elevation vertex.
    * RouteSample - ground truth of the route at one distance.
    * MalformedRouteError - raised when strict construction fails.
    * FlightRoute - cumulative-distance table answering ``sample(distance)``.

Routes are built once before animation starts and are immutable
afterwards. Segment lookup picks the last vertex whose cumulative distance
does not exceed the query, so a query landing exactly on an interior vertex
resolves to the segment starting there with a ratio of zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..logging_utils import get_logger
from ..utils.geo import initial_bearing_deg, segment_lengths_m
from ..utils.geojson import parse_route_geojson
from ..utils.math_utils import clamp01, lerp, rad_to_deg

LOGGER = get_logger(__name__)


class MalformedRouteError(ValueError):
    """Raised when route data cannot form a valid flight route."""


class ElevationPolicy(str, Enum):
    """How to reconcile an elevation array that does not match the coordinates."""

    PAD = "pad"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """Single route vertex."""

    longitude: float
    latitude: float
    elevation: float


@dataclass(frozen=True, slots=True)
class RouteSample:
    """Position, altitude and attitude of the route at one distance."""

    position: Tuple[float, float]
    altitude: float
    bearing: float
    pitch: float


def _reconcile_elevations(
    elevations: Sequence[float], expected: int, policy: ElevationPolicy
) -> List[float]:
    values = [float(value) for value in elevations]
    if len(values) == expected:
        return values
    if policy is ElevationPolicy.STRICT:
        raise MalformedRouteError(
            f"Route has {expected} coordinates but {len(values)} elevations"
        )
    if len(values) < expected:
        LOGGER.warning(
            "Route has %s coordinates but only %s elevations; padding with 0",
            expected,
            len(values),
        )
        return values + [0.0] * (expected - len(values))
    LOGGER.warning(
        "Route has %s coordinates but %s elevations; ignoring the extras",
        expected,
        len(values),
    )
    return values[:expected]


class FlightRoute:
    """Polyline with per-vertex elevation and cumulative arc-length."""

    def __init__(self, points: Iterable[RoutePoint] = ()) -> None:
        self._points: Tuple[RoutePoint, ...] = tuple(points)
        if len(self._points) == 1:
            raise MalformedRouteError("A route needs at least two points")
        if self._points:
            lengths = segment_lengths_m(
                [point.longitude for point in self._points],
                [point.latitude for point in self._points],
            )
            self._distances = np.concatenate(([0.0], np.cumsum(lengths)))
        else:
            self._distances = np.zeros(0)
        LOGGER.debug(
            "Initialised FlightRoute with %s points over %.1f m",
            len(self._points),
            self.total_length,
        )

    @classmethod
    def empty(cls) -> "FlightRoute":
        """Return a route without data; ``sample`` always yields ``None``."""

        return cls()

    @classmethod
    def from_points(
        cls,
        coordinates: Sequence[Sequence[float]],
        elevations: Sequence[float] = (),
        *,
        elevation_policy: ElevationPolicy | str = ElevationPolicy.PAD,
    ) -> "FlightRoute":
        """Build a route from ``(lon, lat)`` pairs and a parallel elevation array."""

        policy = ElevationPolicy(elevation_policy)
        if len(coordinates) < 2:
            raise MalformedRouteError("A route needs at least two coordinates")
        heights = _reconcile_elevations(elevations, len(coordinates), policy)
        points: List[RoutePoint] = []
        for position, elevation in zip(coordinates, heights):
            try:
                lon, lat = float(position[0]), float(position[1])
            except (IndexError, TypeError, ValueError) as error:
                raise MalformedRouteError(f"Invalid route position: {position!r}") from error
            if not all(math.isfinite(value) for value in (lon, lat, elevation)):
                raise MalformedRouteError(
                    f"Route vertex ({lon}, {lat}, {elevation}) is not finite"
                )
            points.append(RoutePoint(longitude=lon, latitude=lat, elevation=elevation))
        return cls(points)

    @classmethod
    def from_geojson(
        cls, route_geojson: str, *, elevation_policy: ElevationPolicy | str = ElevationPolicy.PAD
    ) -> "FlightRoute":
        """Parse a GeoJSON route; raises ``ValueError`` on invalid payloads."""

        coordinates, elevations = parse_route_geojson(route_geojson)
        return cls.from_points(coordinates, elevations, elevation_policy=elevation_policy)

    @classmethod
    def from_geojson_file(
        cls, path: Path, *, elevation_policy: ElevationPolicy | str = ElevationPolicy.PAD
    ) -> "FlightRoute":
        """Load a route asset, degrading to an empty route on any failure."""

        try:
            route = cls.from_geojson(
                Path(path).read_text(encoding="utf-8"), elevation_policy=elevation_policy
            )
        except (OSError, ValueError) as error:
            LOGGER.error("Failed to load flight route from %s: %s", path, error)
            return cls.empty()
        LOGGER.info(
            "Loaded flight route from %s with %s points (%.1f m)",
            path,
            len(route),
            route.total_length,
        )
        return route

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[RoutePoint, ...]:
        return self._points

    @property
    def distances(self) -> np.ndarray:
        """Read-only view of cumulative distances in meters."""

        view = self._distances.view()
        view.flags.writeable = False
        return view

    @property
    def total_length(self) -> float:
        return float(self._distances[-1]) if len(self._distances) else 0.0

    @property
    def is_empty(self) -> bool:
        return not self._points

    def segment_index(self, distance: float) -> int:
        """Return the start index of the segment enclosing ``distance``."""

        index = int(np.searchsorted(self._distances, distance, side="right")) - 1
        return min(max(index, 0), len(self._points) - 2)

    def sample(self, distance: float) -> Optional[RouteSample]:
        """Interpolate the route at ``distance`` meters from its start."""

        if self.is_empty:
            return None
        if not math.isfinite(distance):
            raise ValueError(f"Sample distance must be finite, got {distance!r}")
        total = self.total_length
        distance = min(max(distance, 0.0), total)
        index = self.segment_index(distance)
        start, end = self._points[index], self._points[index + 1]
        start_distance = float(self._distances[index])
        segment_length = float(self._distances[index + 1]) - start_distance
        if distance >= total:
            # The route end is the last vertex even behind trailing duplicates.
            ratio = 1.0
        elif segment_length > 0:
            ratio = clamp01((distance - start_distance) / segment_length)
        else:
            ratio = 0.0

        return RouteSample(
            position=(
                lerp(start.longitude, end.longitude, ratio),
                lerp(start.latitude, end.latitude, ratio),
            ),
            altitude=lerp(start.elevation, end.elevation, ratio),
            bearing=initial_bearing_deg(
                start.longitude, start.latitude, end.longitude, end.latitude
            ),
            pitch=rad_to_deg(math.atan2(end.elevation - start.elevation, segment_length)),
        )
