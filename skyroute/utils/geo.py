"""Mini README: Great-circle helpers for route measurement.

Structure:
    * haversine_m - distance between two lon/lat points in meters.
    * segment_lengths_m - vectorised haversine over consecutive points.
    * initial_bearing_deg - compass bearing from one point towards another.

All functions take longitude before latitude, matching GeoJSON ordering.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .math_utils import wrap_degrees

EARTH_RADIUS_M = 6371008.8  # mean Earth radius


def haversine_m(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Haversine great-circle distance on a spherical Earth."""

    p1 = math.radians(lat1)
    p2 = math.radians(lat2)
    dphi = p2 - p1
    dl = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2.0) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dl / 2.0) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(a, 1.0)))


def segment_lengths_m(lons: Sequence[float], lats: Sequence[float]) -> np.ndarray:
    """Return the N-1 great-circle lengths between consecutive points."""

    lon = np.radians(np.asarray(lons, dtype=float))
    lat = np.radians(np.asarray(lats, dtype=float))
    dphi = np.diff(lat)
    dl = np.diff(lon)
    a = np.sin(dphi / 2.0) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dl / 2.0) ** 2
    return 2 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


def initial_bearing_deg(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Initial great-circle bearing from point 1 to point 2 in (-180, 180] degrees."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dl = math.radians(lon2 - lon1)
    y = math.sin(dl) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dl)
    return wrap_degrees(math.degrees(math.atan2(y, x)))
