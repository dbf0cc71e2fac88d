"""Deterministic distance and travel-time estimation."""

from __future__ import annotations

import logging
import math
from typing import Optional

from trip_optimizer.domain.constants import DEFAULT_SPEED_KMH, EARTH_RADIUS_KM, FALLBACK_DISTANCE_KM
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import Location

_LOGGER = logging.getLogger("trip-optimizer.geo")


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _is_coordinate(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _has_coordinates(point: Optional[Location]) -> bool:
    return point is not None and _is_coordinate(point.lat) and _is_coordinate(point.lng)


def distance_km(
    a: Optional[Location],
    b: Optional[Location],
    *,
    fallback_km: float = FALLBACK_DISTANCE_KM,
) -> float:
    """Great-circle distance; missing or invalid coordinates yield ``fallback_km``."""
    if not (_has_coordinates(a) and _has_coordinates(b)):
        _LOGGER.warning("invalid coordinates %r -> %r, using %.1f km", a, b, fallback_km)
        return fallback_km
    return haversine(a.lat, a.lng, b.lat, b.lng)


def travel_time_hours(
    a: Optional[Location],
    b: Optional[Location],
    speed_kmh: float = DEFAULT_SPEED_KMH,
    *,
    fallback_km: float = FALLBACK_DISTANCE_KM,
) -> float:
    if not speed_kmh > 0:
        raise InvalidArgument("speed_kmh", f"must be positive, got {speed_kmh!r}")
    return distance_km(a, b, fallback_km=fallback_km) / speed_kmh
