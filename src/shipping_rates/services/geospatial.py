"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Optional

from ..exceptions import InvalidCoordinate
from ..models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def bearing_from(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the initial bearing from (lat1, lon1) to (lat2, lon2)."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)
    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def validate_coordinate(point: Optional[Coordinate], label: str = "location") -> Coordinate:
    """Return ``point`` unchanged or raise ``InvalidCoordinate`` naming the bad field."""

    if point is None:
        raise InvalidCoordinate(f"{label} must be provided", field=label)
    for name, value, limit in (
        ("latitude", point.latitude, 90.0),
        ("longitude", point.longitude, 180.0),
    ):
        if value is None:
            raise InvalidCoordinate(f"{label}.{name} cannot be null", field=f"{label}.{name}")
        if not math.isfinite(value) or not -limit <= value <= limit:
            raise InvalidCoordinate(
                f"{label}.{name} must be between {-limit:g} and {limit:g}, got {value}",
                field=f"{label}.{name}",
                value=value,
            )
    return point


def distance_km(a: Optional[Coordinate], b: Optional[Coordinate]) -> float:
    """Great-circle distance in kilometres between two coordinates."""

    a = validate_coordinate(a, "from")
    b = validate_coordinate(b, "to")
    if a == b:
        return 0.0
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def bearing_degrees(a: Optional[Coordinate], b: Optional[Coordinate]) -> float:
    """Direction from ``a`` to ``b`` in degrees, 0 is north, result in [0, 360)."""

    a = validate_coordinate(a, "from")
    b = validate_coordinate(b, "to")
    bearing = bearing_from(a.latitude, a.longitude, b.latitude, b.longitude)
    # (-0.0 + 360) % 360 can round up to 360.0
    return 0.0 if bearing >= 360.0 else bearing


def is_within_distance(a: Optional[Coordinate], b: Optional[Coordinate], max_distance_km: float) -> bool:
    return distance_km(a, b) <= max_distance_km
