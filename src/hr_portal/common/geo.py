from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from ..core.constants import EARTH_RADIUS_METERS
from ..core.exceptions import ValidationError
from ..office.model import GeoPoint
from .validators import require_number_in_range


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle (haversine) distance between two coordinates."""
    dlat = radians(b.latitude - a.latitude)
    dlon = radians(b.longitude - a.longitude)
    h = sin(dlat / 2) ** 2 + cos(radians(a.latitude)) * cos(radians(b.latitude)) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def to_geo_point(value) -> GeoPoint:
    """Build a GeoPoint from a mapping or GeoPoint, validating the ranges."""
    if isinstance(value, GeoPoint):
        latitude, longitude = value.latitude, value.longitude
    elif isinstance(value, dict):
        latitude, longitude = value.get("latitude"), value.get("longitude")
    else:
        raise ValidationError("Location must have latitude and longitude")

    return GeoPoint(
        latitude=require_number_in_range(latitude, "Latitude", minimum=-90, maximum=90),
        longitude=require_number_in_range(longitude, "Longitude", minimum=-180, maximum=180),
    )
