from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class OfficeSettings:
    """Singleton: office coordinate and allowed clock-in radius (meters)."""

    office_location: GeoPoint
    clock_in_radius: float
