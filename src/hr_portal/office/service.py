from __future__ import annotations

import logging

from ..common.validators import require_number_in_range
from ..core.constants import MAX_CLOCK_IN_RADIUS, MIN_CLOCK_IN_RADIUS
from .model import GeoPoint, OfficeSettings
from .repository import OfficeSettingsRepository

logger = logging.getLogger(__name__)


class OfficeSettingsService:
    """Use case: read/update the office geofence (admin)."""

    def __init__(self, settings: OfficeSettingsRepository):
        self._settings = settings

    def get_settings(self) -> OfficeSettings:
        return self._settings.get()

    def update_settings(self, *, latitude, longitude, clock_in_radius) -> OfficeSettings:
        settings = OfficeSettings(
            office_location=GeoPoint(
                latitude=require_number_in_range(latitude, "Latitude", minimum=-90, maximum=90),
                longitude=require_number_in_range(longitude, "Longitude", minimum=-180, maximum=180),
            ),
            clock_in_radius=require_number_in_range(
                clock_in_radius,
                "Clock-in radius",
                minimum=MIN_CLOCK_IN_RADIUS,
                maximum=MAX_CLOCK_IN_RADIUS,
            ),
        )
        self._settings.save(settings)
        logger.info(
            "Office geofence set to (%s, %s) radius %sm",
            settings.office_location.latitude,
            settings.office_location.longitude,
            settings.clock_in_radius,
        )
        return settings
