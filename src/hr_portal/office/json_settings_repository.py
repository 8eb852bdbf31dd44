from __future__ import annotations

import copy

from ..database.json_base import JsonRepositoryBase
from ..database.migrations import DEFAULT_SETTINGS
from .model import GeoPoint, OfficeSettings
from .repository import OfficeSettingsRepository


class JsonOfficeSettingsRepository(JsonRepositoryBase, OfficeSettingsRepository):
    def get(self) -> OfficeSettings:
        with self._store.read() as doc:
            raw = doc.get("settings") or copy.deepcopy(DEFAULT_SETTINGS)
            location = raw.get("officeLocation") or DEFAULT_SETTINGS["officeLocation"]
            return OfficeSettings(
                office_location=GeoPoint(
                    latitude=float(location["latitude"]),
                    longitude=float(location["longitude"]),
                ),
                clock_in_radius=float(raw.get("clockInRadius", DEFAULT_SETTINGS["clockInRadius"])),
            )

    def save(self, settings: OfficeSettings) -> None:
        with self._store.transaction() as doc:
            doc["settings"] = {
                "officeLocation": {
                    "latitude": settings.office_location.latitude,
                    "longitude": settings.office_location.longitude,
                },
                "clockInRadius": settings.clock_in_radius,
            }
