from __future__ import annotations

from typing import Protocol

from .model import OfficeSettings


class OfficeSettingsRepository(Protocol):
    def get(self) -> OfficeSettings:
        raise NotImplementedError

    def save(self, settings: OfficeSettings) -> None:
        raise NotImplementedError
