from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DayDiaryEntry


class DiaryRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[DayDiaryEntry]:
        raise NotImplementedError

    def list_all(self, *, work_date: Optional[date] = None) -> Sequence[DayDiaryEntry]:
        raise NotImplementedError

    def save(self, entry: DayDiaryEntry) -> None:
        """Insert, or replace the entry with the same (employee, date)."""

        raise NotImplementedError
