from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Tuple

from ..core.enums import DiaryTaskStatus


@dataclass(frozen=True)
class DayDiaryTask:
    task_name: str
    description: str
    planned_hours: str
    estimated_hours: str
    status: DiaryTaskStatus


@dataclass(frozen=True)
class DayDiaryEntry:
    """One daily work report per employee per date."""

    entry_id: str
    employee_id: str
    employee_name: str
    work_date: date
    tasks: Tuple[DayDiaryTask, ...]
    updated_at: datetime
