from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, ContextManager, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import as_utc, now_utc
from ..common.validators import require_decimal_string, require_enum, require_non_empty
from ..core.enums import DiaryTaskStatus
from ..core.exceptions import EmployeeNotFound, ValidationError
from ..database.json_base import new_id
from ..users.repository import EmployeeRepository
from .model import DayDiaryEntry, DayDiaryTask
from .repository import DiaryRepository


def _to_task(raw) -> DayDiaryTask:
    if isinstance(raw, DayDiaryTask):
        raw = {
            "taskName": raw.task_name,
            "description": raw.description,
            "plannedHours": raw.planned_hours,
            "estimatedHours": raw.estimated_hours,
            "status": raw.status,
        }
    if not isinstance(raw, Mapping):
        raise ValidationError("Each task must be an object")

    return DayDiaryTask(
        task_name=require_non_empty(raw.get("taskName", ""), "Task name"),
        description=(raw.get("description") or "").strip(),
        planned_hours=require_decimal_string(str(raw.get("plannedHours", "")), "Planned hours"),
        estimated_hours=require_decimal_string(str(raw.get("estimatedHours", "")), "Estimated hours"),
        status=require_enum(DiaryTaskStatus, raw.get("status"), "Task status"),
    )


class DiaryService:
    """Use case: employees save their daily work report; admins read them."""

    def __init__(
        self,
        diary: DiaryRepository,
        employees: EmployeeRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._diary = diary
        self._employees = employees
        self._atomic = atomic or nullcontext

    def save_entry(
        self,
        *,
        employee_id: str,
        work_date: date,
        tasks: Iterable,
        now: datetime | None = None,
    ) -> DayDiaryEntry:
        parsed = tuple(_to_task(t) for t in tasks)
        updated_at = as_utc(now) if now else now_utc()

        with self._atomic():
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise EmployeeNotFound()

            existing = self._diary.get_for_employee_and_date(employee_id, work_date)
            if existing:
                entry = replace(existing, tasks=parsed, updated_at=updated_at)
            else:
                entry = DayDiaryEntry(
                    entry_id=new_id(),
                    employee_id=employee_id,
                    employee_name=employee.name,
                    work_date=work_date,
                    tasks=parsed,
                    updated_at=updated_at,
                )
            self._diary.save(entry)
        return entry

    def get_entry(self, employee_id: str, work_date: date) -> Optional[DayDiaryEntry]:
        return self._diary.get_for_employee_and_date(employee_id, work_date)

    def list_entries(self, *, work_date: Optional[date] = None) -> Sequence[DayDiaryEntry]:
        entries = self._diary.list_all(work_date=work_date)
        return sorted(entries, key=lambda e: (e.work_date, e.updated_at), reverse=True)
