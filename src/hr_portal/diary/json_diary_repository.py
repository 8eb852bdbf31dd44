from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import DiaryTaskStatus
from ..database.json_base import JsonRepositoryBase, Row, find_all, find_one
from .model import DayDiaryEntry, DayDiaryTask
from .repository import DiaryRepository


def _to_entry(row: Row) -> DayDiaryEntry:
    return DayDiaryEntry(
        entry_id=row["id"],
        employee_id=row["employeeId"],
        employee_name=row.get("employeeName", ""),
        work_date=parse_iso_date(row["date"]),
        tasks=tuple(
            DayDiaryTask(
                task_name=t.get("taskName", ""),
                description=t.get("description", ""),
                planned_hours=str(t.get("plannedHours", "")),
                estimated_hours=str(t.get("estimatedHours", "")),
                status=DiaryTaskStatus(t["status"]),
            )
            for t in row.get("tasks") or []
        ),
        updated_at=parse_timestamp(row["updatedAt"]),
    )


def _to_row(entry: DayDiaryEntry) -> Row:
    return {
        "id": entry.entry_id,
        "employeeId": entry.employee_id,
        "employeeName": entry.employee_name,
        "date": entry.work_date.isoformat(),
        "tasks": [
            {
                "taskName": t.task_name,
                "description": t.description,
                "plannedHours": t.planned_hours,
                "estimatedHours": t.estimated_hours,
                "status": t.status.value,
            }
            for t in entry.tasks
        ],
        "updatedAt": format_timestamp(entry.updated_at),
    }


class JsonDiaryRepository(JsonRepositoryBase, DiaryRepository):
    collection = "dayDiary"

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[DayDiaryEntry]:
        key = work_date.isoformat()
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["employeeId"] == employee_id and r["date"] == key)
            return _to_entry(row) if row else None

    def list_all(self, *, work_date: Optional[date] = None) -> Sequence[DayDiaryEntry]:
        with self._store.read() as doc:
            rows = self._rows(doc)
            if work_date is not None:
                key = work_date.isoformat()
                rows = find_all(rows, lambda r: r["date"] == key)
            return [_to_entry(r) for r in rows]

    def save(self, entry: DayDiaryEntry) -> None:
        key = entry.work_date.isoformat()
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["employeeId"] == entry.employee_id and r["date"] == key:
                    rows[i] = {**_to_row(entry), "id": r["id"]}
                    return
            rows.append(_to_row(entry))
