from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_time_of_day, parse_iso_date, parse_time_of_day
from ..core.enums import AttendanceStatus
from ..database.json_base import JsonRepositoryBase, Row, find_all, find_one
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: Row) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=row["id"],
        employee_id=row["employeeId"],
        employee_name=row.get("employeeName", ""),
        work_date=parse_iso_date(row["date"]),
        clock_in=parse_time_of_day(row.get("clockIn")),
        clock_out=parse_time_of_day(row.get("clockOut")),
        status=AttendanceStatus(row["status"]),
    )


def _to_row(record: AttendanceRecord) -> Row:
    return {
        "id": record.attendance_id,
        "employeeId": record.employee_id,
        "employeeName": record.employee_name,
        "date": record.work_date.isoformat(),
        "clockIn": format_time_of_day(record.clock_in),
        "clockOut": format_time_of_day(record.clock_out),
        "status": record.status.value,
    }


class JsonAttendanceRepository(JsonRepositoryBase, AttendanceRepository):
    collection = "attendance"

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._store.read() as doc:
            return [_to_record(r) for r in self._rows(doc)]

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceRecord]:
        with self._store.read() as doc:
            rows = find_all(self._rows(doc), lambda r: r["employeeId"] == employee_id)
        records = sorted((_to_record(r) for r in rows), key=lambda r: r.work_date, reverse=True)
        return records[: int(limit)]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        key = work_date.isoformat()
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["employeeId"] == employee_id and r["date"] == key)
            return _to_record(row) if row else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        key = work_date.isoformat()
        with self._store.read() as doc:
            return [_to_record(r) for r in find_all(self._rows(doc), lambda r: r["date"] == key)]

    def save(self, record: AttendanceRecord) -> None:
        key = record.work_date.isoformat()
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["employeeId"] == record.employee_id and r["date"] == key:
                    rows[i] = {**_to_row(record), "id": r["id"]}
                    return
            rows.append(_to_row(record))
