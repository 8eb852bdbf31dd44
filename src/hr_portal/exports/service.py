from __future__ import annotations

import csv
import io
from typing import Dict, List

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_display_date, format_time_of_day
from ..leaves.repository import LeaveRequestRepository
from ..users.repository import EmployeeRepository

ATTENDANCE_FIELDS = ["date", "employeeName", "username", "clockIn", "clockOut", "status"]
LEAVE_FIELDS = [
    "startDate",
    "endDate",
    "employeeName",
    "username",
    "reason",
    "leaveType",
    "status",
    "deductionAmount",
]


def _to_csv(fieldnames: List[str], rows: List[Dict]) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue()


def _format_amount(value) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class ExportService:
    """Flatten attendance and leave collections to CSV text.

    An empty collection gives "" so callers know there is nothing to download.
    """

    def __init__(self, attendance: AttendanceRepository, leaves: LeaveRequestRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._leaves = leaves
        self._employees = employees

    def _usernames(self) -> Dict[str, str]:
        return {e.employee_id: e.username for e in self._employees.list_all()}

    def attendance_csv(self) -> str:
        records = list(self._attendance.list_all())
        if not records:
            return ""

        usernames = self._usernames()
        records.sort(key=lambda r: r.work_date, reverse=True)
        rows = [
            {
                "date": format_display_date(r.work_date),
                "employeeName": r.employee_name,
                "username": usernames.get(r.employee_id, "unknown"),
                "clockIn": format_time_of_day(r.clock_in) or "",
                "clockOut": format_time_of_day(r.clock_out) or "",
                "status": r.status.value,
            }
            for r in records
        ]
        return _to_csv(ATTENDANCE_FIELDS, rows)

    def leave_csv(self) -> str:
        requests = list(self._leaves.list_all())
        if not requests:
            return ""

        usernames = self._usernames()
        requests.sort(key=lambda r: r.start_date, reverse=True)
        rows = [
            {
                "startDate": format_display_date(r.start_date),
                "endDate": format_display_date(r.end_date),
                "employeeName": r.employee_name,
                "username": usernames.get(r.employee_id, "unknown"),
                "reason": r.reason,
                "leaveType": r.leave_type.value,
                "status": r.status.value,
                "deductionAmount": _format_amount(r.deduction_amount),
            }
            for r in requests
        ]
        return _to_csv(LEAVE_FIELDS, rows)
