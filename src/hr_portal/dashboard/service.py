from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import AttendanceStatus, LeaveStatus
from ..leaves.model import LeaveRequest
from ..leaves.repository import LeaveRequestRepository
from ..payroll.service import PayrollService
from ..users.repository import EmployeeRepository


@dataclass(frozen=True)
class AdminStats:
    total_employees: int
    present_today: int
    absent_today: int
    pending_leaves: int


@dataclass(frozen=True)
class EmployeeSummary:
    today: Optional[AttendanceRecord]
    recent_attendance: Sequence[AttendanceRecord]
    recent_leaves: Sequence[LeaveRequest]
    recent_deductions: Sequence[LeaveRequest]


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRequestRepository,
        payroll: PayrollService,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._payroll = payroll

    def admin_stats(self, today: date) -> AdminStats:
        total = len(self._employees.list_all())
        present = sum(1 for r in self._attendance.list_for_date(today) if r.status == AttendanceStatus.PRESENT)
        return AdminStats(
            total_employees=total,
            present_today=present,
            absent_today=total - present,
            pending_leaves=len(self._leaves.list_all(status=LeaveStatus.PENDING)),
        )

    def employee_summary(self, employee_id: str, today: date) -> EmployeeSummary:
        leaves = sorted(self._leaves.list_for_employee(employee_id), key=lambda r: r.start_date, reverse=True)
        return EmployeeSummary(
            today=self._attendance.get_for_employee_and_date(employee_id, today),
            recent_attendance=self._attendance.get_recent_for_employee(employee_id, DEFAULT_RECENT_LIMIT),
            recent_leaves=leaves[:DEFAULT_RECENT_LIMIT],
            recent_deductions=self._payroll.recent_deductions(employee_id),
        )
