from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from datetime import date
from typing import Callable, ContextManager, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iter_dates
from ..common.validators import require_enum, require_non_empty
from ..core.enums import AttendanceStatus, LeaveStatus, LeaveType
from ..core.exceptions import EmployeeNotFound, QuotaExceeded, RequestNotFound, ValidationError
from ..database.json_base import new_id
from ..users.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)

_QUOTA_STATUSES = {LeaveStatus.PENDING, LeaveStatus.APPROVED}


class LeaveService:
    """Leave eligibility and approval.

    Approval is propagated into attendance: every day of the approved range gets an
    "On Leave" row, and unpaid leave can carry a payroll deduction.
    """

    def __init__(
        self,
        requests: LeaveRequestRepository,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._requests = requests
        self._attendance = attendance
        self._employees = employees
        self._atomic = atomic or nullcontext

    def _has_paid_leave_in_month(self, employee_id: str, start_date: date) -> bool:
        # Only start dates are compared: a range spilling into the next month does
        # not use up that month's quota.
        for req in self._requests.list_for_employee(employee_id):
            if req.leave_type != LeaveType.PAID or req.status not in _QUOTA_STATUSES:
                continue
            if (req.start_date.year, req.start_date.month) == (start_date.year, start_date.month):
                return True
        return False

    def apply_for_leave(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: Optional[date],
        reason: str,
        leave_type,
    ) -> LeaveRequest:
        end_date = end_date or start_date
        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")
        reason = require_non_empty(reason, "Reason")
        leave_type = require_enum(LeaveType, leave_type, "Leave type")

        with self._atomic():
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise EmployeeNotFound()

            if leave_type == LeaveType.PAID and self._has_paid_leave_in_month(employee_id, start_date):
                logger.info("Paid leave quota reached for %s in %04d-%02d", employee_id, start_date.year, start_date.month)
                raise QuotaExceeded()

            request = LeaveRequest(
                request_id=new_id(),
                employee_id=employee_id,
                employee_name=employee.name,
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                leave_type=leave_type,
                status=LeaveStatus.PENDING,
            )
            self._requests.add(request)

        logger.info("Leave request %s created for %s (%s)", request.request_id, employee_id, leave_type.value)
        return request

    def _backfill_attendance(self, request: LeaveRequest) -> int:
        touched = 0
        for day in iter_dates(request.start_date, request.end_date):
            existing = self._attendance.get_for_employee_and_date(request.employee_id, day)
            if existing:
                # Recorded clock times are kept; only the status changes.
                record = replace(existing, status=AttendanceStatus.ON_LEAVE)
            else:
                record = AttendanceRecord(
                    attendance_id=new_id(),
                    employee_id=request.employee_id,
                    employee_name=request.employee_name,
                    work_date=day,
                    clock_in=None,
                    clock_out=None,
                    status=AttendanceStatus.ON_LEAVE,
                )
            self._attendance.save(record)
            touched += 1
        return touched

    def update_leave_request_status(self, request_id: str, status, deduction_amount: Optional[float] = None) -> LeaveRequest:
        status = require_enum(LeaveStatus, status, "Status")
        if status == LeaveStatus.PENDING:
            raise ValidationError("Status must be Approved or Rejected")

        with self._atomic():
            request = self._requests.get(request_id)
            if not request:
                raise RequestNotFound()

            # No guard on the previous status: deciding again simply overwrites it.
            updated = replace(request, status=status)

            if status == LeaveStatus.APPROVED:
                days = self._backfill_attendance(updated)
                logger.info("Leave %s approved; %d attendance day(s) marked On Leave", request_id, days)
                if updated.leave_type == LeaveType.UNPAID and deduction_amount and float(deduction_amount) > 0:
                    updated = replace(updated, deduction_amount=float(deduction_amount))
            else:
                logger.info("Leave %s rejected", request_id)

            self._requests.update(updated)
        return updated

    def list_all(self) -> Sequence[LeaveRequest]:
        return sorted(self._requests.list_all(), key=lambda r: r.start_date, reverse=True)

    def list_pending(self) -> Sequence[LeaveRequest]:
        return sorted(self._requests.list_all(status=LeaveStatus.PENDING), key=lambda r: r.start_date, reverse=True)

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return sorted(self._requests.list_for_employee(employee_id), key=lambda r: r.start_date, reverse=True)
