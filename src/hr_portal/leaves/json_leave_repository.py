from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_calendar_date
from ..core.enums import LeaveStatus, LeaveType
from ..database.json_base import JsonRepositoryBase, Row, find_all, find_one
from .model import LeaveRequest
from .repository import LeaveRequestRepository


def _to_request(row: Row) -> LeaveRequest:
    deduction = row.get("deductionAmount")
    return LeaveRequest(
        request_id=row["id"],
        employee_id=row["employeeId"],
        employee_name=row.get("employeeName", ""),
        start_date=parse_calendar_date(row["startDate"]),
        end_date=parse_calendar_date(row["endDate"]),
        reason=row.get("reason", ""),
        leave_type=LeaveType(row["leaveType"]),
        status=LeaveStatus(row["status"]),
        deduction_amount=float(deduction) if deduction is not None else None,
    )


def _to_row(request: LeaveRequest) -> Row:
    row: Row = {
        "id": request.request_id,
        "employeeId": request.employee_id,
        "employeeName": request.employee_name,
        "startDate": request.start_date.isoformat(),
        "endDate": request.end_date.isoformat(),
        "reason": request.reason,
        "leaveType": request.leave_type.value,
        "status": request.status.value,
    }
    if request.deduction_amount is not None:
        row["deductionAmount"] = request.deduction_amount
    return row


class JsonLeaveRequestRepository(JsonRepositoryBase, LeaveRequestRepository):
    collection = "leaveRequests"

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["id"] == request_id)
            return _to_request(row) if row else None

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        with self._store.read() as doc:
            rows = self._rows(doc)
            if status is not None:
                rows = find_all(rows, lambda r: r["status"] == status.value)
            return [_to_request(r) for r in rows]

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        with self._store.read() as doc:
            return [_to_request(r) for r in find_all(self._rows(doc), lambda r: r["employeeId"] == employee_id)]

    def add(self, request: LeaveRequest) -> LeaveRequest:
        with self._store.transaction() as doc:
            self._rows(doc).append(_to_row(request))
        return request

    def update(self, request: LeaveRequest) -> bool:
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["id"] == request.request_id:
                    rows[i] = _to_row(request)
                    return True
        return False
