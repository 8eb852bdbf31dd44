from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    employee_name: str
    start_date: date
    end_date: date
    reason: str
    leave_type: LeaveType
    status: LeaveStatus
    deduction_amount: Optional[float] = None
