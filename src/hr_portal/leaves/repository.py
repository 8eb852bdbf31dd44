from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def add(self, request: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def update(self, request: LeaveRequest) -> bool:
        raise NotImplementedError
