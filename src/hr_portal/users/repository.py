from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AdminProfile, Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_cascade(self, employee_id: str) -> bool:
        """Delete the employee together with their attendance and leave rows."""

        raise NotImplementedError

    def clear_all(self) -> None:
        """Drop employees, attendance, leave requests and diary entries."""

        raise NotImplementedError


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: str) -> Optional[AdminProfile]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[AdminProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AdminProfile]:
        raise NotImplementedError

    def add(self, admin: AdminProfile) -> AdminProfile:
        raise NotImplementedError

    def update(self, admin: AdminProfile) -> bool:
        raise NotImplementedError
