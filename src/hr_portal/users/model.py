from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no storage access code).
    """

    employee_id: str
    name: str
    username: str
    position: str
    salary: float
    avatar: str
    password_hash: Optional[str] = None


@dataclass(frozen=True)
class AdminProfile:
    admin_id: str
    name: str
    avatar: str
    username: str
    password_hash: Optional[str] = None


@dataclass(frozen=True)
class AdminActor:
    user_id: str
    role: Role = Role.ADMIN


@dataclass(frozen=True)
class EmployeeActor:
    user_id: str
    role: Role = Role.EMPLOYEE


# Resolved once at the boundary (login/session) and passed down to services.
Actor = Union[AdminActor, EmployeeActor]


def actor_for(role: Role, user_id: str) -> Actor:
    if role == Role.ADMIN:
        return AdminActor(user_id=user_id)
    return EmployeeActor(user_id=user_id)
