from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from typing import Callable, ContextManager, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty, require_non_negative, require_password
from ..core.constants import DEFAULT_ADMIN_AVATAR, EMPLOYEE_AVATAR_TEMPLATE, MIN_PASSWORD_LENGTH
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    EmployeeNotFound,
    NotFoundError,
    ValidationError,
)
from ..database.json_base import new_id
from .model import Actor, AdminActor, AdminProfile, Employee, EmployeeActor
from .repository import AdminRepository, EmployeeRepository

logger = logging.getLogger(__name__)

Atomic = Callable[[], ContextManager]


def _password_matches(password_hash: Optional[str], password: str) -> bool:
    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password or "")
    except ValueError:
        # e.g. an unknown hash method in a hand-edited data file
        return False


class ActorResolver:
    """Turn a raw user id into an Admin or Employee actor."""

    def __init__(self, admins: AdminRepository, employees: EmployeeRepository):
        self._admins = admins
        self._employees = employees

    def resolve(self, user_id: str) -> Actor:
        if self._admins.get_by_id(user_id):
            return AdminActor(user_id=user_id)
        if self._employees.get_by_id(user_id):
            return EmployeeActor(user_id=user_id)
        raise NotFoundError("User not found")


class AuthService:
    """Use case: authenticate admin or employee (login)."""

    def __init__(self, admins: AdminRepository, employees: EmployeeRepository):
        self._admins = admins
        self._employees = employees

    def authenticate(self, username: str, password: str) -> Actor:
        username = (username or "").strip()

        admin = self._admins.get_by_username(username)
        if admin and _password_matches(admin.password_hash, password):
            return AdminActor(user_id=admin.admin_id)

        employee = self._employees.get_by_username(username)
        if employee and _password_matches(employee.password_hash, password):
            return EmployeeActor(user_id=employee.employee_id)

        logger.info("Failed login for %r", username)
        raise AuthenticationError("Invalid username or password")


class _UsernameGuard:
    def __init__(self, admins: AdminRepository, employees: EmployeeRepository):
        self._admins = admins
        self._employees = employees

    def ensure_available(self, username: str, *, owner_id: Optional[str] = None) -> None:
        employee = self._employees.get_by_username(username)
        if employee and employee.employee_id != owner_id:
            raise ValidationError("Username already exists")
        admin = self._admins.get_by_username(username)
        if admin and admin.admin_id != owner_id:
            raise ValidationError("Username already exists")


class EmployeeService:
    """Use case: manage employees (admin) and self-service profile edits."""

    def __init__(self, employees: EmployeeRepository, admins: AdminRepository, *, atomic: Optional[Atomic] = None):
        self._employees = employees
        self._usernames = _UsernameGuard(admins, employees)
        self._atomic = atomic or nullcontext

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound()
        return employee

    def add_employee(self, *, name: str, username: str, position: str, salary, password: str) -> Employee:
        name = require_min_length(name, "Name", 2)
        username = require_min_length(username, "Username", 3)
        position = require_min_length(position, "Position", 2)
        salary = require_non_negative(salary, "Salary")
        require_password(password, MIN_PASSWORD_LENGTH)

        with self._atomic():
            self._usernames.ensure_available(username)
            employee = Employee(
                employee_id=new_id(),
                name=name,
                username=username,
                position=position,
                salary=salary,
                avatar=EMPLOYEE_AVATAR_TEMPLATE.format(initial=name[0]),
                password_hash=generate_password_hash(password),
            )
            self._employees.add(employee)

        logger.info("Added employee %s (%s)", employee.employee_id, username)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        position: Optional[str] = None,
        salary=None,
        password: Optional[str] = None,
    ) -> Employee:
        with self._atomic():
            employee = self.get_employee(employee_id)
            changes = {}
            if name is not None:
                changes["name"] = require_min_length(name, "Name", 2)
            if username is not None:
                changes["username"] = require_min_length(username, "Username", 3)
                self._usernames.ensure_available(changes["username"], owner_id=employee_id)
            if position is not None:
                changes["position"] = require_min_length(position, "Position", 2)
            if salary is not None:
                changes["salary"] = require_non_negative(salary, "Salary")
            if password:
                changes["password_hash"] = generate_password_hash(require_password(password, MIN_PASSWORD_LENGTH))

            updated = replace(employee, **changes)
            self._employees.update(updated)
        return updated

    def update_avatar(self, actor: Actor, employee_id: str, avatar: str) -> Employee:
        if isinstance(actor, EmployeeActor) and actor.user_id != employee_id:
            raise AuthorizationError("You can only change your own avatar")

        avatar = require_non_empty(avatar, "Avatar")
        with self._atomic():
            updated = replace(self.get_employee(employee_id), avatar=avatar)
            self._employees.update(updated)
        return updated

    def remove_employee(self, employee_id: str) -> None:
        if not self._employees.delete_cascade(employee_id):
            raise EmployeeNotFound()
        logger.info("Removed employee %s with attendance and leave history", employee_id)

    def clear_all(self) -> None:
        self._employees.clear_all()
        logger.warning("Cleared all employees, attendance, leave requests and diary entries")


class AdminService:
    """Use case: manage admin profiles."""

    def __init__(self, admins: AdminRepository, employees: EmployeeRepository, *, atomic: Optional[Atomic] = None):
        self._admins = admins
        self._usernames = _UsernameGuard(admins, employees)
        self._atomic = atomic or nullcontext

    def get_admin(self, admin_id: str) -> AdminProfile:
        admin = self._admins.get_by_id(admin_id)
        if not admin:
            raise NotFoundError("Admin profile not found.")
        return admin

    def list_admins(self) -> Sequence[AdminProfile]:
        return self._admins.list_all()

    def add_admin(self, *, name: str, username: str, password: str) -> AdminProfile:
        name = require_min_length(name, "Name", 2)
        username = require_min_length(username, "Username", 3)
        require_password(password, MIN_PASSWORD_LENGTH)

        with self._atomic():
            self._usernames.ensure_available(username)
            admin = AdminProfile(
                admin_id=new_id(),
                name=name,
                avatar=DEFAULT_ADMIN_AVATAR,
                username=username,
                password_hash=generate_password_hash(password),
            )
            self._admins.add(admin)
        return admin

    def update_profile(
        self,
        admin_id: str,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> AdminProfile:
        with self._atomic():
            admin = self.get_admin(admin_id)
            changes = {}
            if name is not None:
                changes["name"] = require_min_length(name, "Name", 2)
            if username is not None:
                changes["username"] = require_min_length(username, "Username", 3)
                self._usernames.ensure_available(changes["username"], owner_id=admin_id)
            if password:
                changes["password_hash"] = generate_password_hash(require_password(password, MIN_PASSWORD_LENGTH))

            updated = replace(admin, **changes)
            self._admins.update(updated)
        return updated

    def update_avatar(self, admin_id: str, avatar: str) -> AdminProfile:
        avatar = require_non_empty(avatar, "Avatar")
        with self._atomic():
            updated = replace(self.get_admin(admin_id), avatar=avatar)
            self._admins.update(updated)
        return updated
