from __future__ import annotations

from typing import Optional, Sequence

from ..database.json_base import JsonRepositoryBase, Row, find_one
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: Row) -> Employee:
    return Employee(
        employee_id=row["id"],
        name=row["name"],
        username=row["username"],
        position=row.get("position", ""),
        salary=float(row.get("salary") or 0),
        avatar=row.get("avatar", ""),
        password_hash=row.get("passwordHash"),
    )


def _to_row(employee: Employee) -> Row:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "username": employee.username,
        "position": employee.position,
        "salary": employee.salary,
        "avatar": employee.avatar,
        "passwordHash": employee.password_hash,
    }


class JsonEmployeeRepository(JsonRepositoryBase, EmployeeRepository):
    collection = "employees"

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["id"] == employee_id)
            return _to_employee(row) if row else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["username"] == username)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with self._store.read() as doc:
            return [_to_employee(r) for r in self._rows(doc)]

    def add(self, employee: Employee) -> Employee:
        with self._store.transaction() as doc:
            self._rows(doc).append(_to_row(employee))
        return employee

    def update(self, employee: Employee) -> bool:
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["id"] == employee.employee_id:
                    rows[i] = {**r, **_to_row(employee)}
                    return True
        return False

    def delete_cascade(self, employee_id: str) -> bool:
        with self._store.transaction() as doc:
            before = len(self._rows(doc))
            doc["employees"] = [r for r in doc["employees"] if r["id"] != employee_id]
            doc["attendance"] = [r for r in doc.get("attendance", []) if r["employeeId"] != employee_id]
            doc["leaveRequests"] = [r for r in doc.get("leaveRequests", []) if r["employeeId"] != employee_id]
            return len(doc["employees"]) != before

    def clear_all(self) -> None:
        with self._store.transaction() as doc:
            doc["employees"] = []
            doc["attendance"] = []
            doc["leaveRequests"] = []
            doc["dayDiary"] = []
