from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.enums import ProjectStatus
from ..database.json_base import JsonRepositoryBase, Row, find_all, find_one
from .model import Project
from .repository import ProjectRepository


def _to_project(row: Row) -> Project:
    return Project(
        project_id=row["id"],
        employee_id=row["employeeId"],
        employee_name=row.get("employeeName", ""),
        project_name=row["projectName"],
        description=row.get("description", ""),
        status=ProjectStatus(row["status"]),
        created_at=parse_timestamp(row["createdAt"]),
        file_name=row.get("fileName") or None,
    )


def _to_row(project: Project) -> Row:
    row: Row = {
        "id": project.project_id,
        "employeeId": project.employee_id,
        "employeeName": project.employee_name,
        "projectName": project.project_name,
        "description": project.description,
        "status": project.status.value,
        "createdAt": format_timestamp(project.created_at),
    }
    if project.file_name:
        row["fileName"] = project.file_name
    return row


class JsonProjectRepository(JsonRepositoryBase, ProjectRepository):
    collection = "projects"

    def get(self, project_id: str) -> Optional[Project]:
        with self._store.read() as doc:
            row = find_one(self._rows(doc), lambda r: r["id"] == project_id)
            return _to_project(row) if row else None

    def list_for_employee(self, employee_id: str) -> Sequence[Project]:
        with self._store.read() as doc:
            return [_to_project(r) for r in find_all(self._rows(doc), lambda r: r["employeeId"] == employee_id)]

    def add(self, project: Project) -> Project:
        with self._store.transaction() as doc:
            self._rows(doc).append(_to_row(project))
        return project

    def update(self, project: Project) -> bool:
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            for i, r in enumerate(rows):
                if r["id"] == project.project_id:
                    rows[i] = _to_row(project)
                    return True
        return False

    def delete(self, project_id: str) -> bool:
        with self._store.transaction() as doc:
            rows = self._rows(doc)
            doc[self.collection] = [r for r in rows if r["id"] != project_id]
            return len(doc[self.collection]) != len(rows)
