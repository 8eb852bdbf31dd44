from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import as_utc, now_utc
from ..common.validators import require_enum, require_min_length
from ..core.enums import ProjectStatus
from ..core.exceptions import AuthorizationError, EmployeeNotFound, NotFoundError
from ..database.json_base import new_id
from ..users.repository import EmployeeRepository
from .model import Project
from .repository import ProjectRepository


class ProjectService:
    """Per-employee project tracking; only the owner may change a project."""

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._projects = projects
        self._employees = employees
        self._atomic = atomic or nullcontext

    def _owned(self, employee_id: str, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if not project:
            raise NotFoundError("Project not found")
        if project.employee_id != employee_id:
            raise AuthorizationError("You can only change your own projects")
        return project

    def add_project(
        self,
        *,
        employee_id: str,
        project_name: str,
        description: str,
        status,
        file_name: Optional[str] = None,
        now: datetime | None = None,
    ) -> Project:
        project_name = require_min_length(project_name, "Project name", 3)
        description = require_min_length(description, "Description", 10)
        status = require_enum(ProjectStatus, status, "Status")

        with self._atomic():
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise EmployeeNotFound()
            project = Project(
                project_id=new_id(),
                employee_id=employee_id,
                employee_name=employee.name,
                project_name=project_name,
                description=description,
                status=status,
                created_at=as_utc(now) if now else now_utc(),
                file_name=(file_name or "").strip() or None,
            )
            self._projects.add(project)
        return project

    def update_project(
        self,
        *,
        employee_id: str,
        project_id: str,
        project_name: Optional[str] = None,
        description: Optional[str] = None,
        status=None,
        file_name: Optional[str] = None,
    ) -> Project:
        with self._atomic():
            project = self._owned(employee_id, project_id)
            changes = {}
            if project_name is not None:
                changes["project_name"] = require_min_length(project_name, "Project name", 3)
            if description is not None:
                changes["description"] = require_min_length(description, "Description", 10)
            if status is not None:
                changes["status"] = require_enum(ProjectStatus, status, "Status")
            if file_name is not None:
                changes["file_name"] = file_name.strip() or None
            updated = replace(project, **changes)
            self._projects.update(updated)
        return updated

    def delete_project(self, *, employee_id: str, project_id: str) -> None:
        with self._atomic():
            self._owned(employee_id, project_id)
            self._projects.delete(project_id)

    def list_for_employee(self, employee_id: str) -> Sequence[Project]:
        return sorted(self._projects.list_for_employee(employee_id), key=lambda p: p.created_at, reverse=True)
