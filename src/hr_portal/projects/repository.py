from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def get(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[Project]:
        raise NotImplementedError

    def add(self, project: Project) -> Project:
        raise NotImplementedError

    def update(self, project: Project) -> bool:
        raise NotImplementedError

    def delete(self, project_id: str) -> bool:
        raise NotImplementedError
