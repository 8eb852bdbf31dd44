from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    project_id: str
    employee_id: str
    employee_name: str
    project_name: str
    description: str
    status: ProjectStatus
    created_at: datetime
    file_name: Optional[str] = None
