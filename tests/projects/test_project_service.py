from __future__ import annotations

from datetime import datetime

import pytest

from hr_portal.core.enums import ProjectStatus
from hr_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError


@pytest.fixture
def bob(container):
    return container.employee_service.add_employee(
        name="Bob Smith", username="bob", position="Manager", salary=75000, password="password123"
    )


def _add(container, employee, name="Payroll revamp", now=None):
    return container.project_service.add_project(
        employee_id=employee.employee_id,
        project_name=name,
        description="Rebuild the monthly payroll report",
        status="In Progress",
        now=now,
    )


def test_add_and_list_newest_first(container, alice):
    _add(container, alice, "Old project", now=datetime(2024, 1, 1))
    _add(container, alice, "New project", now=datetime(2024, 2, 1))

    projects = container.project_service.list_for_employee(alice.employee_id)
    assert [p.project_name for p in projects] == ["New project", "Old project"]
    assert projects[0].status == ProjectStatus.IN_PROGRESS
    assert projects[0].employee_name == "Alice Johnson"


def test_add_validation(container, alice):
    with pytest.raises(ValidationError):
        _add(container, alice, name="ab")
    with pytest.raises(ValidationError):
        container.project_service.add_project(
            employee_id=alice.employee_id, project_name="Website", description="too short", status="In Progress"
        )
    with pytest.raises(ValidationError):
        container.project_service.add_project(
            employee_id=alice.employee_id, project_name="Website", description="Marketing site rebuild", status="Done"
        )


def test_only_owner_can_change_project(container, alice, bob):
    project = _add(container, alice)

    with pytest.raises(AuthorizationError):
        container.project_service.update_project(employee_id=bob.employee_id, project_id=project.project_id, status="Completed")
    with pytest.raises(AuthorizationError):
        container.project_service.delete_project(employee_id=bob.employee_id, project_id=project.project_id)

    updated = container.project_service.update_project(
        employee_id=alice.employee_id, project_id=project.project_id, status="Completed"
    )
    assert updated.status == ProjectStatus.COMPLETED
    assert updated.project_name == project.project_name

    container.project_service.delete_project(employee_id=alice.employee_id, project_id=project.project_id)
    assert container.project_service.list_for_employee(alice.employee_id) == []
    with pytest.raises(NotFoundError):
        container.project_service.delete_project(employee_id=alice.employee_id, project_id=project.project_id)
