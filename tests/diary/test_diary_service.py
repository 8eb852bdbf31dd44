from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from hr_portal.core.enums import DiaryTaskStatus
from hr_portal.core.exceptions import EmployeeNotFound, ValidationError


def _task(**overrides):
    task = {
        "taskName": "Fix login bug",
        "description": "Session cookie expiry",
        "plannedHours": "2",
        "estimatedHours": "2.5",
        "status": "On schedule",
    }
    task.update(overrides)
    return task


def test_save_entry_then_overwrite_same_day(container, alice):
    day = date(2024, 3, 4)
    first = container.diary_service.save_entry(
        employee_id=alice.employee_id, work_date=day, tasks=[_task()], now=datetime(2024, 3, 4, 10, 0)
    )
    second = container.diary_service.save_entry(
        employee_id=alice.employee_id,
        work_date=day,
        tasks=[_task(taskName="Write tests", status="Ahead"), _task(taskName="Review PR")],
        now=datetime(2024, 3, 4, 17, 0),
    )

    assert second.entry_id == first.entry_id
    entry = container.diary_service.get_entry(alice.employee_id, day)
    assert [t.task_name for t in entry.tasks] == ["Write tests", "Review PR"]
    assert entry.tasks[0].status == DiaryTaskStatus.AHEAD
    assert entry.tasks[0].estimated_hours == "2.5"
    assert entry.updated_at == datetime(2024, 3, 4, 17, 0, tzinfo=timezone.utc)
    assert len(container.diary_service.list_entries()) == 1


def test_task_validation(container, alice):
    day = date(2024, 3, 4)
    with pytest.raises(ValidationError):
        container.diary_service.save_entry(employee_id=alice.employee_id, work_date=day, tasks=[_task(taskName=" ")])
    with pytest.raises(ValidationError):
        container.diary_service.save_entry(employee_id=alice.employee_id, work_date=day, tasks=[_task(plannedHours="-1")])
    with pytest.raises(ValidationError):
        container.diary_service.save_entry(employee_id=alice.employee_id, work_date=day, tasks=[_task(plannedHours="two")])
    with pytest.raises(ValidationError):
        container.diary_service.save_entry(employee_id=alice.employee_id, work_date=day, tasks=[_task(status="Done")])
    with pytest.raises(ValidationError):
        container.diary_service.save_entry(employee_id=alice.employee_id, work_date=day, tasks=["not a task"])
    with pytest.raises(EmployeeNotFound):
        container.diary_service.save_entry(employee_id="ghost", work_date=day, tasks=[_task()])


def test_list_entries_filters_by_date_newest_first(container, alice):
    for day in (4, 5, 6):
        container.diary_service.save_entry(
            employee_id=alice.employee_id, work_date=date(2024, 3, day), tasks=[_task()], now=datetime(2024, 3, day, 18)
        )

    assert [e.work_date.day for e in container.diary_service.list_entries()] == [6, 5, 4]
    assert [e.work_date.day for e in container.diary_service.list_entries(work_date=date(2024, 3, 5))] == [5]
