from __future__ import annotations

import time
from datetime import datetime

import pytest

from hr_portal.container import build_container
from hr_portal.database.connection import JsonDocumentStore


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 4, 9, 30, 0)


@pytest.fixture
def store():
    return JsonDocumentStore(None)


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def alice(container):
    return container.employee_service.add_employee(
        name="Alice Johnson",
        username="alice",
        position="Software Engineer",
        salary=60000,
        password="password123",
    )


@pytest.fixture
def office(container):
    return container.office_service.get_settings().office_location


@pytest.fixture
def india_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "IST-05:30")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
