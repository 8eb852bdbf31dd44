from __future__ import annotations

import json
from datetime import date

import pytest
from werkzeug.security import check_password_hash

from hr_portal.core.exceptions import PersistenceError
from hr_portal.database.connection import JsonDocumentStore
from hr_portal.database.migrations import COLLECTIONS, LATEST_VERSION, SCHEMA_VERSION_KEY, apply_migrations
from hr_portal.leaves.json_leave_repository import JsonLeaveRequestRepository


def test_fresh_store_gets_collections_settings_and_default_admin(store):
    with store.read() as doc:
        assert doc[SCHEMA_VERSION_KEY] == LATEST_VERSION
        assert all(doc[name] == [] for name in COLLECTIONS if name != "adminProfiles")
        assert doc["settings"]["clockInRadius"] == 500

        admin = doc["adminProfiles"][0]
        assert admin["username"] == "admin"
        assert "password" not in admin
        assert check_password_hash(admin["passwordHash"], "admin123")


def test_migrations_are_idempotent(store):
    with store.read() as doc:
        snapshot = json.loads(json.dumps(doc))

    assert apply_migrations(snapshot) is False


def test_legacy_file_is_upgraded_and_rewritten(tmp_path, india_local_time):
    path = tmp_path / "db.json"
    path.write_text(
        json.dumps(
            {
                "employees": [
                    {
                        "id": "e1",
                        "name": "Alice",
                        "username": "alice",
                        "position": "Engineer",
                        "salary": 1000,
                        "avatar": "",
                        "password": "secret1",
                    }
                ],
                "attendance": [],
                "leaveRequests": [
                    {
                        "id": "l1",
                        "employeeId": "e1",
                        "employeeName": "Alice",
                        "startDate": "2024-03-10T18:30:00.000Z",
                        "endDate": "2024-03-11T18:30:00.000Z",
                        "reason": "Trip",
                        "leaveType": "Paid",
                        "status": "Pending",
                    }
                ],
                "adminProfile": {"name": "Boss", "avatar": "", "username": "boss", "password": "boss1234"},
            }
        ),
        encoding="utf-8",
    )

    store = JsonDocumentStore(path)
    with store.read() as doc:
        assert "adminProfile" not in doc
        assert doc["adminProfiles"][0]["username"] == "boss"
        assert check_password_hash(doc["adminProfiles"][0]["passwordHash"], "boss1234")
        assert check_password_hash(doc["employees"][0]["passwordHash"], "secret1")
        assert doc["chatGroups"] == []

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk[SCHEMA_VERSION_KEY] == LATEST_VERSION
    assert "password" not in on_disk["employees"][0]

    leave = JsonLeaveRequestRepository(store).get("l1")
    assert (leave.start_date, leave.end_date) == (date(2024, 3, 11), date(2024, 3, 12))


def test_failed_transaction_is_rolled_back(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as doc:
            doc["employees"].append({"id": "x"})
            raise RuntimeError("boom")

    with store.read() as doc:
        assert doc["employees"] == []


def test_nested_transactions_share_one_document(store):
    with store.transaction() as outer:
        outer["employees"].append({"id": "a"})
        with store.transaction() as inner:
            assert inner is outer
            inner["employees"].append({"id": "b"})
        with store.read() as view:
            assert [r["id"] for r in view["employees"]] == ["a", "b"]

    with store.read() as doc:
        assert [r["id"] for r in doc["employees"]] == ["a", "b"]


def test_inner_failure_discards_the_whole_unit(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as outer:
            outer["employees"].append({"id": "a"})
            with store.transaction():
                raise RuntimeError("boom")

    with store.read() as doc:
        assert doc["employees"] == []


def test_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "data" / "db.json"
    with JsonDocumentStore(path).transaction() as doc:
        doc["employees"].append({"id": "a"})

    with JsonDocumentStore(path).read() as doc:
        assert doc["employees"] == [{"id": "a"}]


def test_unreadable_file_raises_persistence_error(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        with JsonDocumentStore(path).read():
            pass


def test_non_object_document_raises_persistence_error(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(PersistenceError):
        with JsonDocumentStore(path).read():
            pass
