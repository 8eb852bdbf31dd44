from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from hr_portal.core.exceptions import AuthorizationError, EmployeeNotFound, GroupNotFound, ValidationError
from hr_portal.users.model import AdminActor, EmployeeActor

T0 = datetime(2024, 3, 4, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def bob(container):
    return container.employee_service.add_employee(
        name="Bob Smith", username="bob", position="Manager", salary=75000, password="password123"
    )


@pytest.fixture
def admin(container):
    return container.admin_service.list_admins()[0]


@pytest.fixture
def group(container, alice):
    return container.chat_service.create_group(
        name="Engineering", topic="Sprint planning", member_ids=[alice.employee_id], now=T0
    )


def test_create_group_validates_input(container, alice):
    with pytest.raises(ValidationError):
        container.chat_service.create_group(name="ab", topic="Sprint planning", member_ids=[alice.employee_id])
    with pytest.raises(ValidationError):
        container.chat_service.create_group(name="Engineering", topic="abc", member_ids=[alice.employee_id])
    with pytest.raises(ValidationError):
        container.chat_service.create_group(name="Engineering", topic="Sprint planning", member_ids=[])
    with pytest.raises(EmployeeNotFound):
        container.chat_service.create_group(name="Engineering", topic="Sprint planning", member_ids=["ghost"])


def test_groups_visible_by_membership(container, alice, bob, group):
    assert [g.group_id for g in container.chat_service.groups_for(EmployeeActor(user_id=alice.employee_id))] == [
        group.group_id
    ]
    assert container.chat_service.groups_for(EmployeeActor(user_id=bob.employee_id)) == []
    assert len(container.chat_service.groups_for(AdminActor(user_id="any"))) == 1


def test_non_member_cannot_read_or_post(container, bob, group):
    actor = EmployeeActor(user_id=bob.employee_id)
    with pytest.raises(AuthorizationError) as exc:
        container.chat_service.messages_for_group(actor, group.group_id)
    assert str(exc.value) == "Access denied. You are not a member of this group."

    with pytest.raises(AuthorizationError):
        container.chat_service.send_message(actor, group.group_id, "hello")


def test_messages_are_ordered_and_admin_name_is_tagged(container, alice, admin, group):
    container.chat_service.send_message(
        EmployeeActor(user_id=alice.employee_id), group.group_id, "second", now=T0 + timedelta(minutes=2)
    )
    container.chat_service.send_message(
        AdminActor(user_id=admin.admin_id), group.group_id, "first", now=T0 + timedelta(minutes=1)
    )

    messages = container.chat_service.messages_for_group(EmployeeActor(user_id=alice.employee_id), group.group_id)
    assert [m.text for m in messages] == ["first", "second"]
    assert messages[0].sender_name == "Admin (Admin)"
    assert messages[1].sender_name == "Alice Johnson"


def test_blank_message_is_rejected(container, alice, group):
    with pytest.raises(ValidationError):
        container.chat_service.send_message(EmployeeActor(user_id=alice.employee_id), group.group_id, "   ")


def test_read_state_through_the_store(container, alice, admin, group):
    read_state = container.chat_read_state_service
    container.chat_service.send_message(
        AdminActor(user_id=admin.admin_id), group.group_id, "standup at 10", now=T0 + timedelta(minutes=1)
    )

    assert read_state.has_unread_for_user(alice.employee_id) is True
    assert read_state.has_unread_for_user(admin.admin_id) is False

    read_state.mark_read(alice.employee_id, group.group_id, now=T0 + timedelta(minutes=2))
    assert read_state.has_unread_for_user(alice.employee_id) is False


def test_update_and_delete_group(container, alice, bob, group):
    updated = container.chat_service.update_group(
        group.group_id, name="Engineering team", topic="Sprint planning", member_ids=[alice.employee_id, bob.employee_id]
    )
    assert updated.members == (alice.employee_id, bob.employee_id)
    assert updated.created_at == group.created_at

    container.chat_service.send_message(EmployeeActor(user_id=bob.employee_id), group.group_id, "hi", now=T0)
    container.chat_read_state_service.mark_read(alice.employee_id, group.group_id, now=T0)

    container.chat_service.delete_group(group.group_id)

    assert container.chat_repo.list_messages(group.group_id) == []
    assert container.chat_repo.get_status(alice.employee_id, group.group_id) is None
    with pytest.raises(GroupNotFound):
        container.chat_service.delete_group(group.group_id)
