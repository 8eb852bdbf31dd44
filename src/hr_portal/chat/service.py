from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import as_utc, now_utc
from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import AuthorizationError, EmployeeNotFound, GroupNotFound, NotFoundError, ValidationError
from ..database.json_base import new_id
from ..users.model import Actor, AdminActor, EmployeeActor
from ..users.repository import AdminRepository, EmployeeRepository
from .model import ChatGroup, ChatMessage, UserChatStatus
from .repository import ChatRepository

logger = logging.getLogger(__name__)


def _visible_groups(chat: ChatRepository, actor: Actor) -> Sequence[ChatGroup]:
    groups = chat.list_groups()
    if isinstance(actor, AdminActor):
        return groups
    return [g for g in groups if actor.user_id in g.members]


class ChatService:
    """Group management (admin) and messaging."""

    def __init__(
        self,
        chat: ChatRepository,
        employees: EmployeeRepository,
        admins: AdminRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._chat = chat
        self._employees = employees
        self._admins = admins
        self._atomic = atomic or nullcontext

    def _validate_group(self, name: str, topic: str, member_ids) -> tuple:
        name = require_min_length(name, "Group name", 3)
        topic = require_min_length(topic, "Topic", 5)
        members = tuple(dict.fromkeys(member_ids or ()))
        if not members:
            raise ValidationError("Please select at least one member.")
        for member_id in members:
            if not self._employees.get_by_id(member_id):
                raise EmployeeNotFound(f"Employee not found: {member_id}")
        return name, topic, members

    def create_group(self, *, name: str, topic: str, member_ids, now: datetime | None = None) -> ChatGroup:
        with self._atomic():
            name, topic, members = self._validate_group(name, topic, member_ids)
            group = ChatGroup(
                group_id=new_id(),
                name=name,
                topic=topic,
                created_at=as_utc(now) if now else now_utc(),
                members=members,
            )
            self._chat.add_group(group)
        logger.info("Chat group %s created with %d member(s)", group.group_id, len(members))
        return group

    def update_group(self, group_id: str, *, name: str, topic: str, member_ids) -> ChatGroup:
        with self._atomic():
            group = self.get_group(group_id)
            name, topic, members = self._validate_group(name, topic, member_ids)
            updated = replace(group, name=name, topic=topic, members=members)
            self._chat.update_group(updated)
        return updated

    def delete_group(self, group_id: str) -> None:
        if not self._chat.delete_group(group_id):
            raise GroupNotFound()
        logger.info("Chat group %s deleted", group_id)

    def get_group(self, group_id: str) -> ChatGroup:
        group = self._chat.get_group(group_id)
        if not group:
            raise GroupNotFound()
        return group

    def groups_for(self, actor: Actor) -> Sequence[ChatGroup]:
        return _visible_groups(self._chat, actor)

    def _group_for(self, actor: Actor, group_id: str) -> ChatGroup:
        group = self.get_group(group_id)
        if not isinstance(actor, AdminActor) and actor.user_id not in group.members:
            raise AuthorizationError("Access denied. You are not a member of this group.")
        return group

    def messages_for_group(self, actor: Actor, group_id: str) -> Sequence[ChatMessage]:
        self._group_for(actor, group_id)
        return self._chat.list_messages(group_id)

    def send_message(self, actor: Actor, group_id: str, text: str, *, now: datetime | None = None) -> ChatMessage:
        text = require_non_empty(text, "Message")

        with self._atomic():
            self._group_for(actor, group_id)
            if isinstance(actor, AdminActor):
                admin = self._admins.get_by_id(actor.user_id)
                if not admin:
                    raise NotFoundError("Admin not found")
                sender_name, sender_avatar = f"{admin.name} (Admin)", admin.avatar
            else:
                employee = self._employees.get_by_id(actor.user_id)
                if not employee:
                    raise EmployeeNotFound()
                sender_name, sender_avatar = employee.name, employee.avatar

            message = ChatMessage(
                message_id=new_id(),
                group_id=group_id,
                sender_id=actor.user_id,
                sender_name=sender_name,
                sender_avatar=sender_avatar,
                text=text,
                created_at=as_utc(now) if now else now_utc(),
            )
            self._chat.add_message(message)
        return message


class ChatReadStateService:
    """Unread detection from one last-read watermark per (user, group)."""

    def __init__(self, chat: ChatRepository, admins: AdminRepository):
        self._chat = chat
        self._admins = admins

    def has_unread(self, actor: Actor) -> bool:
        for group in _visible_groups(self._chat, actor):
            latest = self._chat.latest_message(group.group_id)
            if latest is None:
                continue
            if latest.sender_id == actor.user_id:
                continue

            status = self._chat.get_status(actor.user_id, group.group_id)
            if status is None:
                return True
            if latest.created_at > status.last_read:
                return True
        return False

    def has_unread_for_user(self, user_id: str) -> bool:
        """Anyone who is not an admin is treated as an employee."""
        actor = AdminActor(user_id=user_id) if self._admins.get_by_id(user_id) else EmployeeActor(user_id=user_id)
        return self.has_unread(actor)

    def mark_read(self, user_id: str, group_id: str, *, now: datetime | None = None) -> None:
        self._chat.upsert_status(UserChatStatus(user_id=user_id, group_id=group_id, last_read=as_utc(now) if now else now_utc()))
