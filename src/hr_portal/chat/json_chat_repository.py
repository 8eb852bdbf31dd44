from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..database.json_base import JsonRepositoryBase, Row, find_all, find_one
from .model import ChatGroup, ChatMessage, UserChatStatus
from .repository import ChatRepository


def _to_group(row: Row) -> ChatGroup:
    return ChatGroup(
        group_id=row["id"],
        name=row["name"],
        topic=row.get("topic", ""),
        created_at=parse_timestamp(row["createdAt"]),
        members=tuple(row.get("members") or ()),
    )


def _group_row(group: ChatGroup) -> Row:
    return {
        "id": group.group_id,
        "name": group.name,
        "topic": group.topic,
        "createdAt": format_timestamp(group.created_at),
        "members": list(group.members),
    }


def _to_message(row: Row) -> ChatMessage:
    return ChatMessage(
        message_id=row["id"],
        group_id=row["groupId"],
        sender_id=row["employeeId"],
        sender_name=row.get("employeeName", ""),
        sender_avatar=row.get("employeeAvatar", ""),
        text=row.get("text", ""),
        created_at=parse_timestamp(row["createdAt"]),
    )


def _message_row(message: ChatMessage) -> Row:
    return {
        "id": message.message_id,
        "groupId": message.group_id,
        "employeeId": message.sender_id,
        "employeeName": message.sender_name,
        "employeeAvatar": message.sender_avatar,
        "text": message.text,
        "createdAt": format_timestamp(message.created_at),
    }


class JsonChatRepository(JsonRepositoryBase, ChatRepository):
    def get_group(self, group_id: str) -> Optional[ChatGroup]:
        with self._store.read() as doc:
            row = find_one(doc.get("chatGroups", []), lambda r: r["id"] == group_id)
            return _to_group(row) if row else None

    def list_groups(self) -> Sequence[ChatGroup]:
        with self._store.read() as doc:
            return [_to_group(r) for r in doc.get("chatGroups", [])]

    def add_group(self, group: ChatGroup) -> ChatGroup:
        with self._store.transaction() as doc:
            doc.setdefault("chatGroups", []).append(_group_row(group))
        return group

    def update_group(self, group: ChatGroup) -> bool:
        with self._store.transaction() as doc:
            rows = doc.setdefault("chatGroups", [])
            for i, r in enumerate(rows):
                if r["id"] == group.group_id:
                    rows[i] = {**r, **_group_row(group)}
                    return True
        return False

    def delete_group(self, group_id: str) -> bool:
        with self._store.transaction() as doc:
            groups = doc.setdefault("chatGroups", [])
            before = len(groups)
            doc["chatGroups"] = [r for r in groups if r["id"] != group_id]
            doc["chatMessages"] = [r for r in doc.get("chatMessages", []) if r["groupId"] != group_id]
            doc["userChatStatus"] = [r for r in doc.get("userChatStatus", []) if r["groupId"] != group_id]
            return len(doc["chatGroups"]) != before

    def list_messages(self, group_id: str) -> Sequence[ChatMessage]:
        with self._store.read() as doc:
            rows = find_all(doc.get("chatMessages", []), lambda r: r["groupId"] == group_id)
        return sorted((_to_message(r) for r in rows), key=lambda m: m.created_at)

    def latest_message(self, group_id: str) -> Optional[ChatMessage]:
        messages = self.list_messages(group_id)
        return messages[-1] if messages else None

    def add_message(self, message: ChatMessage) -> ChatMessage:
        with self._store.transaction() as doc:
            doc.setdefault("chatMessages", []).append(_message_row(message))
        return message

    def get_status(self, user_id: str, group_id: str) -> Optional[UserChatStatus]:
        with self._store.read() as doc:
            row = find_one(
                doc.get("userChatStatus", []),
                lambda r: r["userId"] == user_id and r["groupId"] == group_id,
            )
            if not row:
                return None
            return UserChatStatus(user_id=row["userId"], group_id=row["groupId"], last_read=parse_timestamp(row["lastRead"]))

    def upsert_status(self, status: UserChatStatus) -> None:
        with self._store.transaction() as doc:
            rows = doc.setdefault("userChatStatus", [])
            row = find_one(rows, lambda r: r["userId"] == status.user_id and r["groupId"] == status.group_id)
            if row:
                row["lastRead"] = format_timestamp(status.last_read)
            else:
                rows.append(
                    {
                        "userId": status.user_id,
                        "groupId": status.group_id,
                        "lastRead": format_timestamp(status.last_read),
                    }
                )
