from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class ChatGroup:
    group_id: str
    name: str
    topic: str
    created_at: datetime
    members: Tuple[str, ...]  # employee ids


@dataclass(frozen=True)
class ChatMessage:
    """Append-only. `sender_id` is an employee id or an admin id."""

    message_id: str
    group_id: str
    sender_id: str
    sender_name: str
    sender_avatar: str
    text: str
    created_at: datetime


@dataclass(frozen=True)
class UserChatStatus:
    """Read watermark for one (user, group) pair."""

    user_id: str
    group_id: str
    last_read: datetime
