from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ChatGroup, ChatMessage, UserChatStatus


class ChatRepository(Protocol):
    # Groups
    def get_group(self, group_id: str) -> Optional[ChatGroup]:
        raise NotImplementedError

    def list_groups(self) -> Sequence[ChatGroup]:
        raise NotImplementedError

    def add_group(self, group: ChatGroup) -> ChatGroup:
        raise NotImplementedError

    def update_group(self, group: ChatGroup) -> bool:
        raise NotImplementedError

    def delete_group(self, group_id: str) -> bool:
        """Delete the group with its messages and read watermarks."""

        raise NotImplementedError

    # Messages
    def list_messages(self, group_id: str) -> Sequence[ChatMessage]:
        """Messages of one group, oldest first."""

        raise NotImplementedError

    def latest_message(self, group_id: str) -> Optional[ChatMessage]:
        raise NotImplementedError

    def add_message(self, message: ChatMessage) -> ChatMessage:
        raise NotImplementedError

    # Read watermarks
    def get_status(self, user_id: str, group_id: str) -> Optional[UserChatStatus]:
        raise NotImplementedError

    def upsert_status(self, status: UserChatStatus) -> None:
        raise NotImplementedError
