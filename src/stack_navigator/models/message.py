"""Chat message models for stack_navigator.

A conversation is an ordered log of these turns. Messages are
immutable once created.
"""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from stack_navigator.utils.hashing import generate_message_id

__all__ = [
    "ChatMessage",
    "ChatRole",
]


class ChatRole(StrEnum):
    """Author of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel, frozen=True):
    """One turn in a conversation.

    Attributes:
        id: Message identifier
        role: Turn author (user or assistant)
        content: Message text (may be empty)
        timestamp: When the turn was written
    """

    id: str
    role: ChatRole
    content: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_user(self) -> bool:
        """Check if the message was written by the user."""
        return self.role == ChatRole.USER

    @classmethod
    def create(
        cls,
        role: ChatRole | str,
        content: str,
        timestamp: datetime | None = None,
    ) -> "ChatMessage":
        """Create a message with a deterministic ID.

        Args:
            role: Turn author
            content: Message text
            timestamp: Turn timestamp (defaults to now, UTC)

        Returns:
            New ChatMessage
        """
        role = ChatRole(role)
        timestamp = timestamp or datetime.now(UTC)
        return cls(
            id=generate_message_id(role.value, content, timestamp),
            role=role,
            content=content,
            timestamp=timestamp,
        )
