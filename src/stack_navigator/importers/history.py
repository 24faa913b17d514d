"""Chat history importer for stack_navigator.

Turns a stored conversation (a JSON array of turns) into ChatMessage
objects ready to be replayed into a ConversationSession.
"""

import json
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import TypeAdapter

from stack_navigator.logging import get_logger
from stack_navigator.models.message import ChatMessage

__all__ = [
    "ChatHistoryImporter",
]

logger = get_logger(__name__)

_MESSAGES = TypeAdapter(list[ChatMessage])


class ChatHistoryImporter:
    """Parser for stored chat histories.

    Expected shape:
        [{"id": "1", "role": "user", "content": "...", "timestamp": "2024-01-01T00:00:00Z"}]

    Extra keys on a turn (e.g. attached recommendations) are ignored.
    The importer only normalizes data; it never extracts context.

    Example:
        messages = ChatHistoryImporter().parse_file("conversation.json")
        session = ConversationSession.from_history(messages)
    """

    def parse(self, raw_history: Any) -> list[ChatMessage]:
        """Parse raw history data into ChatMessage objects.

        Args:
            raw_history: Decoded JSON, a list of turns or an object with
                a "messages" list

        Returns:
            Messages in stored order

        Raises:
            ValueError: If the payload holds no list of messages
            pydantic.ValidationError: If a turn is malformed
        """
        if isinstance(raw_history, dict):
            raw_history = raw_history.get("messages")
        if not isinstance(raw_history, list):
            raise ValueError("Chat history must be a list of messages")

        messages = _MESSAGES.validate_python(raw_history)
        logger.debug("history_parsed", count=len(messages))
        return messages

    def parse_file(self, path: Path | str) -> list[ChatMessage]:
        """Parse from file path."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return self.parse(data)

    def parse_stream(self, stream: BinaryIO) -> list[ChatMessage]:
        """Parse from binary file stream."""
        return self.parse(json.load(stream))

    def parse_string(self, json_string: str) -> list[ChatMessage]:
        """Parse from JSON string."""
        return self.parse(json.loads(json_string))
