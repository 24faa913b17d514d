"""Hashing utilities for stack_navigator.

Deterministic hash functions for generating stable message identifiers.
"""

import hashlib
from datetime import datetime

__all__ = [
    "generate_message_id",
    "hash_text",
]


def hash_text(text: str) -> str:
    """Generate SHA256 hash of text.

    Args:
        text: Input text to hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_message_id(role: str, content: str, timestamp: datetime) -> str:
    """Generate deterministic chat message ID.

    The same turn (role, text and instant) always maps to the same ID,
    so a replayed history keeps its identifiers.

    Args:
        role: Message author role
        content: Message text
        timestamp: Message timestamp

    Returns:
        Hexadecimal SHA256 hash string
    """
    combined = f"message|{role}|{content}|{timestamp.isoformat()}"
    return hash_text(combined)
