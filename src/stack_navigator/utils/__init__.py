"""Utility functions for stack_navigator."""

from stack_navigator.utils.hashing import generate_message_id, hash_text

__all__ = [
    "generate_message_id",
    "hash_text",
]
