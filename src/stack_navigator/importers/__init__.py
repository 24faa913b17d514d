"""Chat history importers for stack_navigator."""

from stack_navigator.importers.history import ChatHistoryImporter

__all__ = [
    "ChatHistoryImporter",
]
