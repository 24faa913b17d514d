"""Context extraction service for stack_navigator.

This module derives structured project signals from user chat turns.
"""

from collections.abc import Iterable

from stack_navigator.domain.context import FieldKind, ProjectContext
from stack_navigator.logging import get_logger
from stack_navigator.models.message import ChatMessage
from stack_navigator.services.keyword_rules import KEYWORD_RULES, KeywordRule

__all__ = [
    "ContextExtractor",
]

logger = get_logger(__name__)


class ContextExtractor:
    """Service for updating a ProjectContext from chat messages.

    Only user-authored turns are mined; assistant turns never contribute,
    so recommendations stay grounded in what the user actually said.
    The context is updated in place.

    Example:
        extractor = ContextExtractor()
        extractor.extract(message, session_context)
    """

    def __init__(self, rules: tuple[KeywordRule, ...] = KEYWORD_RULES) -> None:
        """Initialize extractor with a rule table.

        Args:
            rules: Ordered keyword rules (defaults to the built-in table)
        """
        self._rules = rules

    def extract(self, message: ChatMessage, context: ProjectContext) -> ProjectContext:
        """Update context from a single message.

        Args:
            message: Chat turn to mine
            context: Running context for the conversation (mutated)

        Returns:
            The same context object
        """
        if not message.is_user:
            return context

        lowered = message.content.lower()
        changed: list[str] = []

        for rule in self._rules:
            if not rule.matches(lowered):
                continue
            if rule.kind is FieldKind.SCALAR:
                updated = context.assign(rule.field, rule.value)
            else:
                updated = context.add_tag(rule.field, rule.value)
            if updated:
                changed.append(f"{rule.field.value}={rule.value}")

        if changed:
            logger.debug("context_updated", message_id=message.id, changes=changed)

        return context

    def extract_all(
        self,
        messages: Iterable[ChatMessage],
        context: ProjectContext | None = None,
    ) -> ProjectContext:
        """Replay messages in order into a context.

        Equivalent to calling extract() once per message.

        Args:
            messages: Chat turns in conversation order
            context: Context to update (a fresh one if None)

        Returns:
            The updated context
        """
        if context is None:
            context = ProjectContext()
        for message in messages:
            self.extract(message, context)
        return context
