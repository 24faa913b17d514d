"""Conversation session for stack_navigator.

A session owns one ordered message log and the one ProjectContext derived
from it. Sessions are never shared between conversations.
"""

from collections.abc import Iterable
from enum import StrEnum

from stack_navigator.config import AnalysisSettings
from stack_navigator.domain.context import ProjectContext
from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.message import ChatMessage
from stack_navigator.models.recommendation import TechStackRecommendations
from stack_navigator.services.context_extractor import ContextExtractor
from stack_navigator.services.project_analyzer import ProjectAnalyzer
from stack_navigator.services.readiness import is_ready_for_recommendations
from stack_navigator.services.summary import build_summary

__all__ = [
    "ConversationPhase",
    "ConversationSession",
]


class ConversationPhase(StrEnum):
    """Where a conversation stands in the interview flow."""

    DISCOVERY = "discovery"
    RECOMMENDATION = "recommendation"
    REFINEMENT = "refinement"


class ConversationSession:
    """Message log plus incrementally extracted project context.

    Example:
        session = ConversationSession()
        session.add_message(ChatMessage.create("user", "Solo founder building a SaaS"))
        if session.should_generate_recommendations():
            analysis = session.analyze_project()
            summary = session.get_conversation_summary()
    """

    def __init__(
        self,
        settings: AnalysisSettings | None = None,
        extractor: ContextExtractor | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            settings: Analysis settings (loaded from environment if None)
            extractor: Context extractor (default rule table if None)
        """
        self._settings = settings or AnalysisSettings()
        self._extractor = extractor or ContextExtractor()
        self._analyzer = ProjectAnalyzer(
            moderate_threshold=self._settings.moderate_threshold,
            complex_threshold=self._settings.complex_threshold,
        )
        self._messages: list[ChatMessage] = []
        self._context = ProjectContext()
        self._recommendations: TechStackRecommendations | None = None

    @classmethod
    def from_history(
        cls,
        messages: Iterable[ChatMessage],
        settings: AnalysisSettings | None = None,
    ) -> "ConversationSession":
        """Rebuild a session by replaying stored messages in order.

        Args:
            messages: Stored chat turns in conversation order
            settings: Analysis settings

        Returns:
            New ConversationSession
        """
        session = cls(settings=settings)
        for message in messages:
            session.add_message(message)
        return session

    def add_message(self, message: ChatMessage) -> None:
        """Append a turn and update the context from it."""
        self._messages.append(message)
        self._extractor.extract(message, self._context)

    @property
    def messages(self) -> list[ChatMessage]:
        """Messages in insertion order."""
        return list(self._messages)

    @property
    def context(self) -> ProjectContext:
        """The live project context (owned by this session)."""
        return self._context

    @property
    def recommendations(self) -> TechStackRecommendations | None:
        """Most recently recorded recommendations, if any."""
        return self._recommendations

    @property
    def phase(self) -> ConversationPhase:
        """Current interview phase."""
        if self._recommendations is not None:
            return ConversationPhase.REFINEMENT
        if self.should_generate_recommendations():
            return ConversationPhase.RECOMMENDATION
        return ConversationPhase.DISCOVERY

    def analyze_project(self) -> ProjectAnalysis:
        """Compute a fresh analysis of the current context."""
        return self._analyzer.analyze(self._context)

    def should_generate_recommendations(self) -> bool:
        """Check the readiness gate against the current context."""
        return is_ready_for_recommendations(self._context)

    def get_conversation_summary(self) -> str:
        """Render the current context as the prompt summary string."""
        return build_summary(self._context, separator=self._settings.summary_separator)

    def record_recommendations(self, recommendations: TechStackRecommendations) -> None:
        """Remember recommendations handed to the user."""
        self._recommendations = recommendations
