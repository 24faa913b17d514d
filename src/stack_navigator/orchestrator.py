"""StackNavigator orchestrator for recommendation requests.

This module provides the main entry point for the stack_navigator package,
wiring configuration, conversation sessions and the recommendation engine.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from stack_navigator.config import StackNavigatorConfig
from stack_navigator.conversation import ConversationSession
from stack_navigator.importers.history import ChatHistoryImporter
from stack_navigator.interfaces.recommendation import RecommendationEngineInterface
from stack_navigator.logging import get_logger
from stack_navigator.models.message import ChatMessage
from stack_navigator.models.recommendation import RecommendationResult

__all__ = ["InsufficientContextError", "StackNavigator"]

logger = get_logger(__name__)


class InsufficientContextError(ValueError):
    """Raised when a recommendation is requested before the gate opens."""

    def __init__(self, summary: str) -> None:
        super().__init__(
            "Insufficient context for recommendations; "
            "continue the conversation to gather more project details"
        )
        self.summary = summary


class StackNavigator:
    """Main orchestrator for stack recommendations.

    Accepts a recommendation engine class. Config is loaded from .env
    automatically. For custom engines, set config_class = None and pass
    engine_custom_config.

    Example:
        async with StackNavigator(engine_class=OpenAIProvider) as navigator:
            session = navigator.session_from_history(messages)
            result = await navigator.recommend(session)
    """

    def __init__(
        self,
        engine_class: type[RecommendationEngineInterface],
        *,
        engine_custom_config: dict[str, Any] | None = None,
        config: StackNavigatorConfig | None = None,
    ) -> None:
        """Initialize StackNavigator with an engine implementation class.

        Args:
            engine_class: Recommendation engine implementation class
            engine_custom_config: Custom config dict if engine_class.config_class is None
            config: Explicit configuration (loaded from environment if None)
        """
        self._config = config or StackNavigatorConfig()
        self._engine_class = engine_class
        self._engine_custom_config = engine_custom_config
        self._engine: RecommendationEngineInterface | None = None
        self._importer = ChatHistoryImporter()
        self._connected = False

    async def _instantiate_engine(self) -> RecommendationEngineInterface:
        """Instantiate the engine from its config class or the custom dict."""
        cls: Any = self._engine_class
        config_class = getattr(cls, "config_class", None)

        if config_class is None:
            if self._engine_custom_config is None:
                raise ValueError(
                    f"{cls.__name__} has config_class=None but no custom_config provided"
                )
            return await cls.from_dict(self._engine_custom_config)

        if config_class is type(self._config.llm):
            return await cls.from_config(self._config.llm)
        return await cls.from_config(config_class())

    async def _connect(self) -> None:
        if self._connected:
            return
        self._engine = await self._instantiate_engine()
        self._connected = True
        logger.info("stack_navigator_connected", engine=self._engine_class.__name__)

    async def _disconnect(self) -> None:
        if self._engine is not None and hasattr(self._engine, "close"):
            await self._engine.close()
        self._engine = None
        self._connected = False
        logger.info("stack_navigator_disconnected")

    async def __aenter__(self) -> "StackNavigator":
        """Async context manager entry - connects automatically."""
        await self._connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - disconnects automatically."""
        await self._disconnect()

    def _ensure_connected(self) -> RecommendationEngineInterface:
        if not self._connected or self._engine is None:
            raise RuntimeError(
                "StackNavigator not connected. Use 'async with StackNavigator(...) as sn:'"
            )
        return self._engine

    # === SESSIONS ===

    def new_session(self) -> ConversationSession:
        """Start an empty conversation session."""
        return ConversationSession(settings=self._config.analysis)

    def session_from_history(
        self,
        history: Iterable[ChatMessage] | str | Path,
    ) -> ConversationSession:
        """Rebuild a session from stored history.

        Args:
            history: ChatMessage objects, a JSON string, or a path to a JSON file

        Returns:
            ConversationSession with the history replayed
        """
        messages: Iterable[ChatMessage]
        if isinstance(history, Path):
            messages = self._importer.parse_file(history)
        elif isinstance(history, str):
            messages = self._importer.parse_string(history)
        else:
            messages = history
        return ConversationSession.from_history(messages, settings=self._config.analysis)

    # === RECOMMENDATIONS ===

    async def recommend(self, session: ConversationSession) -> RecommendationResult:
        """Generate a stack recommendation for a conversation.

        Args:
            session: Conversation to recommend for

        Returns:
            RecommendationResult with recommendations, analysis and summary

        Raises:
            InsufficientContextError: If the readiness gate is closed
            RuntimeError: If not connected
        """
        engine = self._ensure_connected()

        summary = session.get_conversation_summary()
        if not session.should_generate_recommendations():
            logger.info("recommendation_skipped", reason="insufficient_context", summary=summary)
            raise InsufficientContextError(summary)

        analysis = session.analyze_project()
        context = session.context.to_dto()
        recommendations = await engine.generate_recommendations(summary, analysis, context)
        session.record_recommendations(recommendations)

        logger.info(
            "recommendation_completed",
            complexity=analysis.complexity.value,
            business_model=analysis.business_model.value,
            message_count=len(session.messages),
        )

        return RecommendationResult(
            recommendations=recommendations,
            analysis=analysis,
            summary=summary,
            context=context,
        )

    async def explain(
        self,
        technology: str,
        choice: str,
        session: ConversationSession,
    ) -> str:
        """Explain one recommended choice for a conversation.

        Args:
            technology: Stack category (e.g. "database")
            choice: Recommended option (e.g. "supabase")
            session: Conversation providing the context

        Returns:
            Explanation text
        """
        engine = self._ensure_connected()
        return await engine.explain_recommendation(technology, choice, session.context.to_dto())
