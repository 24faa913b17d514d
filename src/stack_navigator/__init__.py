"""stack_navigator - conversation analysis for technology-stack recommendations.

This package provides tools for:
- Extracting a structured project context from interview chat turns
- Classifying project complexity, constraints and expertise
- Deciding when enough context exists to recommend a stack
- Handing a summary to an LLM-backed recommendation engine

Example usage:
    from stack_navigator import ChatMessage, OpenAIProvider, StackNavigator

    async with StackNavigator(engine_class=OpenAIProvider) as sn:
        session = sn.new_session()
        session.add_message(ChatMessage.create("user", "Solo founder building a SaaS"))
        if session.should_generate_recommendations():
            result = await sn.recommend(session)
"""

__version__ = "0.1.0"

from stack_navigator.conversation import ConversationPhase, ConversationSession
from stack_navigator.domain.context import ProjectContext
from stack_navigator.importers.history import ChatHistoryImporter
from stack_navigator.infra.llm.anthropic_provider import AnthropicProvider
from stack_navigator.infra.llm.openai_provider import OpenAIProvider
from stack_navigator.interfaces.recommendation import RecommendationEngineInterface
from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.message import ChatMessage, ChatRole
from stack_navigator.models.recommendation import RecommendationResult, TechStackRecommendations
from stack_navigator.orchestrator import InsufficientContextError, StackNavigator
from stack_navigator.services.context_extractor import ContextExtractor
from stack_navigator.services.project_analyzer import ProjectAnalyzer
from stack_navigator.services.readiness import is_ready_for_recommendations
from stack_navigator.services.summary import build_summary

__all__ = [  # noqa: RUF022
    # Orchestrator
    "StackNavigator",
    "InsufficientContextError",
    # Conversation
    "ConversationSession",
    "ConversationPhase",
    "ChatHistoryImporter",
    # Core
    "ContextExtractor",
    "ProjectAnalyzer",
    "ProjectContext",
    "is_ready_for_recommendations",
    "build_summary",
    # Models
    "ChatMessage",
    "ChatRole",
    "ProjectAnalysis",
    "RecommendationResult",
    "TechStackRecommendations",
    # Engines
    "RecommendationEngineInterface",
    "OpenAIProvider",
    "AnthropicProvider",
]
