"""Recommendation engine interface for stack_navigator.

This module defines the Protocol for engines that turn an analysed
conversation into a technology-stack recommendation.
"""

from typing import Protocol, runtime_checkable

from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.context import ProjectContextDTO
from stack_navigator.models.recommendation import TechStackRecommendations

__all__ = [
    "RecommendationEngineInterface",
]


@runtime_checkable
class RecommendationEngineInterface(Protocol):
    """Contract for recommendation engines.

    Implementations should never raise on engine failure; they are
    expected to fall back to a default recommendation instead.
    """

    async def generate_recommendations(
        self,
        summary: str,
        analysis: ProjectAnalysis,
        context: ProjectContextDTO,
    ) -> TechStackRecommendations:
        """Generate a stack recommendation.

        Args:
            summary: Conversation summary string
            analysis: Current project analysis
            context: Snapshot of the project context

        Returns:
            TechStackRecommendations
        """
        ...

    async def explain_recommendation(
        self,
        technology: str,
        choice: str,
        context: ProjectContextDTO,
    ) -> str:
        """Explain one recommended choice in plain language.

        Args:
            technology: Stack category (e.g. "authentication")
            choice: Recommended option (e.g. "clerk")
            context: Snapshot of the project context

        Returns:
            Explanation text
        """
        ...
