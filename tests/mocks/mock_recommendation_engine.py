"""Mock recommendation engine for testing."""

from typing import Any, Self

from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.context import ProjectContextDTO
from stack_navigator.models.recommendation import TechStackRecommendations
from stack_navigator.services.fallback import default_recommendations


class MockRecommendationEngine:
    """In-memory recommendation engine.

    Returns the rule-based default stack and records every call so tests
    can assert on what the orchestrator handed over.
    """

    config_class = None

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config = config or {}
        self.calls: list[tuple[str, ProjectAnalysis, ProjectContextDTO]] = []
        self.explanations: list[tuple[str, str]] = []
        self.closed = False

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        return cls(config)

    async def close(self) -> None:
        self.closed = True

    async def generate_recommendations(
        self,
        summary: str,
        analysis: ProjectAnalysis,
        context: ProjectContextDTO,
    ) -> TechStackRecommendations:
        self.calls.append((summary, analysis, context))
        return default_recommendations(analysis)

    async def explain_recommendation(
        self,
        technology: str,
        choice: str,
        context: ProjectContextDTO,
    ) -> str:
        self.explanations.append((technology, choice))
        return f"{choice} fits {context.project_type or 'this project'}"
