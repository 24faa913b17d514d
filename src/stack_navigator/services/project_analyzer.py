"""Project analysis service for stack_navigator.

This module classifies a project from its accumulated context.
"""

from stack_navigator.domain.context import ProjectContext
from stack_navigator.models.analysis import (
    BudgetConstraints,
    BusinessModel,
    Complexity,
    ProjectAnalysis,
    ScalingNeeds,
    TechnicalExpertise,
    TimeConstraints,
)

__all__ = [
    "ProjectAnalyzer",
]

_BUSINESS_MODELS = {
    "saas": BusinessModel.SAAS,
    "marketplace": BusinessModel.MARKETPLACE,
}

_EXPERTISE = {
    "beginner": TechnicalExpertise.BEGINNER,
    "advanced": TechnicalExpertise.ADVANCED,
}


class ProjectAnalyzer:
    """Pure classifier from ProjectContext to ProjectAnalysis.

    Results are never cached; call analyze() whenever a fresh view is
    needed.

    Example:
        analyzer = ProjectAnalyzer()
        analysis = analyzer.analyze(context)
    """

    def __init__(
        self,
        moderate_threshold: int = 2,
        complex_threshold: int = 4,
    ) -> None:
        """Initialize analyzer with complexity thresholds.

        Args:
            moderate_threshold: Distinct requirements for "moderate"
            complex_threshold: Distinct requirements for "complex"

        Raises:
            ValueError: If thresholds are not 1 <= moderate < complex
        """
        if moderate_threshold < 1 or complex_threshold <= moderate_threshold:
            raise ValueError(
                f"Invalid complexity thresholds: moderate={moderate_threshold}, "
                f"complex={complex_threshold}"
            )
        self._moderate_threshold = moderate_threshold
        self._complex_threshold = complex_threshold

    def analyze(self, context: ProjectContext) -> ProjectAnalysis:
        """Classify the project described by context.

        Args:
            context: Accumulated project context

        Returns:
            Newly computed ProjectAnalysis
        """
        business_model = _BUSINESS_MODELS.get(context.project_type or "", BusinessModel.OTHER)

        return ProjectAnalysis(
            complexity=self._complexity(context),
            business_model=business_model,
            time_constraints=(
                TimeConstraints.TIGHT if context.timeline == "urgent" else TimeConstraints.NORMAL
            ),
            budget_constraints=(
                BudgetConstraints.MINIMAL
                if "cost" in context.concerns
                else BudgetConstraints.NORMAL
            ),
            technical_expertise=_EXPERTISE.get(
                context.technical_background or "", TechnicalExpertise.INTERMEDIATE
            ),
            scaling_needs=self._scaling_needs(context, business_model),
        )

    def _complexity(self, context: ProjectContext) -> Complexity:
        count = len(context.specific_requirements)
        if count >= self._complex_threshold:
            return Complexity.COMPLEX
        if count >= self._moderate_threshold:
            return Complexity.MODERATE
        return Complexity.SIMPLE

    @staticmethod
    def _scaling_needs(context: ProjectContext, business_model: BusinessModel) -> ScalingNeeds:
        if "scalability" in context.concerns or context.team_size == "large":
            return ScalingNeeds.HIGH
        if business_model in (BusinessModel.SAAS, BusinessModel.MARKETPLACE):
            return ScalingNeeds.MODERATE
        return ScalingNeeds.MINIMAL
