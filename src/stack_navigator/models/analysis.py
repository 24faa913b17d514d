"""Project analysis models for stack_navigator.

A ProjectAnalysis is a pure view over a ProjectContext: it has no
identity of its own and is recomputed whenever it is needed.
"""

from enum import StrEnum

from pydantic import BaseModel

__all__ = [
    "BudgetConstraints",
    "BusinessModel",
    "Complexity",
    "ProjectAnalysis",
    "ScalingNeeds",
    "TechnicalExpertise",
    "TimeConstraints",
]


class Complexity(StrEnum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class BusinessModel(StrEnum):
    SAAS = "saas"
    MARKETPLACE = "marketplace"
    OTHER = "other"


class TimeConstraints(StrEnum):
    TIGHT = "tight"
    NORMAL = "normal"


class BudgetConstraints(StrEnum):
    MINIMAL = "minimal"
    NORMAL = "normal"


class TechnicalExpertise(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ScalingNeeds(StrEnum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    HIGH = "high"


class ProjectAnalysis(BaseModel, frozen=True):
    """Coarse classification of a project.

    Attributes:
        complexity: Derived from the number of distinct requirements
        business_model: Mirrors the project type for saas and marketplace
        time_constraints: Tight when the timeline is urgent
        budget_constraints: Minimal when cost is a stated concern
        technical_expertise: Derived from the technical background
        scaling_needs: Derived from concerns, team size and business model
    """

    complexity: Complexity = Complexity.SIMPLE
    business_model: BusinessModel = BusinessModel.OTHER
    time_constraints: TimeConstraints = TimeConstraints.NORMAL
    budget_constraints: BudgetConstraints = BudgetConstraints.NORMAL
    technical_expertise: TechnicalExpertise = TechnicalExpertise.INTERMEDIATE
    scaling_needs: ScalingNeeds = ScalingNeeds.MINIMAL
