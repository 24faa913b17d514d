"""Public DTO models for stack_navigator.

This module exports all public data transfer objects.
"""

from stack_navigator.models.analysis import (
    BudgetConstraints,
    BusinessModel,
    Complexity,
    ProjectAnalysis,
    ScalingNeeds,
    TechnicalExpertise,
    TimeConstraints,
)
from stack_navigator.models.context import ProjectContextDTO
from stack_navigator.models.message import ChatMessage, ChatRole
from stack_navigator.models.recommendation import (
    EstimatedCosts,
    RecommendationResult,
    TechStackRecommendations,
)

__all__ = [
    "BudgetConstraints",
    "BusinessModel",
    "ChatMessage",
    "ChatRole",
    "Complexity",
    "EstimatedCosts",
    "ProjectAnalysis",
    "ProjectContextDTO",
    "RecommendationResult",
    "ScalingNeeds",
    "TechStackRecommendations",
    "TechnicalExpertise",
    "TimeConstraints",
]
