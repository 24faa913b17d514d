"""Interface contracts for stack_navigator.

This module exports all Protocol-based interfaces for dependency injection.
"""

from stack_navigator.interfaces.recommendation import RecommendationEngineInterface

__all__ = [
    "RecommendationEngineInterface",
]
