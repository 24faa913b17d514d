"""Service layer for stack_navigator.

This module exports the main service entry points.
"""

from stack_navigator.services.context_extractor import ContextExtractor
from stack_navigator.services.fallback import default_explanation, default_recommendations
from stack_navigator.services.keyword_rules import KEYWORD_RULES, KeywordRule
from stack_navigator.services.project_analyzer import ProjectAnalyzer
from stack_navigator.services.readiness import is_ready_for_recommendations
from stack_navigator.services.summary import DEFAULT_SEPARATOR, build_summary

__all__ = [
    "DEFAULT_SEPARATOR",
    "KEYWORD_RULES",
    "ContextExtractor",
    "KeywordRule",
    "ProjectAnalyzer",
    "build_summary",
    "default_explanation",
    "default_recommendations",
    "is_ready_for_recommendations",
]
