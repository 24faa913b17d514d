"""Shared test fixtures for stack_navigator.

This module provides pytest fixtures used across all tests.
"""

from datetime import UTC, datetime

import pytest

from stack_navigator.config import AnalysisSettings
from stack_navigator.conversation import ConversationSession
from stack_navigator.domain.context import ProjectContext
from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.message import ChatMessage, ChatRole
from stack_navigator.services.context_extractor import ContextExtractor
from stack_navigator.services.project_analyzer import ProjectAnalyzer


def user_message(content: str, message_id: str = "u1") -> ChatMessage:
    """Build a user turn with a fixed timestamp."""
    return ChatMessage(
        id=message_id,
        role=ChatRole.USER,
        content=content,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
    )


def assistant_message(content: str, message_id: str = "a1") -> ChatMessage:
    """Build an assistant turn with a fixed timestamp."""
    return ChatMessage(
        id=message_id,
        role=ChatRole.ASSISTANT,
        content=content,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def analysis_settings() -> AnalysisSettings:
    """Default analysis settings, independent of the environment."""
    return AnalysisSettings(moderate_threshold=2, complex_threshold=4, summary_separator="; ")


@pytest.fixture
def extractor() -> ContextExtractor:
    return ContextExtractor()


@pytest.fixture
def analyzer() -> ProjectAnalyzer:
    return ProjectAnalyzer()


@pytest.fixture
def context() -> ProjectContext:
    return ProjectContext()


@pytest.fixture
def session(analysis_settings: AnalysisSettings) -> ConversationSession:
    return ConversationSession(settings=analysis_settings)


@pytest.fixture
def sample_history() -> list[ChatMessage]:
    """A short interview that opens the readiness gate on the third turn."""
    return [
        user_message("Hi, I have an idea for a project", "1"),
        assistant_message("Great! What kind of product is it? A SaaS, a store, a blog?", "2"),
        user_message("It's a SaaS for scheduling, and I'm a solo founder", "3"),
        assistant_message("Do you need payments or real-time features?", "4"),
        user_message("Yes, subscription billing and login. I'm worried about costs.", "5"),
    ]


@pytest.fixture
def sample_analysis() -> ProjectAnalysis:
    return ProjectAnalysis()
