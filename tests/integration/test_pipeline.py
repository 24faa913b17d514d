"""Integration tests for the stack_navigator interview pipeline."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from stack_navigator.config import AnalysisSettings, LLMSettings, StackNavigatorConfig
from stack_navigator.conversation import ConversationPhase
from stack_navigator.infra.llm.openai_provider import OpenAIProvider
from stack_navigator.models.analysis import (
    BudgetConstraints,
    BusinessModel,
    Complexity,
    TimeConstraints,
)
from stack_navigator.orchestrator import StackNavigator
from tests.conftest import assistant_message, user_message

INTERVIEW = [
    user_message("Hi! I have an idea.", "1"),
    assistant_message("Tell me about it. Is it a SaaS, a marketplace, an online store?", "2"),
    user_message("A marketplace connecting tutors and students", "3"),
    assistant_message("Who is building it? Do you need payments or real-time chat?", "4"),
    user_message("Just me. It needs login, payments, live video and analytics.", "5"),
    assistant_message("Any constraints? Cost, vendor lock-in, timeline?", "6"),
    user_message("I need to launch fast and I'm worried about vendor lock-in.", "7"),
]


class TestInterviewPipeline:
    """End-to-end flow from chat turns to a recommendation."""

    @pytest.mark.asyncio
    async def test_full_interview(self) -> None:
        config = StackNavigatorConfig(
            analysis=AnalysisSettings(),
            llm=LLMSettings(api_key="sk-test"),
        )
        client = MagicMock()
        client.chat.completions.create = AsyncMock(
            return_value=SimpleNamespace(
                choices=[SimpleNamespace(message=SimpleNamespace(content="not json"))]
            )
        )
        client.close = AsyncMock()

        async with StackNavigator(engine_class=OpenAIProvider, config=config) as navigator:
            await navigator._engine.close()
            navigator._engine = OpenAIProvider(config.llm, client=client)
            session = navigator.new_session()

            phases = []
            for message in INTERVIEW:
                session.add_message(message)
                phases.append(session.phase)

            result = await navigator.recommend(session)

        assert phases[:3] == [ConversationPhase.DISCOVERY] * 3
        assert phases[4] == ConversationPhase.RECOMMENDATION
        assert session.phase == ConversationPhase.REFINEMENT

        assert result.summary == (
            "Project type: marketplace; Team size: solo; Timeline: urgent; "
            "Requirements: authentication, payments, realtime, analytics; "
            "Concerns: vendor-lock-in"
        )
        assert result.analysis.complexity == Complexity.COMPLEX
        assert result.analysis.business_model == BusinessModel.MARKETPLACE
        assert result.analysis.time_constraints == TimeConstraints.TIGHT
        assert result.analysis.budget_constraints == BudgetConstraints.NORMAL

        # Unparseable engine output falls back to the default stack
        assert result.recommendations.payments == "none"
        prompt = client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert result.summary in prompt
        assert json.loads(result.context.model_dump_json(by_alias=True))["projectType"] == (
            "marketplace"
        )
