"""Anthropic recommendation provider for stack_navigator.

This module provides the Anthropic implementation of the recommendation
engine interface. Claude has no JSON response mode, so replies are parsed
leniently (markdown code fences are stripped).
"""

import json
from typing import Any, Self

from anthropic import AsyncAnthropic

from stack_navigator.config import LLMSettings
from stack_navigator.infra.llm.prompts import (
    RECOMMENDATION_SYSTEM_PROMPT,
    build_explanation_prompt,
    build_recommendation_prompt,
)
from stack_navigator.interfaces.recommendation import RecommendationEngineInterface
from stack_navigator.logging import get_logger
from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.context import ProjectContextDTO
from stack_navigator.models.recommendation import TechStackRecommendations
from stack_navigator.services.fallback import default_explanation, default_recommendations

__all__ = [
    "AnthropicProvider",
]

logger = get_logger(__name__)


class AnthropicProvider(RecommendationEngineInterface):
    """Anthropic implementation of the recommendation engine interface."""

    config_class = LLMSettings
    default_model = "claude-sonnet-4-20250514"

    def __init__(self, settings: LLMSettings, client: AsyncAnthropic | None = None) -> None:
        """Initialize Anthropic provider.

        Args:
            settings: LLM configuration settings
            client: Preconfigured client (created from settings if None)
        """
        self._settings = settings
        if client is None:
            api_key = settings.api_key.get_secret_value() if settings.api_key else None
            client = AsyncAnthropic(api_key=api_key)
        self._client = client
        self._model = settings.model or self.default_model

    @classmethod
    async def from_config(cls, config: LLMSettings) -> Self:
        """Factory method for StackNavigator instantiation.

        Args:
            config: LLM settings

        Returns:
            AnthropicProvider instance
        """
        return cls(config)

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with LLM settings

        Returns:
            AnthropicProvider instance
        """
        settings = LLMSettings(**config)
        return cls(settings)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()

    async def generate_recommendations(
        self,
        summary: str,
        analysis: ProjectAnalysis,
        context: ProjectContextDTO,
    ) -> TechStackRecommendations:
        """Generate a stack recommendation, falling back to defaults on failure."""
        prompt = build_recommendation_prompt(summary, analysis, context)

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._settings.max_tokens,
                system=RECOMMENDATION_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._settings.temperature,
            )
            content = response.content[0].text if response.content else "{}"
            result = self._parse_json_response(content)
            recommendations = TechStackRecommendations.model_validate(result)
        except Exception as e:
            logger.warning("recommendation_failed", provider="anthropic", error=str(e))
            return default_recommendations(analysis)

        logger.info(
            "recommendation_generated",
            provider="anthropic",
            model=self._model,
            framework=recommendations.framework,
        )
        return recommendations

    async def explain_recommendation(
        self,
        technology: str,
        choice: str,
        context: ProjectContextDTO,
    ) -> str:
        """Explain one recommended choice."""
        prompt = build_explanation_prompt(technology, choice, context)

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=512,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._settings.explanation_temperature,
            )
            content = response.content[0].text if response.content else "{}"
            explanation = self._parse_json_response(content).get("explanation")
        except Exception as e:
            logger.warning("explanation_failed", provider="anthropic", error=str(e))
            return default_explanation(technology, choice)

        return explanation or default_explanation(technology, choice)

    @staticmethod
    def _parse_json_response(content: str) -> dict:
        """Parse JSON from response, handling markdown code blocks."""
        content = content.strip()
        if content.startswith("```"):
            lines = content.split("\n")
            # Drop the opening fence line and a closing fence if present
            content = "\n".join(lines[1:-1] if lines[-1].strip() == "```" else lines[1:])
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            return {}
