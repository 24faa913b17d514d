"""OpenAI recommendation provider for stack_navigator.

This module provides the OpenAI implementation of the recommendation
engine interface.
"""

import json
from typing import Any, Self

from openai import AsyncOpenAI

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
    "OpenAIProvider",
]

logger = get_logger(__name__)


class OpenAIProvider(RecommendationEngineInterface):
    """OpenAI implementation of the recommendation engine interface.

    Uses JSON-mode chat completions and validates the result against
    TechStackRecommendations.
    """

    config_class = LLMSettings
    default_model = "gpt-4o"

    def __init__(self, settings: LLMSettings, client: AsyncOpenAI | None = None) -> None:
        """Initialize OpenAI provider.

        Args:
            settings: LLM configuration settings
            client: Preconfigured client (created from settings if None)
        """
        self._settings = settings
        if client is None:
            api_key = settings.api_key.get_secret_value() if settings.api_key else None
            client = AsyncOpenAI(api_key=api_key)
        self._client = client
        self._model = settings.model or self.default_model

    @classmethod
    async def from_config(cls, config: LLMSettings) -> Self:
        """Factory method for StackNavigator instantiation.

        Args:
            config: LLM settings

        Returns:
            OpenAIProvider instance
        """
        return cls(config)

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with LLM settings

        Returns:
            OpenAIProvider instance
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
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": RECOMMENDATION_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
            )
            content = response.choices[0].message.content or "{}"
            recommendations = TechStackRecommendations.model_validate_json(content)
        except Exception as e:
            logger.warning("recommendation_failed", provider="openai", error=str(e))
            return default_recommendations(analysis)

        logger.info(
            "recommendation_generated",
            provider="openai",
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
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
                temperature=self._settings.explanation_temperature,
                max_tokens=512,
            )
            content = response.choices[0].message.content or "{}"
            explanation = json.loads(content).get("explanation")
        except Exception as e:
            logger.warning("explanation_failed", provider="openai", error=str(e))
            return default_explanation(technology, choice)

        return explanation or default_explanation(technology, choice)
