"""Configuration management for stack_navigator.

Typed settings loaded from environment variables with optional .env file
support, using pydantic-settings.
"""

from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "AnalysisSettings",
    "LLMSettings",
    "StackNavigatorConfig",
]


class AnalysisSettings(BaseSettings):
    """Project analysis and summary settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACK_NAVIGATOR_ANALYSIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Distinct requirement tags needed to promote complexity
    moderate_threshold: int = Field(default=2, ge=1)
    complex_threshold: int = Field(default=4, ge=2)
    summary_separator: str = "; "

    @model_validator(mode="after")
    def _check_thresholds(self) -> Self:
        if self.complex_threshold <= self.moderate_threshold:
            raise ValueError("complex_threshold must be greater than moderate_threshold")
        return self


class LLMSettings(BaseSettings):
    """Recommendation engine (LLM provider) settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACK_NAVIGATOR_LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: Literal["openai", "anthropic"] = "openai"
    api_key: SecretStr | None = None
    model: str | None = None  # provider default when unset
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    explanation_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = 2048


class StackNavigatorConfig(BaseSettings):
    """Main configuration aggregating all settings.

    Example usage:
        config = StackNavigatorConfig()
        threshold = config.analysis.complex_threshold
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
