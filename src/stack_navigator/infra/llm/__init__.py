"""LLM recommendation providers for stack_navigator."""

from stack_navigator.infra.llm.anthropic_provider import AnthropicProvider
from stack_navigator.infra.llm.openai_provider import OpenAIProvider

__all__ = ["AnthropicProvider", "OpenAIProvider"]
