#!/usr/bin/env python
"""Interactive interview script for stack_navigator.

Reads user turns from the terminal, shows the extracted context after
each turn, and asks the configured LLM for a stack once the readiness
gate opens.

Usage:
    python scripts/interview.py [history.json]

Environment variables (via .env):
    STACK_NAVIGATOR_LLM_PROVIDER=openai
    STACK_NAVIGATOR_LLM_API_KEY=your_api_key
    STACK_NAVIGATOR_LLM_MODEL=gpt-4o
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stack_navigator.config import StackNavigatorConfig
from stack_navigator.infra.llm.anthropic_provider import AnthropicProvider
from stack_navigator.infra.llm.openai_provider import OpenAIProvider
from stack_navigator.logging import configure_logging, get_logger
from stack_navigator.models.message import ChatMessage, ChatRole
from stack_navigator.orchestrator import StackNavigator

configure_logging(level=logging.WARNING)
logger = get_logger(__name__)

PROVIDERS = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


async def main() -> None:
    config = StackNavigatorConfig()
    engine_class = PROVIDERS[config.llm.provider]

    async with StackNavigator(engine_class=engine_class, config=config) as navigator:
        if len(sys.argv) > 1:
            session = navigator.session_from_history(Path(sys.argv[1]))
        else:
            session = navigator.new_session()

        print("Describe your project (empty line to quit).")
        while not session.should_generate_recommendations():
            line = input("> ").strip()
            if not line:
                return
            session.add_message(ChatMessage.create(ChatRole.USER, line))
            print(f"  [{session.phase}] {session.get_conversation_summary() or '(nothing yet)'}")

        result = await navigator.recommend(session)
        print("\nProject analysis:")
        print(result.analysis.model_dump_json(indent=2))
        print("\nRecommended stack:")
        print(result.recommendations.model_dump_json(indent=2, by_alias=True))


if __name__ == "__main__":
    asyncio.run(main())
