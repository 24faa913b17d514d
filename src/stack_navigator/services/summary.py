"""Conversation summary rendering.

The summary string is passed verbatim into the recommendation prompt,
so its labels and field order are part of the prompt contract.
"""

from stack_navigator.domain.context import ProjectContext

__all__ = [
    "DEFAULT_SEPARATOR",
    "build_summary",
]

DEFAULT_SEPARATOR = "; "


def build_summary(context: ProjectContext, separator: str = DEFAULT_SEPARATOR) -> str:
    """Render set fields as ``Label: value`` parts in fixed order.

    Unset scalars and empty tag fields are omitted. An empty context
    renders as the empty string.

    Args:
        context: Accumulated project context
        separator: String placed between parts

    Returns:
        Summary string
    """
    parts: list[str] = []

    if context.project_type:
        parts.append(f"Project type: {context.project_type}")
    if context.team_size:
        parts.append(f"Team size: {context.team_size}")
    if context.timeline:
        parts.append(f"Timeline: {context.timeline}")
    if context.technical_background:
        parts.append(f"Technical background: {context.technical_background}")
    if context.specific_requirements:
        parts.append(f"Requirements: {', '.join(context.specific_requirements)}")
    if context.concerns:
        parts.append(f"Concerns: {', '.join(context.concerns)}")

    return separator.join(parts)
