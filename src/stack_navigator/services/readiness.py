"""Readiness gate for stack recommendations."""

from stack_navigator.domain.context import ProjectContext

__all__ = [
    "is_ready_for_recommendations",
]


def is_ready_for_recommendations(context: ProjectContext) -> bool:
    """Check whether the context carries enough signal to recommend a stack.

    The bar is deliberately low: a known project type plus any one of
    team size, timeline or a stated requirement.

    Args:
        context: Accumulated project context

    Returns:
        True if a recommendation should be requested
    """
    if not context.project_type:
        return False
    return bool(context.team_size or context.timeline or context.specific_requirements)
