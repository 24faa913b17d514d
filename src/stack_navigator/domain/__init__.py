"""Internal domain entities for stack_navigator."""

from stack_navigator.domain.context import ContextField, FieldKind, ProjectContext

__all__ = [
    "ContextField",
    "FieldKind",
    "ProjectContext",
]
