"""Internal ProjectContext entity for stack_navigator.

This module contains the mutable project context accumulated over a
conversation, plus the field vocabulary the keyword rules write into.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from stack_navigator.models.context import ProjectContextDTO

__all__ = [
    "ContextField",
    "FieldKind",
    "ProjectContext",
]


class FieldKind(StrEnum):
    """How a context field accepts new values."""

    SCALAR = "scalar"  # assigned once, first match wins
    SET = "set"  # accumulates deduplicated tags


class ContextField(StrEnum):
    """Fields of a ProjectContext that extraction can write."""

    PROJECT_TYPE = "project_type"
    TEAM_SIZE = "team_size"
    TIMELINE = "timeline"
    TECHNICAL_BACKGROUND = "technical_background"
    SPECIFIC_REQUIREMENTS = "specific_requirements"
    CONCERNS = "concerns"

    @property
    def kind(self) -> FieldKind:
        if self in (ContextField.SPECIFIC_REQUIREMENTS, ContextField.CONCERNS):
            return FieldKind.SET
        return FieldKind.SCALAR


@dataclass
class ProjectContext:
    """Accumulated understanding of the project under discussion.

    Scalar fields are assigned at most once. Tag fields behave as sets
    that only grow; they keep first-seen order so rendered summaries are
    stable, but equality ignores that order. Tags passed to the
    constructor are deduplicated. One instance belongs to exactly one
    conversation.
    """

    project_type: str | None = None
    team_size: str | None = None
    timeline: str | None = None
    technical_background: str | None = None
    specific_requirements: list[str] = field(default_factory=list)
    concerns: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        requirements, concerns = self.specific_requirements, self.concerns
        self.specific_requirements = []
        self.concerns = []
        for tag in requirements:
            self.add_tag(ContextField.SPECIFIC_REQUIREMENTS, tag)
        for tag in concerns:
            self.add_tag(ContextField.CONCERNS, tag)

    def __eq__(self, other: object) -> bool:
        # Tag order is presentation only
        if not isinstance(other, ProjectContext):
            return NotImplemented
        return self.to_dto() == other.to_dto()

    def assign(self, field_name: ContextField | str, value: str) -> bool:
        """Set a scalar field unless it already holds a value.

        Args:
            field_name: Scalar field to set
            value: Value to assign

        Returns:
            True if the field was set, False if it was already set

        Raises:
            ValueError: If the field is unknown or not a scalar field
        """
        context_field = ContextField(field_name)
        if context_field.kind is not FieldKind.SCALAR:
            raise ValueError(f"{context_field} is not a scalar field")
        if getattr(self, context_field.value):
            return False
        setattr(self, context_field.value, value)
        return True

    def add_tag(self, field_name: ContextField | str, tag: str) -> bool:
        """Add a tag to a set field if not already present.

        Args:
            field_name: Tag field to extend
            tag: Normalized tag

        Returns:
            True if the tag was added, False if it was already present

        Raises:
            ValueError: If the field is unknown or not a tag field
        """
        context_field = ContextField(field_name)
        if context_field.kind is not FieldKind.SET:
            raise ValueError(f"{context_field} is not a tag field")
        tags: list[str] = getattr(self, context_field.value)
        if not tag or tag in tags:
            return False
        tags.append(tag)
        return True

    @property
    def is_empty(self) -> bool:
        """Check if nothing has been inferred yet."""
        return not any(
            (
                self.project_type,
                self.team_size,
                self.timeline,
                self.technical_background,
                self.specific_requirements,
                self.concerns,
            )
        )

    def copy(self) -> "ProjectContext":
        """Return an independent copy (tag lists are not shared)."""
        return ProjectContext.from_dto(self.to_dto())

    def to_dto(self) -> ProjectContextDTO:
        """Convert to immutable DTO."""
        return ProjectContextDTO(
            project_type=self.project_type,
            team_size=self.team_size,
            timeline=self.timeline,
            technical_background=self.technical_background,
            specific_requirements=list(self.specific_requirements),
            concerns=list(self.concerns),
        )

    @classmethod
    def from_dto(cls, dto: ProjectContextDTO) -> "ProjectContext":
        """Create from DTO."""
        return cls(
            project_type=dto.project_type,
            team_size=dto.team_size,
            timeline=dto.timeline,
            technical_background=dto.technical_background,
            specific_requirements=list(dto.specific_requirements),
            concerns=list(dto.concerns),
        )
