"""Project context snapshot model for stack_navigator."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "ProjectContextDTO",
]


class ProjectContextDTO(BaseModel):
    """Immutable snapshot of a conversation's project context.

    Serialises with camelCase keys (``projectType``, ``specificRequirements``)
    when dumped with ``by_alias=True``, which is the shape handed to the
    recommendation prompt.

    Attributes:
        project_type: Project category (e.g. "saas"), None until inferred
        team_size: Team size bucket (e.g. "solo")
        timeline: Timeline bucket (e.g. "urgent")
        technical_background: Experience bucket (e.g. "beginner")
        specific_requirements: Requirement tags in first-seen order
        concerns: Concern tags in first-seen order

    Equality treats the tag lists as sets.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    project_type: str | None = None
    team_size: str | None = None
    timeline: str | None = None
    technical_background: str | None = None
    specific_requirements: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectContextDTO):
            return NotImplemented
        return (
            self.project_type == other.project_type
            and self.team_size == other.team_size
            and self.timeline == other.timeline
            and self.technical_background == other.technical_background
            and set(self.specific_requirements) == set(other.specific_requirements)
            and set(self.concerns) == set(other.concerns)
        )
