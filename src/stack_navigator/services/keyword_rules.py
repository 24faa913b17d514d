"""Keyword rule table for context extraction.

Rules are evaluated top to bottom. For scalar fields the first matching
rule wins, so order within a field is significant. The keyword lists are
product tuning; change them here and nowhere else.
"""

from dataclasses import dataclass

from stack_navigator.domain.context import ContextField, FieldKind

__all__ = [
    "KEYWORD_RULES",
    "KeywordRule",
]


@dataclass(frozen=True)
class KeywordRule:
    """Maps any of a set of phrases to a value for one context field.

    Attributes:
        field: Context field the rule writes
        value: Value (scalar) or tag (set field) to write
        keywords: Lowercase phrases matched as substrings
    """

    field: ContextField
    value: str
    keywords: tuple[str, ...]

    @property
    def kind(self) -> FieldKind:
        return self.field.kind

    def matches(self, lowered_text: str) -> bool:
        """Check the rule against already-lowercased text."""
        return any(keyword in lowered_text for keyword in self.keywords)


_F = ContextField

KEYWORD_RULES: tuple[KeywordRule, ...] = (
    # Project type
    KeywordRule(_F.PROJECT_TYPE, "saas", ("saas", "software as a service")),
    KeywordRule(_F.PROJECT_TYPE, "ecommerce", ("e-commerce", "ecommerce", "store")),
    KeywordRule(_F.PROJECT_TYPE, "marketplace", ("marketplace",)),
    KeywordRule(_F.PROJECT_TYPE, "content", ("blog", "content")),
    # Team size
    KeywordRule(_F.TEAM_SIZE, "solo", ("solo", "alone", "just me")),
    KeywordRule(_F.TEAM_SIZE, "small", ("small team", "2-5")),
    KeywordRule(_F.TEAM_SIZE, "large", ("large team", "10+")),
    KeywordRule(_F.TEAM_SIZE, "team", ("our team", "my team")),
    # Timeline
    KeywordRule(_F.TIMELINE, "urgent", ("asap", "quickly", "fast", "urgent")),
    KeywordRule(_F.TIMELINE, "moderate", ("few months", "moderate")),
    KeywordRule(_F.TIMELINE, "flexible", ("no rush", "flexible")),
    # Technical background
    KeywordRule(_F.TECHNICAL_BACKGROUND, "beginner", ("beginner", "new to", "learning")),
    KeywordRule(_F.TECHNICAL_BACKGROUND, "advanced", ("experienced", "senior", "years of")),
    # Requirements
    KeywordRule(
        _F.SPECIFIC_REQUIREMENTS,
        "authentication",
        ("authentication", "auth", "login", "user accounts"),
    ),
    KeywordRule(_F.SPECIFIC_REQUIREMENTS, "payments", ("payment", "subscription", "billing")),
    KeywordRule(
        _F.SPECIFIC_REQUIREMENTS,
        "realtime",
        ("real-time", "realtime", "live", "websocket"),
    ),
    KeywordRule(_F.SPECIFIC_REQUIREMENTS, "analytics", ("analytics", "tracking", "metrics")),
    # Concerns
    KeywordRule(_F.CONCERNS, "vendor-lock-in", ("vendor lock-in", "lock in", "locked in")),
    KeywordRule(_F.CONCERNS, "cost", ("cost", "expensive", "budget")),
    KeywordRule(_F.CONCERNS, "complexity", ("complex", "complicated", "difficult")),
    KeywordRule(_F.CONCERNS, "scalability", ("scale", "scaling", "growth")),
)
