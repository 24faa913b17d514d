"""Technology-stack recommendation models for stack_navigator.

These models validate what a recommendation engine returns. LLM output
uses camelCase keys (``migrationPaths``), so both spellings are accepted.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.context import ProjectContextDTO

__all__ = [
    "EstimatedCosts",
    "RecommendationResult",
    "TechStackRecommendations",
]

Framework = Literal["nextjs", "remix", "sveltekit"]
Authentication = Literal["clerk", "supabase-auth", "nextauth", "none"]
Database = Literal["supabase", "planetscale", "neon", "none"]
Hosting = Literal["vercel", "netlify", "railway", "render"]
Payments = Literal["stripe", "paddle", "none"]
Analytics = Literal["posthog", "plausible", "ga4", "none"]
Email = Literal["resend", "postmark", "sendgrid", "none"]
Monitoring = Literal["sentry", "bugsnag", "none"]


class EstimatedCosts(BaseModel, frozen=True):
    """Monthly cost estimate with a per-service breakdown."""

    monthly: str
    breakdown: dict[str, str] = Field(default_factory=dict)


class TechStackRecommendations(BaseModel):
    """A complete technology-stack recommendation.

    Attributes:
        framework: Web framework choice
        authentication: Auth provider choice
        database: Database choice
        hosting: Hosting platform choice
        payments: Payment processor choice
        analytics: Analytics choice
        email: Transactional email choice
        monitoring: Error monitoring choice
        reasoning: Why each choice was made, keyed by category
        alternatives: Other options per category
        migration_paths: How to move off a service later, keyed by service
        estimated_costs: Cost estimate for the recommended stack
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    framework: Framework
    authentication: Authentication
    database: Database
    hosting: Hosting
    payments: Payments
    analytics: Analytics
    email: Email
    monitoring: Monitoring
    reasoning: dict[str, str] = Field(default_factory=dict)
    alternatives: dict[str, list[str]] = Field(default_factory=dict)
    migration_paths: dict[str, str] = Field(default_factory=dict)
    estimated_costs: EstimatedCosts


class RecommendationResult(BaseModel, frozen=True):
    """Everything produced for one recommendation request."""

    recommendations: TechStackRecommendations
    analysis: ProjectAnalysis
    summary: str
    context: ProjectContextDTO
