"""Prompt builders shared by the LLM recommendation providers."""

import json

from stack_navigator.models.analysis import ProjectAnalysis
from stack_navigator.models.context import ProjectContextDTO

__all__ = [
    "RECOMMENDATION_SYSTEM_PROMPT",
    "build_explanation_prompt",
    "build_recommendation_prompt",
]

RECOMMENDATION_SYSTEM_PROMPT = """You are a senior SaaS architect generating technology stack \
recommendations based on a conversation with a user.

Respond with JSON only, using exactly this shape:
{"framework": "nextjs|remix|sveltekit",
 "authentication": "clerk|supabase-auth|nextauth|none",
 "database": "supabase|planetscale|neon|none",
 "hosting": "vercel|netlify|railway|render",
 "payments": "stripe|paddle|none",
 "analytics": "posthog|plausible|ga4|none",
 "email": "resend|postmark|sendgrid|none",
 "monitoring": "sentry|bugsnag|none",
 "reasoning": {"category": "why"},
 "alternatives": {"category": ["option"]},
 "migrationPaths": {"service": "how to migrate away"},
 "estimatedCosts": {"monthly": "range", "breakdown": {"service": "cost"}}}"""

_TECHNOLOGY_OPTIONS = """TECHNOLOGY OPTIONS:
- Framework: Next.js (best for React devs, great ecosystem), Remix (modern, web standards), \
SvelteKit (simple, fast)
- Auth: Clerk (best B2B/orgs), Supabase Auth (simple, integrated), NextAuth (flexible, \
self-hosted), None (custom)
- Database: Supabase (PostgreSQL + real-time), PlanetScale (MySQL, serverless), Neon \
(PostgreSQL, serverless), None (static)
- Hosting: Vercel (Next.js optimized), Netlify (JAMstack), Railway (full-stack), Render \
(simple deployment)
- Payments: Stripe (most features), Paddle (EU-friendly), None (no monetization yet)
- Analytics: PostHog (product analytics), Plausible (privacy-focused), GA4 (free, \
comprehensive), None
- Email: Resend (best DX), Postmark (reliable), SendGrid (enterprise), None
- Monitoring: Sentry (error tracking), Bugsnag (alternative), None"""


def _context_json(context: ProjectContextDTO) -> str:
    return json.dumps(context.model_dump(by_alias=True, exclude_none=True), indent=2)


def build_recommendation_prompt(
    summary: str,
    analysis: ProjectAnalysis,
    context: ProjectContextDTO,
) -> str:
    """Build the user prompt for a stack recommendation.

    Args:
        summary: Conversation summary string
        analysis: Current project analysis
        context: Snapshot of the project context

    Returns:
        Prompt text
    """
    return f"""CONVERSATION SUMMARY:
{summary}

PROJECT ANALYSIS:
- Complexity: {analysis.complexity}
- Scaling needs: {analysis.scaling_needs}
- Time constraints: {analysis.time_constraints}
- Budget constraints: {analysis.budget_constraints}
- Technical expertise: {analysis.technical_expertise}
- Business model: {analysis.business_model}

CONTEXT:
{_context_json(context)}

Based on this information, generate a complete technology stack recommendation. Consider:

1. Time-to-market vs perfect architecture: for tight timelines, prioritize services that \
reduce development time
2. Vendor lock-in concerns: if mentioned, suggest alternatives with migration paths
3. Budget constraints: for minimal budgets, prioritize free tiers and open-source options
4. Technical expertise: match complexity to the user's skill level
5. Scaling requirements: choose technologies that match expected growth

{_TECHNOLOGY_OPTIONS}

For each choice provide clear reasoning based on the user's context, alternatives, \
migration paths where lock-in matters, and realistic cost estimates for their scale.
Be practical and honest about trade-offs."""


def build_explanation_prompt(technology: str, choice: str, context: ProjectContextDTO) -> str:
    """Build the prompt explaining one recommended choice."""
    return f"""Explain why {choice} is recommended for {technology} given this context:

{_context_json(context)}

Provide a brief, practical explanation focusing on:
1. Why this choice fits their specific needs
2. Key benefits for their use case
3. Any trade-offs they should be aware of
4. Migration path if they outgrow it

Keep it conversational and honest, like advice from an experienced developer.
Respond with JSON only: {{"explanation": "..."}}"""
