"""Rule-based default recommendation.

Used when a recommendation engine cannot produce a valid answer.
"""

from stack_navigator.models.analysis import (
    BudgetConstraints,
    Complexity,
    ProjectAnalysis,
    TechnicalExpertise,
    TimeConstraints,
)
from stack_navigator.models.recommendation import EstimatedCosts, TechStackRecommendations

__all__ = [
    "default_explanation",
    "default_recommendations",
]


def default_recommendations(analysis: ProjectAnalysis) -> TechStackRecommendations:
    """Build a safe default stack tuned by the project analysis.

    Args:
        analysis: Current project analysis

    Returns:
        Default TechStackRecommendations
    """
    is_simple = analysis.complexity == Complexity.SIMPLE
    is_tight_timeline = analysis.time_constraints == TimeConstraints.TIGHT
    is_minimal_budget = analysis.budget_constraints == BudgetConstraints.MINIMAL
    is_beginner = analysis.technical_expertise == TechnicalExpertise.BEGINNER
    use_clerk = is_beginner or is_simple

    return TechStackRecommendations(
        framework="nextjs",
        authentication="clerk" if use_clerk else "nextauth",
        database="supabase",
        hosting="vercel",
        payments="none" if is_tight_timeline else "stripe",
        analytics="plausible" if is_minimal_budget else "posthog",
        email="resend",
        monitoring="none" if is_minimal_budget else "sentry",
        reasoning={
            "framework": "Next.js chosen for its excellent developer experience and ecosystem",
            "authentication": (
                "Clerk for easy setup and B2B features"
                if use_clerk
                else "NextAuth for flexibility"
            ),
            "database": "Supabase for PostgreSQL with real-time features",
            "hosting": "Vercel for seamless Next.js deployment",
            "payments": (
                "Payments deferred for faster launch"
                if is_tight_timeline
                else "Stripe for comprehensive payment processing"
            ),
            "analytics": (
                "Plausible for privacy-focused analytics"
                if is_minimal_budget
                else "PostHog for product analytics"
            ),
            "email": "Resend for excellent developer experience",
            "monitoring": (
                "Basic logging for now" if is_minimal_budget else "Sentry for error tracking"
            ),
        },
        alternatives={
            "framework": ["remix", "sveltekit"],
            "authentication": ["supabase-auth", "nextauth"],
            "database": ["planetscale", "neon"],
            "hosting": ["netlify", "railway"],
            "payments": ["paddle"],
            "analytics": ["ga4", "plausible"],
            "email": ["postmark", "sendgrid"],
            "monitoring": ["bugsnag"],
        },
        migration_paths={
            "clerk": "Can migrate to Auth0 or custom solution when you have 50k+ users",
            "supabase": "Can migrate to self-hosted PostgreSQL when needed",
            "vercel": "Can deploy anywhere that supports Node.js",
            "stripe": "Payment processors are generally interchangeable",
        },
        estimated_costs=EstimatedCosts(
            monthly="$0-25 for first 1000 users",
            breakdown={
                "Vercel": "$0 (hobby plan)",
                "Supabase": "$0-25 (free tier then $25/month)",
                "Clerk": "$0-25 (free tier then $25/month)",
                "Stripe": "2.9% + 30¢ per transaction",
                "Other services": "$0-10/month",
            },
        ),
    )


def default_explanation(technology: str, choice: str) -> str:
    """Canned explanation used when the engine cannot explain a choice."""
    return (
        f"{choice} is a solid choice for {technology} that balances ease of use "
        "with functionality."
    )
