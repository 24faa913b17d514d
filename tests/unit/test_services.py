"""Unit tests for stack_navigator services."""

import pytest

from stack_navigator.domain.context import ContextField, FieldKind, ProjectContext
from stack_navigator.models.analysis import (
    BudgetConstraints,
    BusinessModel,
    Complexity,
    ProjectAnalysis,
    ScalingNeeds,
    TechnicalExpertise,
    TimeConstraints,
)
from stack_navigator.services.context_extractor import ContextExtractor
from stack_navigator.services.fallback import default_explanation, default_recommendations
from stack_navigator.services.keyword_rules import KEYWORD_RULES, KeywordRule
from stack_navigator.services.project_analyzer import ProjectAnalyzer
from stack_navigator.services.readiness import is_ready_for_recommendations
from stack_navigator.services.summary import build_summary
from tests.conftest import assistant_message, user_message

MIXED_SEQUENCES = [
    [
        "I want to build a SaaS application",
        "I am a solo founder",
        "We need authentication and billing",
        "Actually it is more of a marketplace with a large team",
    ],
    [
        "",
        "Hello",
        "I'm new to coding and want an online store, no rush",
        "Later I'd like real-time chat and analytics, but scaling worries me",
        "I need login too, and I'm experienced",
    ],
    [
        "Our blog needs user accounts",
        "Cost matters, vendor lock-in too, and it's complicated",
        "We must ship asap with our team",
    ],
]


class TestKeywordRules:
    """Tests for the static rule table."""

    def test_rules_are_lowercase(self) -> None:
        for rule in KEYWORD_RULES:
            assert all(keyword == keyword.lower() for keyword in rule.keywords)

    def test_every_field_has_rules(self) -> None:
        fields = {rule.field for rule in KEYWORD_RULES}
        assert fields == set(ContextField)

    def test_rule_kind_follows_field(self) -> None:
        rule = KeywordRule(ContextField.CONCERNS, "cost", ("cost",))
        assert rule.kind is FieldKind.SET
        assert rule.matches("the cost is high")
        assert not rule.matches("free")


class TestContextExtractor:
    """Tests for ContextExtractor."""

    def test_extract_project_type(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I want to build a SaaS application"), ProjectContext()
        )
        assert context.project_type == "saas"
        assert not is_ready_for_recommendations(context)

    def test_extract_team_size(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I am a solo founder building a SaaS application"), ProjectContext()
        )
        assert context.project_type == "saas"
        assert context.team_size == "solo"
        assert is_ready_for_recommendations(context)

    def test_extract_timeline(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I need to ship this ASAP to validate my idea"), ProjectContext()
        )
        assert context.timeline == "urgent"

    def test_extract_technical_background(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I am a beginner developer new to web development"), ProjectContext()
        )
        assert context.technical_background == "beginner"

    def test_extract_requirements(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I need user authentication, payment processing, and real-time features"),
            ProjectContext(),
        )
        assert set(context.specific_requirements) == {"authentication", "payments", "realtime"}

    def test_extract_concerns(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I am worried about vendor lock-in and high costs"), ProjectContext()
        )
        assert set(context.concerns) == {"vendor-lock-in", "cost"}

    def test_case_insensitive(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("I WANT TO BUILD A SAAS APPLICATION"), ProjectContext()
        )
        assert context.project_type == "saas"

    def test_requirements_accumulate_without_duplicates(
        self, extractor: ContextExtractor
    ) -> None:
        context = ProjectContext()
        extractor.extract(user_message("I need authentication", "1"), context)
        extractor.extract(
            user_message("I also need user authentication and payment processing", "2"),
            context,
        )
        assert set(context.specific_requirements) == {"authentication", "payments"}
        assert len(context.specific_requirements) == 2

    def test_first_rule_wins_within_message(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message("A SaaS that works like a marketplace"), ProjectContext()
        )
        assert context.project_type == "saas"

    def test_scalar_fields_never_overwritten(self, extractor: ContextExtractor) -> None:
        context = ProjectContext()
        extractor.extract(user_message("A marketplace, solo, asap, beginner", "1"), context)
        extractor.extract(
            user_message("Now a SaaS with a large team, no rush, I'm senior", "2"), context
        )
        assert context.project_type == "marketplace"
        assert context.team_size == "solo"
        assert context.timeline == "urgent"
        assert context.technical_background == "beginner"

    def test_assistant_messages_ignored(self, extractor: ContextExtractor) -> None:
        context = ProjectContext()
        before = context.to_dto()

        result = extractor.extract(
            assistant_message("I recommend building a SaaS application"), context
        )

        assert result is context
        assert context.project_type is None
        assert context.to_dto() == before

    def test_assistant_messages_leave_populated_context_unchanged(
        self, extractor: ContextExtractor
    ) -> None:
        context = extractor.extract(user_message("A blog with login"), ProjectContext())
        before = context.to_dto()

        extractor.extract(
            assistant_message("Consider payments, analytics, and cost for your saas"), context
        )

        assert context.to_dto() == before

    def test_empty_message(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(user_message(""), ProjectContext())
        assert context.specific_requirements == []
        assert context.concerns == []
        assert context.is_empty

    def test_mutates_in_place(self, extractor: ContextExtractor) -> None:
        context = ProjectContext()
        result = extractor.extract(user_message("saas"), context)
        assert result is context

    def test_custom_rule_table(self) -> None:
        extractor = ContextExtractor(
            rules=(KeywordRule(ContextField.SPECIFIC_REQUIREMENTS, "email", ("email",)),)
        )
        context = extractor.extract(user_message("email notifications"), ProjectContext())
        assert context.specific_requirements == ["email"]

    @pytest.mark.parametrize("contents", MIXED_SEQUENCES)
    def test_batching_does_not_change_result(
        self, extractor: ContextExtractor, contents: list[str]
    ) -> None:
        messages = [user_message(text, str(i)) for i, text in enumerate(contents)]

        one_at_a_time = ProjectContext()
        for message in messages:
            extractor.extract(message, one_at_a_time)

        batched = extractor.extract_all(messages)

        split = extractor.extract_all(messages[:2])
        extractor.extract_all(messages[2:], split)

        assert batched == one_at_a_time
        assert split == one_at_a_time
        # Same first-seen order, so summaries match too
        assert batched.specific_requirements == one_at_a_time.specific_requirements
        assert split.concerns == one_at_a_time.concerns

    @pytest.mark.parametrize("contents", MIXED_SEQUENCES)
    def test_tag_fields_only_grow(self, extractor: ContextExtractor, contents: list[str]) -> None:
        context = ProjectContext()
        previous_requirements: set[str] = set()
        previous_concerns: set[str] = set()

        for i, text in enumerate(contents):
            extractor.extract(user_message(text, str(i)), context)
            assert previous_requirements <= set(context.specific_requirements)
            assert previous_concerns <= set(context.concerns)
            assert len(context.specific_requirements) == len(set(context.specific_requirements))
            assert len(context.concerns) == len(set(context.concerns))
            previous_requirements = set(context.specific_requirements)
            previous_concerns = set(context.concerns)


class TestProjectAnalyzer:
    """Tests for ProjectAnalyzer."""

    def test_duplicate_constructor_tags_count_once(self, analyzer: ProjectAnalyzer) -> None:
        context = ProjectContext(specific_requirements=["payments", "payments"])
        assert analyzer.analyze(context).complexity == Complexity.SIMPLE

    def test_simple_project(
        self, extractor: ContextExtractor, analyzer: ProjectAnalyzer
    ) -> None:
        context = extractor.extract(
            user_message("I want to build a simple blog with authentication"), ProjectContext()
        )
        analysis = analyzer.analyze(context)
        assert analysis.complexity == Complexity.SIMPLE
        assert analysis.business_model == BusinessModel.OTHER

    def test_complex_project(
        self, extractor: ContextExtractor, analyzer: ProjectAnalyzer
    ) -> None:
        context = extractor.extract(
            user_message(
                "I need a SaaS with authentication, payments, real-time features, "
                "analytics, and email notifications"
            ),
            ProjectContext(),
        )
        analysis = analyzer.analyze(context)
        assert len(context.specific_requirements) >= 4
        assert analysis.complexity == Complexity.COMPLEX
        assert analysis.business_model == BusinessModel.SAAS

    @pytest.mark.parametrize(
        ("tags", "expected"),
        [
            ([], Complexity.SIMPLE),
            (["authentication"], Complexity.SIMPLE),
            (["authentication", "payments"], Complexity.MODERATE),
            (["authentication", "payments", "realtime"], Complexity.MODERATE),
            (["authentication", "payments", "realtime", "analytics"], Complexity.COMPLEX),
        ],
    )
    def test_complexity_thresholds(
        self, analyzer: ProjectAnalyzer, tags: list[str], expected: Complexity
    ) -> None:
        context = ProjectContext()
        for tag in tags:
            context.add_tag(ContextField.SPECIFIC_REQUIREMENTS, tag)
        assert analyzer.analyze(context).complexity == expected

    def test_custom_thresholds(self) -> None:
        context = ProjectContext()
        context.add_tag(ContextField.SPECIFIC_REQUIREMENTS, "payments")
        analyzer = ProjectAnalyzer(moderate_threshold=1, complex_threshold=2)
        assert analyzer.analyze(context).complexity == Complexity.MODERATE

    @pytest.mark.parametrize(("moderate", "complex_"), [(0, 4), (3, 3), (4, 2)])
    def test_invalid_thresholds(self, moderate: int, complex_: int) -> None:
        with pytest.raises(ValueError):
            ProjectAnalyzer(moderate_threshold=moderate, complex_threshold=complex_)

    def test_marketplace_business_model(self, analyzer: ProjectAnalyzer) -> None:
        analysis = analyzer.analyze(ProjectContext(project_type="marketplace"))
        assert analysis.business_model == BusinessModel.MARKETPLACE
        assert analysis.scaling_needs == ScalingNeeds.MODERATE

    def test_ecommerce_maps_to_other(self, analyzer: ProjectAnalyzer) -> None:
        analysis = analyzer.analyze(ProjectContext(project_type="ecommerce"))
        assert analysis.business_model == BusinessModel.OTHER
        assert analysis.scaling_needs == ScalingNeeds.MINIMAL

    def test_time_constraints(
        self, extractor: ContextExtractor, analyzer: ProjectAnalyzer
    ) -> None:
        context = extractor.extract(
            user_message("I need to ship this quickly and urgently"), ProjectContext()
        )
        assert analyzer.analyze(context).time_constraints == TimeConstraints.TIGHT
        assert (
            analyzer.analyze(ProjectContext(timeline="flexible")).time_constraints
            == TimeConstraints.NORMAL
        )

    def test_budget_constraints(
        self, extractor: ContextExtractor, analyzer: ProjectAnalyzer
    ) -> None:
        context = extractor.extract(
            user_message("I am concerned about costs and have a tight budget"), ProjectContext()
        )
        assert analyzer.analyze(context).budget_constraints == BudgetConstraints.MINIMAL
        assert analyzer.analyze(ProjectContext()).budget_constraints == BudgetConstraints.NORMAL

    @pytest.mark.parametrize(
        ("background", "expected"),
        [
            ("beginner", TechnicalExpertise.BEGINNER),
            ("advanced", TechnicalExpertise.ADVANCED),
            ("self-taught", TechnicalExpertise.INTERMEDIATE),
            (None, TechnicalExpertise.INTERMEDIATE),
        ],
    )
    def test_technical_expertise(
        self, analyzer: ProjectAnalyzer, background: str | None, expected: TechnicalExpertise
    ) -> None:
        context = ProjectContext(technical_background=background)
        assert analyzer.analyze(context).technical_expertise == expected

    def test_experienced_developer_is_advanced(
        self, extractor: ContextExtractor, analyzer: ProjectAnalyzer
    ) -> None:
        context = extractor.extract(
            user_message("I am an experienced developer with years of React experience"),
            ProjectContext(),
        )
        assert analyzer.analyze(context).technical_expertise == TechnicalExpertise.ADVANCED

    def test_scaling_needs_high(self, analyzer: ProjectAnalyzer) -> None:
        assert analyzer.analyze(ProjectContext(team_size="large")).scaling_needs == (
            ScalingNeeds.HIGH
        )
        context = ProjectContext()
        context.add_tag(ContextField.CONCERNS, "scalability")
        assert analyzer.analyze(context).scaling_needs == ScalingNeeds.HIGH

    def test_analysis_is_pure(self, extractor: ContextExtractor, analyzer: ProjectAnalyzer) -> None:
        context = extractor.extract(
            user_message("A SaaS with login and billing, solo, asap"), ProjectContext()
        )
        before = context.to_dto()

        first = analyzer.analyze(context)
        second = analyzer.analyze(context)

        assert first == second
        assert first is not second
        assert context.to_dto() == before

    def test_analysis_tracks_context_changes(self, analyzer: ProjectAnalyzer) -> None:
        context = ProjectContext()
        assert analyzer.analyze(context).complexity == Complexity.SIMPLE
        context.add_tag(ContextField.SPECIFIC_REQUIREMENTS, "payments")
        context.add_tag(ContextField.SPECIFIC_REQUIREMENTS, "analytics")
        assert analyzer.analyze(context).complexity == Complexity.MODERATE


class TestReadinessGate:
    """Tests for is_ready_for_recommendations."""

    def test_empty_context_not_ready(self) -> None:
        assert is_ready_for_recommendations(ProjectContext()) is False

    def test_project_type_alone_not_ready(self) -> None:
        assert is_ready_for_recommendations(ProjectContext(project_type="saas")) is False

    @pytest.mark.parametrize(
        "context",
        [
            ProjectContext(project_type="saas", team_size="solo"),
            ProjectContext(project_type="saas", timeline="urgent"),
            ProjectContext(project_type="saas", specific_requirements=["authentication"]),
        ],
    )
    def test_ready_with_project_type_and_one_signal(self, context: ProjectContext) -> None:
        assert is_ready_for_recommendations(context) is True

    def test_signals_without_project_type_not_ready(self) -> None:
        context = ProjectContext(
            team_size="solo", timeline="urgent", specific_requirements=["payments"]
        )
        assert is_ready_for_recommendations(context) is False

    def test_concerns_and_background_do_not_count(self) -> None:
        context = ProjectContext(
            project_type="saas", technical_background="beginner", concerns=["cost"]
        )
        assert is_ready_for_recommendations(context) is False

    def test_greeting_not_ready(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(user_message("Hello"), ProjectContext())
        assert is_ready_for_recommendations(context) is False


class TestBuildSummary:
    """Tests for build_summary."""

    def test_duplicate_constructor_tags_render_once(self) -> None:
        context = ProjectContext(
            project_type="saas", specific_requirements=["payments", "payments"]
        )
        assert build_summary(context) == "Project type: saas; Requirements: payments"

    def test_empty_context(self) -> None:
        assert build_summary(ProjectContext()) == ""

    def test_empty_tag_fields_omitted(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(user_message(""), ProjectContext())
        assert build_summary(context) == ""

    def test_partial_context(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(user_message("I want to build a marketplace"), ProjectContext())
        assert build_summary(context) == "Project type: marketplace"

    def test_full_context(self, extractor: ContextExtractor) -> None:
        context = extractor.extract(
            user_message(
                "I am a solo founder building a SaaS application. I need to ship quickly "
                "and need authentication and payments. I am worried about costs."
            ),
            ProjectContext(),
        )
        assert build_summary(context) == (
            "Project type: saas; Team size: solo; Timeline: urgent; "
            "Requirements: authentication, payments; Concerns: cost"
        )

    def test_field_order_and_separator(self) -> None:
        context = ProjectContext(
            project_type="content",
            team_size="small",
            timeline="flexible",
            technical_background="beginner",
            specific_requirements=["analytics"],
            concerns=["complexity", "cost"],
        )
        assert build_summary(context, separator="\n") == (
            "Project type: content\n"
            "Team size: small\n"
            "Timeline: flexible\n"
            "Technical background: beginner\n"
            "Requirements: analytics\n"
            "Concerns: complexity, cost"
        )


class TestFallback:
    """Tests for the rule-based default recommendation."""

    def test_beginner_on_tight_budget(self) -> None:
        analysis = ProjectAnalysis(
            technical_expertise=TechnicalExpertise.BEGINNER,
            budget_constraints=BudgetConstraints.MINIMAL,
            time_constraints=TimeConstraints.TIGHT,
        )
        recs = default_recommendations(analysis)

        assert recs.framework == "nextjs"
        assert recs.authentication == "clerk"
        assert recs.payments == "none"
        assert recs.analytics == "plausible"
        assert recs.monitoring == "none"

    def test_experienced_complex_project(self) -> None:
        analysis = ProjectAnalysis(
            complexity=Complexity.COMPLEX,
            technical_expertise=TechnicalExpertise.ADVANCED,
        )
        recs = default_recommendations(analysis)

        assert recs.authentication == "nextauth"
        assert recs.payments == "stripe"
        assert recs.analytics == "posthog"
        assert recs.monitoring == "sentry"
        assert recs.reasoning["authentication"] == "NextAuth for flexibility"

    def test_simple_project_reasoning_matches_clerk(self) -> None:
        analysis = ProjectAnalysis(
            complexity=Complexity.SIMPLE,
            technical_expertise=TechnicalExpertise.ADVANCED,
        )
        recs = default_recommendations(analysis)

        assert recs.authentication == "clerk"
        assert recs.reasoning["authentication"].startswith("Clerk")

    def test_default_explanation(self) -> None:
        assert default_explanation("hosting", "vercel").startswith("vercel is a solid choice")
