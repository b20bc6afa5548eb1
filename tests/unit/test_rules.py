"""Unit tests for lint rules."""

import pytest
from prdlint.parser import parse
from prdlint.rules import (
    Category,
    LintIssue,
    PRDLintRule,
    RuleConfigurationError,
    Severity,
    ambiguous_terms_rule,
    keyword_rule,
    lint_rule,
)
from prdlint.rules.completeness import (
    requires_boundaries,
    requires_edge_cases,
    requires_flows,
    requires_user_stories,
)
from prdlint.rules.clarity import concrete_examples, quantifiable_metrics, user_story_format
from prdlint.rules.technical import has_api_specifications
from prdlint.rules.ux import has_error_handling
from prdlint.rules.security import has_authentication
from prdlint.rules.ai_native import ai_data_retention, ai_model_specification


class TestSeverity:
    """Tests for Severity enum."""

    def test_rank_order(self):
        ranks = [s.rank for s in (Severity.ERROR, Severity.WARNING, Severity.INFO, Severity.SUGGESTION)]
        assert ranks == sorted(ranks)

    def test_blocking_severities(self):
        assert Severity.ERROR.blocks_rule
        assert Severity.WARNING.blocks_rule
        assert not Severity.INFO.blocks_rule
        assert not Severity.SUGGESTION.blocks_rule

    def test_from_string(self):
        assert Severity.from_string(" WARNING ") == Severity.WARNING

    def test_from_string_unknown(self):
        with pytest.raises(RuleConfigurationError):
            Severity.from_string("fatal")


class TestCategory:
    """Tests for Category enum."""

    def test_from_string(self):
        assert Category.from_string("UX") == Category.UX

    def test_from_string_unknown(self):
        with pytest.raises(RuleConfigurationError, match="performance"):
            Category.from_string("performance")


class TestRuleModel:
    """Tests for PRDLintRule and lint_rule."""

    @pytest.fixture
    def has_title(self):
        @lint_rule("has-title", Category.COMPLETENESS, Severity.INFO, "Title", "PRD should start with a title")
        def has_title(rule, prd):
            return [] if prd.content.startswith("#") else [rule.issue("No title")]
        return has_title

    def test_decorator_builds_rule(self, has_title):
        assert isinstance(has_title, PRDLintRule)
        assert has_title.id == "has-title"
        assert has_title.run(parse("# Title")) == ()

    def test_issue_is_attributed_to_rule(self, has_title):
        issues = has_title.run(parse("no title"))

        assert issues == (LintIssue(
            rule_id="has-title",
            severity=Severity.INFO,
            message="No title",
            category=Category.COMPLETENESS,
        ),)

    def test_issue_severity_override(self, has_title):
        assert has_title.issue("x").severity == Severity.INFO
        assert has_title.issue("x", severity=Severity.ERROR).severity == Severity.ERROR

    def test_check_ignored_in_equality(self):
        make = lambda check: PRDLintRule("r", Category.UX, Severity.INFO, "R", "d", check)
        assert make(lambda prd: []) == make(lambda prd: [1])

    def test_issue_to_dict(self, has_title):
        data = has_title.issue("No title", suggestions=["Add one"]).to_dict()
        assert data["span"] is None
        assert data["severity"] == "info"
        assert data["category"] == "completeness"
        assert data["suggestions"] == ["Add one"]


class TestFacetRules:
    """Tests for section presence rules: absent and empty are reported differently."""

    def test_user_stories_absent(self):
        issues = requires_user_stories.run(parse("# Overview\nBuild a thing."))

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR
        assert issues[0].span is None
        assert issues[0].auto_fixable

    def test_user_stories_empty(self):
        issues = requires_user_stories.run(parse("## User Stories\n"))
        assert [i.severity for i in issues] == [Severity.ERROR]
        assert "empty" in issues[0].message

    def test_user_stories_present(self):
        assert requires_user_stories.run(parse("## User Stories\n- As a user, I want A so that B")) == ()

    @pytest.mark.parametrize("rule,absent,empty_doc,empty", [
        (requires_edge_cases, Severity.WARNING, "## Edge Cases\n", Severity.ERROR),
        (requires_flows, Severity.INFO, "## User Flow\n", Severity.WARNING),
        (requires_boundaries, Severity.INFO, "## Boundaries\n- Dark theme\n", Severity.WARNING),
    ])
    def test_absent_and_empty_severities(self, rule, absent, empty_doc, empty):
        absent_issues = rule.run(parse("# Overview"))
        empty_issues = rule.run(parse(empty_doc))

        assert [i.severity for i in absent_issues] == [absent]
        assert [i.severity for i in empty_issues] == [empty]
        assert absent_issues[0].message != empty_issues[0].message

    def test_boundaries_present(self):
        assert requires_boundaries.run(parse("## Boundaries\n- Must log every payment\n")) == ()


class TestAmbiguousTerms:
    """Tests for the no-ambiguous-terms rule."""

    @pytest.fixture
    def rule(self):
        return ambiguous_terms_rule()

    def test_one_issue_per_occurrence(self, rule):
        content = "We support various formats etc."
        issues = rule.run(parse(content))

        assert [i.span.matched_text for i in issues] == ["etc", "various"]
        assert all(i.severity == Severity.WARNING for i in issues)
        for issue in issues:
            assert content[issue.span.start_offset:issue.span.end_offset] == issue.span.matched_text

    def test_whole_words_only(self, rule):
        assert rule.run(parse("Something about etcetera and bigger items")) == ()

    def test_message_uses_original_case(self, rule):
        issues = rule.run(parse("Maybe later."))
        assert issues[0].message == 'Ambiguous term "Maybe" found'

    def test_escalates_above_threshold(self, rule):
        issues = rule.run(parse("etc " * 6))
        assert len(issues) == 6
        assert all(i.severity == Severity.ERROR for i in issues)

    def test_no_escalation_at_threshold(self, rule):
        issues = rule.run(parse("etc " * 5))
        assert all(i.severity == Severity.WARNING for i in issues)

    def test_escalation_is_per_term(self, rule):
        issues = rule.run(parse("etc " * 6 + "maybe"))
        severities = {i.span.matched_text: i.severity for i in issues}
        assert severities == {"etc": Severity.ERROR, "maybe": Severity.WARNING}

    def test_custom_threshold(self):
        issues = ambiguous_terms_rule(escalation_threshold=2).run(parse("etc etc etc"))
        assert [i.severity for i in issues] == [Severity.ERROR] * 3

    def test_invalid_threshold(self):
        with pytest.raises(RuleConfigurationError, match="escalation_threshold"):
            ambiguous_terms_rule(escalation_threshold=0)


class TestClarityRules:
    """Tests for located clarity rules."""

    def test_performance_without_metric(self):
        issues = quantifiable_metrics.run(parse("Performance must be good."))
        assert len(issues) == 1
        assert issues[0].span.start_offset == 0

    def test_performance_with_metric(self):
        assert quantifiable_metrics.run(parse("Performance: under 200ms")) == ()

    def test_abstract_term_without_example(self):
        issues = concrete_examples.run(parse("The workflow is simple."))
        assert len(issues) == 1
        assert issues[0].severity == Severity.INFO

    def test_abstract_term_with_example(self):
        assert concrete_examples.run(parse("The workflow, for example approve then ship.")) == ()

    def test_story_not_in_canonical_form(self):
        issues = user_story_format.run(parse("## User Stories\n- Users can export data\n"))

        assert len(issues) == 1
        assert issues[0].span.matched_text == "Users can export data"
        assert (issues[0].span.line, issues[0].span.column) == (2, 3)

    def test_story_located_in_its_own_section(self):
        content = (
            "# Overview\n"
            "Users can export reports.\n"
            "\n"
            "## User Stories\n"
            "- Users can export reports.\n"
        )
        issues = user_story_format.run(parse(content))

        assert len(issues) == 1
        assert (issues[0].span.line, issues[0].span.column) == (5, 3)
        assert issues[0].span.start_offset == content.index("- Users") + 2

    def test_story_with_emphasis_keeps_span(self):
        content = "## User Stories\n- Users **must** export reports\n"
        issues = user_story_format.run(parse(content))

        assert len(issues) == 1
        assert issues[0].span is not None
        assert issues[0].span.matched_text == "Users **must** export reports"
        assert issues[0].span.line == 2

    def test_wrapped_story_span_covers_continuation(self):
        content = "## User Stories\n- Users can export\n  monthly reports\n"
        issues = user_story_format.run(parse(content))

        assert issues[0].span.matched_text == "Users can export\n  monthly reports"

    def test_story_in_canonical_form(self):
        content = "## User Stories\n- As a user, I want exports so that I can audit\n"
        assert user_story_format.run(parse(content)) == ()

    def test_no_stories_no_issues(self):
        assert user_story_format.run(parse("# Overview")) == ()


class TestKeywordRules:
    """Tests for document-level keyword coverage rules."""

    def test_missing_keywords(self):
        issues = has_error_handling.run(parse("# PRD\nNothing here."))

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR
        assert issues[0].is_document_level
        assert issues[0].auto_fixable

    def test_keyword_present(self):
        assert has_error_handling.run(parse("Show an error message on failure.")) == ()

    def test_not_triggered(self):
        assert has_authentication.run(parse("# PRD\nA static brochure page.")) == ()

    def test_triggered_without_keywords(self):
        issues = has_authentication.run(parse("Users sign up with email."))
        assert [i.rule_id for i in issues] == ["has-authentication"]

    def test_triggered_with_keywords(self):
        assert has_authentication.run(parse("Users log in with OAuth.")) == ()

    def test_whole_word_keywords(self):
        assert len(has_api_specifications.run(parse("We expose a REST API."))) == 1
        assert len(has_api_specifications.run(parse("A REST API that targets mobile."))) == 1
        assert has_api_specifications.run(parse("REST API with GET /items returning a list")) == ()

    def test_custom_keyword_rule(self):
        rule = keyword_rule(
            "has-glossary", Category.CLARITY, Severity.SUGGESTION, "Glossary", "Define terms",
            keywords=("glossary",), message="No glossary", suggestion="Add a glossary",
        )
        assert rule.run(parse("# PRD"))[0].message == "No glossary"
        assert rule.run(parse("## Glossary")) == ()


class TestAINativeRules:
    """Tests for AI product rules."""

    def test_conventional_product_unaffected(self):
        prd = parse("# Todo app\nTrack tasks.")
        assert ai_model_specification.run(prd) == ()
        assert ai_data_retention.run(prd) == ()

    def test_ai_product_without_model(self):
        issues = ai_model_specification.run(parse("# Chat assistant\nPowered by AI."))
        assert [i.severity for i in issues] == [Severity.ERROR]

    def test_ai_product_with_model(self):
        assert ai_model_specification.run(parse("Powered by AI using the GPT-4 model.")) == ()

    def test_chat_without_retention(self):
        issues = ai_data_retention.run(parse("# Chat assistant\nPowered by AI."))
        assert issues[0].category == Category.SECURITY

    def test_ai_is_whole_word(self):
        assert ai_model_specification.run(parse("We said so in the email.")) == ()
