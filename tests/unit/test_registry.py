"""Unit tests for RuleSet and the built-in catalog."""

import pytest
from prdlint.parser import parse
from prdlint.rules import (
    Category,
    PRDLintRule,
    RuleConfigurationError,
    RuleSet,
    Severity,
    default_rules,
)
from prdlint.rules.completeness import requires_flows, requires_user_stories
from prdlint.rules.ux import has_error_handling, has_loading_states


def make_rule(rule_id, category=Category.UX, severity=Severity.INFO, check=lambda prd: []):
    return PRDLintRule(rule_id, category, severity, rule_id.title(), "test rule", check)


class TestRuleSet:
    """Tests for RuleSet construction and lookup."""

    @pytest.fixture
    def rules(self):
        return RuleSet([requires_user_stories, has_error_handling, requires_flows, has_loading_states])

    def test_preserves_registration_order(self, rules):
        assert rules.ids == (
            "requires-user-stories",
            "has-error-handling",
            "requires-flows",
            "has-loading-states",
        )
        assert [r.id for r in rules] == list(rules.ids)

    def test_len_and_contains(self, rules):
        assert len(rules) == 4
        assert "has-error-handling" in rules
        assert "nope" not in rules

    def test_get(self, rules):
        assert rules.get("requires-flows") is requires_flows
        assert rules.get("missing") is None

    def test_by_category(self, rules):
        assert [r.id for r in rules.by_category("ux")] == ["has-error-handling", "has-loading-states"]

    def test_duplicate_id_rejected(self):
        with pytest.raises(RuleConfigurationError, match="Duplicate"):
            RuleSet([make_rule("a"), make_rule("a")])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RuleSet([make_rule("a"), make_rule("a")])

    def test_unknown_category_rejected(self):
        with pytest.raises(RuleConfigurationError, match="category"):
            RuleSet([make_rule("a", category="performance")])

    def test_unknown_severity_rejected(self):
        with pytest.raises(RuleConfigurationError, match="severity"):
            RuleSet([make_rule("a", severity="fatal")])

    def test_non_callable_check_rejected(self):
        with pytest.raises(RuleConfigurationError, match="non-callable"):
            RuleSet([make_rule("a", check=None)])

    def test_non_rule_rejected(self):
        with pytest.raises(RuleConfigurationError):
            RuleSet(["requires-user-stories"])

    def test_empty_set(self):
        assert len(RuleSet()) == 0


class TestRuleSetFilter:
    """Tests for RuleSet.filter."""

    @pytest.fixture
    def rules(self):
        return RuleSet([requires_user_stories, has_error_handling, requires_flows, has_loading_states])

    def test_filter_by_category(self, rules):
        assert rules.filter(categories=["completeness"]).ids == ("requires-user-stories", "requires-flows")

    def test_filter_accepts_enum(self, rules):
        assert rules.filter(categories=[Category.UX]).ids == ("has-error-handling", "has-loading-states")

    def test_exclude_category(self, rules):
        assert rules.filter(exclude_categories=["ux"]).ids == ("requires-user-stories", "requires-flows")

    def test_exclude_ids(self, rules):
        filtered = rules.filter(exclude_ids=["requires-flows"])
        assert "requires-flows" not in filtered
        assert len(filtered) == 3

    def test_filter_returns_new_set(self, rules):
        rules.filter(categories=["ux"])
        assert len(rules) == 4

    def test_unknown_id_rejected(self, rules):
        with pytest.raises(RuleConfigurationError, match="no-such-rule"):
            rules.filter(exclude_ids=["no-such-rule"])

    def test_unknown_category_rejected(self, rules):
        with pytest.raises(RuleConfigurationError):
            rules.filter(categories=["performance"])


class TestDefaultRules:
    """Tests for the built-in catalog."""

    def test_ids_unique(self):
        ids = default_rules().ids
        assert len(ids) == len(set(ids))

    def test_covers_every_category(self):
        rules = default_rules()
        for category in Category:
            assert rules.by_category(category)

    def test_fresh_instance_each_call(self):
        first = default_rules()
        assert first is not default_rules()
        first.add(PRDLintRule("extra", Category.UX, Severity.INFO, "Extra", "x", lambda prd: []))
        assert "extra" not in default_rules()

    def test_facet_rules_registered_first(self):
        assert default_rules().ids[:4] == (
            "requires-user-stories",
            "requires-edge-cases",
            "requires-flows",
            "requires-boundaries",
        )

    def test_escalation_threshold(self):
        rule = default_rules(escalation_threshold=2).get("no-ambiguous-terms")
        issues = rule.run(parse("etc etc etc"))
        assert all(i.severity == Severity.ERROR for i in issues)

    def test_default_escalation_threshold(self):
        rule = default_rules().get("no-ambiguous-terms")
        issues = rule.run(parse("etc etc etc"))
        assert all(i.severity == Severity.WARNING for i in issues)
