"""Unit tests for the auto-fixer."""

import pytest
from prdlint.fixes import FIX_TEMPLATES, AutoFixer
from prdlint.parser import parse
from prdlint.report import ScoringWeights, analyze
from prdlint.rules import RuleSet, ambiguous_terms_rule, default_rules
from prdlint.rules.completeness import requires_edge_cases, requires_user_stories
from prdlint.rules.ux import has_error_handling


class TestAutoFixer:
    """Tests for AutoFixer."""

    @pytest.fixture
    def rules(self):
        return RuleSet([requires_user_stories, has_error_handling, ambiguous_terms_rule()])

    @pytest.fixture
    def fixer(self):
        return AutoFixer()

    def test_appends_missing_sections(self, fixer, rules):
        content = "# Overview\nBuild a thing."
        report = analyze(content, rules)
        result = fixer.fix(content, report, rules)

        assert result.changed
        assert result.fixed_content.startswith(content)
        assert "## User Stories" in result.fixed_content
        assert "## Error Handling" in result.fixed_content
        assert len(result.fixes_applied) == 2

    def test_fixed_document_passes_fixed_rules(self, fixer, rules):
        content = "# Overview\nBuild a thing."
        result = fixer.fix(content, analyze(content, rules), rules)

        assert result.report.score == 100
        assert result.report.failed_rule_ids == ()

    def test_located_issues_not_fixed(self, fixer, rules):
        content = "## User Stories\n- As a user, I want logs etc. so that errors are traceable\n"
        report = analyze(content, rules)
        assert report.issues

        result = fixer.fix(content, report, rules)
        assert not result.changed
        assert result.fixed_content == content
        assert result.report is None

    def test_one_template_per_rule(self, fixer):
        content = "## User Stories\n"
        rules = RuleSet([requires_user_stories])
        result = fixer.fix(content, analyze(content, rules), rules)
        assert result.fixed_content.count("## User Stories") == 2
        assert len(result.fixes_applied) == 1

    def test_missing_template_skipped(self, rules):
        content = "# Overview"
        fixer = AutoFixer(templates={})
        result = fixer.fix(content, analyze(content, rules), rules)

        assert not result.changed
        assert len(result.fixes_skipped) == 2

    def test_empty_section_not_auto_fixable(self, fixer):
        content = "## Edge Cases\n"
        rules = RuleSet([requires_edge_cases])
        result = fixer.fix(content, analyze(content, rules), rules)
        assert not result.changed

    def test_without_reanalysis(self, rules):
        content = "# Overview"
        result = AutoFixer(reanalyze=False).fix(content, analyze(content, rules), rules)
        assert result.changed
        assert result.report is None

    def test_reanalysis_uses_configured_weights(self, fixer):
        content = "## Edge Cases\n"
        rules = RuleSet([requires_user_stories, requires_edge_cases])
        weights = ScoringWeights(error=40)

        result = fixer.fix(content, analyze(content, rules, weights), rules, weights=weights, max_workers=2)

        assert result.changed
        assert result.report.stats.errors == 1
        assert result.report.score == 60
        assert result.report == analyze(result.fixed_content, rules, weights)

    def test_to_dict(self, fixer, rules):
        content = "# Overview"
        data = fixer.fix(content, analyze(content, rules), rules).to_dict()
        assert data["fixes_applied_count"] == 2
        assert data["score_after"] == 100


class TestTemplates:
    """Each template satisfies the rule it is registered for."""

    @pytest.mark.parametrize("rule_id", sorted(FIX_TEMPLATES))
    def test_template_fixes_its_rule(self, rule_id):
        rule = default_rules().get(rule_id)
        assert rule is not None
        assert rule.run(parse(FIX_TEMPLATES[rule_id])) == ()
