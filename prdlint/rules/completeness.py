"""
Completeness Rules - Does the PRD contain the sections it needs?

Facet rules distinguish an absent section (no heading at all) from an
empty one (heading with nothing under it). An empty section is a
placeholder someone forgot to fill, so it is reported one level more
severely than a missing section, except where absence is already an error.
"""

from typing import List, Sequence

from .helpers import keyword_rule
from .models import Category, LintIssue, PRDLintRule, Severity, lint_rule
from ..parser.models import ParsedPRD


@lint_rule(
    "requires-user-stories",
    Category.COMPLETENESS,
    Severity.ERROR,
    "User Stories Required",
    "PRD must include at least one user story",
)
def requires_user_stories(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    suggestions = (
        'As a product manager, I want to generate PRDs quickly so that I can focus on strategic work',
        'As a developer, I want clear requirements so that I can build the right features',
        'As a stakeholder, I want to review PRDs easily so that I can provide timely feedback',
    )
    if prd.user_stories is None:
        return [rule.issue(
            'No user stories found. User stories help clarify who needs what and why.',
            suggestion='Add a "User Stories" section: "As a [user type], I want [feature] so that [benefit]"',
            suggestions=suggestions,
            auto_fixable=True,
        )]
    if not prd.user_stories:
        return [rule.issue(
            'The "User Stories" section is empty.',
            suggestion='List at least one story: "As a [user type], I want [feature] so that [benefit]"',
            suggestions=suggestions,
            auto_fixable=True,
        )]
    return []


@lint_rule(
    "requires-edge-cases",
    Category.COMPLETENESS,
    Severity.WARNING,
    "Edge Cases",
    "PRD should list edge cases the implementation must handle",
)
def requires_edge_cases(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    if prd.edge_cases is None:
        return [rule.issue(
            'No edge cases section found',
            suggestion='Add an "Edge Cases" section covering empty input, limits, concurrency and failures',
            suggestions=(
                'Empty input: user submits the form with no fields filled',
                'Limits: list contains more than 10,000 items',
                'Concurrency: two users edit the same record at once',
            ),
            auto_fixable=True,
        )]
    if not prd.edge_cases:
        return [rule.issue(
            'The "Edge Cases" section is empty',
            severity=Severity.ERROR,
            suggestion='List the edge cases or remove the placeholder heading',
        )]
    return []


@lint_rule(
    "requires-flows",
    Category.COMPLETENESS,
    Severity.INFO,
    "User Flows",
    "PRD should describe the main user flows step by step",
)
def requires_flows(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    if prd.flows is None:
        return [rule.issue(
            'No user flow section found',
            suggestion='Add a "User Flow" section with numbered steps',
            suggestions=(
                '## User Flow\n1. User opens the dashboard\n2. User clicks "New"\n3. System shows the editor',
            ),
            auto_fixable=True,
        )]
    if not prd.flows:
        return [rule.issue(
            'The user flow section has no steps',
            severity=Severity.WARNING,
            suggestion='Describe the flow as numbered steps',
        )]
    return []


@lint_rule(
    "requires-boundaries",
    Category.COMPLETENESS,
    Severity.INFO,
    "Boundaries",
    "PRD should state hard (must/never) and soft (should/prefer) boundaries",
)
def requires_boundaries(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    if prd.boundaries is None:
        return [rule.issue(
            'No boundaries section found',
            suggestion='Add "Hard Boundaries" (must/never) and "Soft Boundaries" (should/prefer)',
            suggestions=(
                '## Boundaries\n### Hard Boundaries\n- Must never store raw passwords\n'
                '### Soft Boundaries\n- Should prefer cached results when offline',
            ),
            auto_fixable=True,
        )]
    if prd.boundaries.is_empty:
        return [rule.issue(
            'The boundaries section has no hard or soft constraints',
            severity=Severity.WARNING,
            suggestion='Phrase each boundary with "must"/"never" (hard) or "should"/"prefer" (soft)',
        )]
    return []


has_acceptance_criteria = keyword_rule(
    "has-acceptance-criteria",
    Category.COMPLETENESS,
    Severity.WARNING,
    "Acceptance Criteria",
    "PRD should include testable acceptance criteria",
    keywords=('acceptance criteria', 'given', 'success criteria', 'definition of done'),
    message='No acceptance criteria specified. Clear criteria ensure features meet expectations.',
    suggestion='Add acceptance criteria using Given/When/Then format',
    suggestions=(
        'Given [initial context], When [action taken], Then [expected outcome]',
        'GIVEN a user is logged in, WHEN they click submit, THEN the form is saved',
    ),
)

has_scope_definition = keyword_rule(
    "has-scope-definition",
    Category.COMPLETENESS,
    Severity.WARNING,
    "Scope Definition",
    "PRD should explicitly define what is in and out of scope",
    keywords=('in scope', 'out of scope', 'scope', 'non-goal', 'excludes', 'not included'),
    message='No explicit scope definition found',
    suggestion='Define what is in scope and out of scope',
    suggestions=(
        '## In Scope\n- Feature A\n\n## Out of Scope\n- Mobile app (future phase)',
    ),
)

has_success_metrics = keyword_rule(
    "has-success-metrics",
    Category.COMPLETENESS,
    Severity.INFO,
    "Success Metrics",
    "PRD should define how success is measured",
    keywords=('success metric', 'kpi', 'metric', 'measure', 'conversion', 'retention rate', 'okr'),
    message='No success metrics defined',
    suggestion='Add measurable goals, e.g. "Increase weekly active users by 15% within 3 months"',
)


COMPLETENESS_RULES: List[PRDLintRule] = [
    requires_user_stories,
    requires_edge_cases,
    requires_flows,
    requires_boundaries,
    has_acceptance_criteria,
    has_scope_definition,
    has_success_metrics,
]
