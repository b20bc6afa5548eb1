"""
Clarity Rules - Is the PRD phrased precisely?

These rules point at exact spans of the document, one issue per
occurrence, located with the text position utilities.
"""

import re
from typing import List, Sequence, Tuple

from .helpers import context_window, word_occurrences
from .models import (
    Category,
    LintIssue,
    PRDLintRule,
    RuleConfigurationError,
    Severity,
    lint_rule,
)
from ..parser.models import ParsedPRD

# Occurrences of a single term above which every occurrence becomes an error
DEFAULT_ESCALATION_THRESHOLD = 5

AMBIGUOUS_TERMS: Tuple[Tuple[str, str], ...] = (
    ('etc', 'List all specific items instead of using "etc"'),
    ('various', 'Specify exactly which items or options'),
    ('some', 'Quantify the exact number or percentage'),
    ('maybe', 'Make a clear decision or mark as "to be determined"'),
    ('fast', 'Specify exact performance metrics (e.g., "<2 seconds")'),
    ('slow', 'Define specific performance thresholds'),
    ('big', 'Provide specific size or scale measurements'),
    ('small', 'Provide specific size constraints'),
    ('appropriate', 'Define what is appropriate: the criteria or the standard to meet'),
    ('user-friendly', 'Define specific UX requirements or usability metrics'),
    ('intuitive', 'Specify exact UX patterns or behaviors'),
    ('modern', 'Reference specific design systems or patterns'),
    ('secure', 'List specific security requirements (encryption, auth, ...)'),
    ('scalable', 'Define specific scalability targets (users, requests/sec, ...)'),
)

PERFORMANCE_TERMS = ('performance', 'speed', 'load time', 'response time', 'latency')
METRIC_PATTERN = re.compile(
    r'\d+(?:\.\d+)?\s*(?:ms|s|sec|seconds|milliseconds|minutes|%|kb|mb|gb|rps|req/s)\b',
    re.IGNORECASE,
)

ABSTRACT_TERMS = ('workflow', 'process', 'integration', 'functionality', 'feature')
EXAMPLE_MARKERS = ('example', 'e.g.', 'for instance', 'such as', 'like')

USER_STORY_PATTERN = re.compile(
    r'\bas\s+an?\s+.+?\bi\s+(?:want|need|can)\b.+?\bso\s+that\b',
    re.IGNORECASE | re.DOTALL,
)


def ambiguous_terms_rule(
    escalation_threshold: int = DEFAULT_ESCALATION_THRESHOLD,
    terms: Sequence[Tuple[str, str]] = AMBIGUOUS_TERMS,
) -> PRDLintRule:
    """
    Build the vague-language rule.

    Args:
        escalation_threshold: A term found more often than this is
            reported as an error at every occurrence
        terms: (term, suggestion) pairs to flag

    Returns:
        The ``no-ambiguous-terms`` rule
    """
    if escalation_threshold < 1:
        raise RuleConfigurationError(
            f"escalation_threshold must be >= 1, got {escalation_threshold}"
        )

    @lint_rule(
        "no-ambiguous-terms",
        Category.CLARITY,
        Severity.WARNING,
        "Avoid Ambiguous Terms",
        "PRD should avoid vague or ambiguous language",
    )
    def no_ambiguous_terms(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
        issues = []
        for term, suggestion in terms:
            spans = list(word_occurrences(prd, term))
            severity = Severity.ERROR if len(spans) > escalation_threshold else None
            for span in spans:
                issues.append(rule.issue(
                    f'Ambiguous term "{span.matched_text}" found',
                    span=span,
                    severity=severity,
                    suggestion=suggestion,
                ))
        return issues

    return no_ambiguous_terms


@lint_rule(
    "quantifiable-metrics",
    Category.CLARITY,
    Severity.WARNING,
    "Quantifiable Metrics",
    "Performance requirements should have specific values",
)
def quantifiable_metrics(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    issues = []
    for term in PERFORMANCE_TERMS:
        for span in prd.occurrences(term):
            if METRIC_PATTERN.search(context_window(prd.content, span, 50)):
                continue
            issues.append(rule.issue(
                f'"{span.matched_text}" mentioned without specific metrics',
                span=span,
                suggestion='Add specific performance targets',
                suggestions=(
                    'Page load time: <2 seconds on 3G connection',
                    'API response time: <200ms for 95th percentile',
                    'Memory usage: <100MB on mobile devices',
                ),
            ))
    return issues


@lint_rule(
    "concrete-examples",
    Category.CLARITY,
    Severity.INFO,
    "Concrete Examples",
    "Abstract concepts should include concrete examples",
)
def concrete_examples(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    issues = []
    for term in ABSTRACT_TERMS:
        for span in word_occurrences(prd, term):
            window = context_window(prd.content, span, 100).lower()
            if any(marker in window for marker in EXAMPLE_MARKERS):
                continue
            issues.append(rule.issue(
                f'"{span.matched_text}" mentioned without concrete examples',
                span=span,
                suggestion='Add specific examples to clarify',
            ))
    return issues


@lint_rule(
    "user-story-format",
    Category.CLARITY,
    Severity.INFO,
    "User Story Format",
    'User stories should read "As a [user], I want [feature] so that [benefit]"',
)
def user_story_format(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
    if not prd.user_stories:
        return []

    issues = []
    for index, story in enumerate(prd.user_stories):
        if USER_STORY_PATTERN.search(story):
            continue
        issues.append(rule.issue(
            f'User story is not in "As a ..., I want ... so that ..." form: "{_shorten(story)}"',
            span=prd.story_span(index),
            suggestion='Rewrite as: "As a [user type], I want [feature] so that [benefit]"',
        ))
    return issues


def _shorten(text: str, limit: int = 60) -> str:
    return text if len(text) <= limit else text[:limit - 3] + "..."


CLARITY_RULES: List[PRDLintRule] = [
    ambiguous_terms_rule(),
    quantifiable_metrics,
    concrete_examples,
    user_story_format,
]
