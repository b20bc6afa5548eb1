"""
Shared helpers for rule checks.
"""

from typing import Iterable, Iterator, Optional, Sequence

from .models import Category, LintIssue, PRDLintRule, Severity, lint_rule
from ..parser.models import ParsedPRD
from ..utils.text_position import TextSpan, is_whole_word


def word_occurrences(prd: ParsedPRD, term: str) -> Iterator[TextSpan]:
    """Occurrences of ``term`` that stand alone as a word."""
    for span in prd.occurrences(term):
        if is_whole_word(prd.content, span):
            yield span


def mentions(prd: ParsedPRD, keywords: Iterable[str]) -> bool:
    """Whether any keyword occurs as a substring (case-insensitive)."""
    return prd.mentions_any(keywords)


def mentions_word(prd: ParsedPRD, words: Iterable[str]) -> bool:
    """Whether any word occurs as a whole word (case-insensitive)."""
    return any(next(word_occurrences(prd, word), None) is not None for word in words)


def context_window(content: str, span: TextSpan, radius: int) -> str:
    """Text surrounding a span, ``radius`` characters on each side."""
    start = max(0, span.start_offset - radius)
    end = min(len(content), span.end_offset + radius)
    return content[start:end]


def keyword_rule(
    id: str,
    category: Category,
    severity: Severity,
    name: str,
    description: str,
    keywords: Sequence[str],
    message: str,
    suggestion: str,
    suggestions: Sequence[str] = (),
    triggers: Optional[Sequence[str]] = None,
    whole_word_keywords: bool = False,
    auto_fixable: bool = True,
) -> PRDLintRule:
    """
    Build a document-level coverage rule.

    The rule emits one spanless issue when none of ``keywords`` occurs in
    the document. With ``triggers`` the rule only applies when one of the
    trigger words (whole-word match) is present. Keywords match as
    substrings unless ``whole_word_keywords`` is set.
    """
    @lint_rule(id, category, severity, name, description)
    def check(rule: PRDLintRule, prd: ParsedPRD) -> Sequence[LintIssue]:
        if triggers is not None and not mentions_word(prd, triggers):
            return []
        covered = mentions_word(prd, keywords) if whole_word_keywords else mentions(prd, keywords)
        if covered:
            return []
        return [rule.issue(
            message,
            suggestion=suggestion,
            suggestions=suggestions,
            auto_fixable=auto_fixable,
        )]

    return check
