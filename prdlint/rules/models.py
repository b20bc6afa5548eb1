"""
Rule Models - Issues, severities and the rule value type.

A rule is a plain value carrying a pure ``check`` function. New rules are
added by constructing PRDLintRule instances and registering them in a
RuleSet, never by subclassing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..parser.models import ParsedPRD
from ..utils.text_position import TextSpan


class RuleConfigurationError(ValueError):
    """Raised when a rule set or rule selection is malformed."""


class Severity(Enum):
    """Issue severity, ordered error > warning > info > suggestion."""
    ERROR = "error"             # Must be fixed
    WARNING = "warning"         # Should be fixed
    INFO = "info"               # Informational
    SUGGESTION = "suggestion"   # Nice to have

    @property
    def rank(self) -> int:
        """Display rank; lower sorts first."""
        return _SEVERITY_RANK[self]

    @property
    def blocks_rule(self) -> bool:
        """Whether an issue of this severity marks its rule as failed."""
        return self in (Severity.ERROR, Severity.WARNING)

    @classmethod
    def from_string(cls, value: str) -> 'Severity':
        """Parse severity from string."""
        try:
            return cls(value.lower().strip())
        except (ValueError, AttributeError):
            raise RuleConfigurationError(f"Unknown severity: {value!r}")


_SEVERITY_RANK = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.INFO: 2,
    Severity.SUGGESTION: 3,
}


class Category(Enum):
    """Reporting category of a rule; has no effect on the score."""
    COMPLETENESS = "completeness"
    CLARITY = "clarity"
    TECHNICAL = "technical"
    UX = "ux"
    SECURITY = "security"

    @classmethod
    def from_string(cls, value: str) -> 'Category':
        """Parse category from string."""
        try:
            return cls(value.lower().strip())
        except (ValueError, AttributeError):
            valid = ", ".join(c.value for c in cls)
            raise RuleConfigurationError(f"Unknown rule category: {value!r} (expected one of: {valid})")


@dataclass(frozen=True)
class LintIssue:
    """A single finding emitted by a rule."""
    rule_id: str
    severity: Severity
    message: str
    category: Category
    span: Optional[TextSpan] = None  # None for document-level findings
    suggestion: Optional[str] = None
    suggestions: Tuple[str, ...] = ()
    auto_fixable: bool = False

    @property
    def start_offset(self) -> Optional[int]:
        return self.span.start_offset if self.span else None

    @property
    def is_document_level(self) -> bool:
        return self.span is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "category": self.category.value,
            "message": self.message,
            "span": self.span.to_dict() if self.span else None,
            "suggestion": self.suggestion,
            "suggestions": list(self.suggestions),
            "auto_fixable": self.auto_fixable,
        }


CheckFunction = Callable[[ParsedPRD], Sequence[LintIssue]]


@dataclass(frozen=True)
class PRDLintRule:
    """
    A named, independent check over a ParsedPRD.

    ``check`` must be pure: it may read the parsed document but never
    another rule's output, so rules can run in any order or in parallel.
    """
    id: str
    category: Category
    severity: Severity
    name: str
    description: str
    check: CheckFunction = field(compare=False, repr=False)

    def issue(
        self,
        message: str,
        span: Optional[TextSpan] = None,
        severity: Optional[Severity] = None,
        suggestion: Optional[str] = None,
        suggestions: Sequence[str] = (),
        auto_fixable: bool = False,
    ) -> LintIssue:
        """Build an issue attributed to this rule (default severity unless overridden)."""
        return LintIssue(
            rule_id=self.id,
            severity=severity or self.severity,
            message=message,
            category=self.category,
            span=span,
            suggestion=suggestion,
            suggestions=tuple(suggestions),
            auto_fixable=auto_fixable,
        )

    def run(self, prd: ParsedPRD) -> Tuple[LintIssue, ...]:
        """Run the check and freeze its output."""
        return tuple(self.check(prd))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "severity": self.severity.value,
            "name": self.name,
            "description": self.description,
        }


def lint_rule(
    id: str,
    category: Category,
    severity: Severity,
    name: str,
    description: str,
) -> Callable[[Callable[[PRDLintRule, ParsedPRD], Sequence[LintIssue]]], PRDLintRule]:
    """
    Decorator turning ``fn(rule, prd)`` into a PRDLintRule.

    The function receives its own rule so it can build issues with
    ``rule.issue(...)``; the resulting ``rule.check`` takes only the PRD.

    Example:
        @lint_rule("has-title", Category.COMPLETENESS, Severity.INFO,
                   "Title", "PRD should start with a title")
        def has_title(rule, prd):
            return [] if prd.content.startswith("#") else [rule.issue("No title")]
    """
    def decorator(fn: Callable[[PRDLintRule, ParsedPRD], Sequence[LintIssue]]) -> PRDLintRule:
        def check(prd: ParsedPRD) -> Sequence[LintIssue]:
            return fn(rule, prd)

        rule = PRDLintRule(
            id=id,
            category=category,
            severity=severity,
            name=name,
            description=description,
            check=check,
        )
        return rule

    return decorator
