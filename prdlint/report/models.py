"""
Report Models - The scored result of one analysis.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from ..rules.models import LintIssue, Severity


@dataclass(frozen=True)
class SeverityStats:
    """Issue counts per severity."""
    errors: int = 0
    warnings: int = 0
    info: int = 0
    suggestions: int = 0

    @classmethod
    def from_issues(cls, issues: Iterable[LintIssue]) -> 'SeverityStats':
        counts = {severity: 0 for severity in Severity}
        for issue in issues:
            counts[issue.severity] += 1
        return cls(
            errors=counts[Severity.ERROR],
            warnings=counts[Severity.WARNING],
            info=counts[Severity.INFO],
            suggestions=counts[Severity.SUGGESTION],
        )

    @property
    def total(self) -> int:
        return self.errors + self.warnings + self.info + self.suggestions

    def count(self, severity: Severity) -> int:
        return {
            Severity.ERROR: self.errors,
            Severity.WARNING: self.warnings,
            Severity.INFO: self.info,
            Severity.SUGGESTION: self.suggestions,
        }[severity]

    def to_dict(self) -> Dict[str, int]:
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "info": self.info,
            "suggestions": self.suggestions,
        }


@dataclass(frozen=True)
class LintReport:
    """
    Outcome of running a rule set over one document.

    ``issues`` is in presentation order. Every rule id that ran appears in
    exactly one of ``passed_rule_ids`` / ``failed_rule_ids``, both in
    registration order.
    """
    score: int
    issues: Tuple[LintIssue, ...]
    stats: SeverityStats
    passed_rule_ids: Tuple[str, ...]
    failed_rule_ids: Tuple[str, ...]

    @property
    def has_errors(self) -> bool:
        return self.stats.errors > 0

    @property
    def rule_ids(self) -> Tuple[str, ...]:
        return self.passed_rule_ids + self.failed_rule_ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "stats": self.stats.to_dict(),
            "passed_rule_ids": list(self.passed_rule_ids),
            "failed_rule_ids": list(self.failed_rule_ids),
            "issues": [issue.to_dict() for issue in self.issues],
        }
