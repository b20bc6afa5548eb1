"""
Auto-Fixer - Append template sections for fixable document-level issues.

Handles issues that are:
- marked auto_fixable by their rule
- document-level (no span), i.e. a whole section is missing
- backed by a template in FIX_TEMPLATES

The input document is never modified; a new string is returned.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .templates import FIX_TEMPLATES
from ..report.models import LintReport
from ..report.scoring import ScoringWeights
from ..rules.models import LintIssue
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class FixResult:
    """Result of auto-fix operation."""
    fixed_content: str
    fixes_applied: List[str] = field(default_factory=list)
    fixes_skipped: List[str] = field(default_factory=list)
    report: Optional[LintReport] = None  # Re-analysis of fixed_content, if requested

    @property
    def changed(self) -> bool:
        return bool(self.fixes_applied)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "changed": self.changed,
            "fixes_applied_count": len(self.fixes_applied),
            "fixes_applied": self.fixes_applied,
            "fixes_skipped": self.fixes_skipped,
            "score_after": self.report.score if self.report else None,
        }


class AutoFixer:
    """
    Automatic fixer for missing PRD sections.

    Appends one template per failing rule, in report order.
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None, reanalyze: bool = True):
        """
        Initialize auto-fixer.

        Args:
            templates: Rule id to markdown section (default: FIX_TEMPLATES)
            reanalyze: Re-run the rules on the fixed document
        """
        self.templates = FIX_TEMPLATES if templates is None else templates
        self.reanalyze = reanalyze

    def fix(
        self,
        content: str,
        report: LintReport,
        rules=None,
        weights: Optional[ScoringWeights] = None,
        max_workers: Optional[int] = None,
    ) -> FixResult:
        """
        Attempt to fix the issues of a report.

        Args:
            content: The document the report was built from
            report: Report with issues to fix
            rules: Rules to re-analyze with (default: all built-in rules)
            weights: Scoring weights for the re-analysis (default weights if None)
            max_workers: Thread pool size for the re-analysis

        Returns:
            FixResult with the new document and applied fixes
        """
        fixable = [i for i in report.issues if self._is_fixable(i)]
        logger.info(f"Attempting to fix {len(fixable)} auto-fixable issues")

        sections = []
        fixes_applied = []
        fixes_skipped = []
        seen = set()
        for issue in fixable:
            if issue.rule_id in seen:
                continue
            seen.add(issue.rule_id)

            template = self.templates.get(issue.rule_id)
            if template is None:
                fixes_skipped.append(f"{issue.rule_id}: No template")
                continue
            sections.append(template)
            fixes_applied.append(f"{issue.rule_id}: {issue.message}")

        fixed_content = _append_sections(content, sections)

        new_report = None
        if self.reanalyze and sections:
            from ..report.aggregator import analyze
            new_report = analyze(fixed_content, rules, weights=weights, max_workers=max_workers)
            logger.info(f"After fixes: score {report.score} -> {new_report.score}")

        return FixResult(
            fixed_content=fixed_content,
            fixes_applied=fixes_applied,
            fixes_skipped=fixes_skipped,
            report=new_report,
        )

    @staticmethod
    def _is_fixable(issue: LintIssue) -> bool:
        return issue.auto_fixable and issue.is_document_level


def _append_sections(content: str, sections: List[str]) -> str:
    if not sections:
        return content
    body = content.rstrip("\n")
    prefix = body + "\n\n" if body else ""
    return prefix + "\n\n".join(sections) + "\n"
