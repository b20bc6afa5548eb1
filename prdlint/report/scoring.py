"""
Scoring - Turn issues into a 0-100 quality score and derived verdicts.

The report score is linear: each issue subtracts its severity weight from
100, clamped at zero. The remaining helpers (grade, per-category scores,
time-to-fix estimate) are presentation aids layered on the same issues.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

from ..rules.models import Category, LintIssue, RuleConfigurationError, Severity

MAX_SCORE = 100

# Share of the overall picture each category represents
CATEGORY_WEIGHTS: Dict[Category, int] = {
    Category.COMPLETENESS: 25,
    Category.CLARITY: 20,
    Category.TECHNICAL: 20,
    Category.UX: 20,
    Category.SECURITY: 15,
}

# Minutes of editing an issue of each severity typically takes
MINUTES_PER_ISSUE: Dict[Severity, int] = {
    Severity.ERROR: 30,
    Severity.WARNING: 15,
    Severity.INFO: 10,
    Severity.SUGGESTION: 5,
}

PRODUCTION_READY_SCORE = 70

GRADE_THRESHOLDS = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)


@dataclass(frozen=True)
class ScoringWeights:
    """Points deducted per issue of each severity."""
    error: int = 15
    warning: int = 7
    info: int = 2
    suggestion: int = 0

    def __post_init__(self):
        for name in ("error", "warning", "info", "suggestion"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise RuleConfigurationError(
                    f"Scoring weight '{name}' must be a non-negative integer, got {value!r}"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, int]) -> 'ScoringWeights':
        """Build weights from a {severity name: points} mapping."""
        unknown = set(data) - {"error", "warning", "info", "suggestion"}
        if unknown:
            raise RuleConfigurationError(f"Unknown scoring weight(s): {', '.join(sorted(unknown))}")
        return cls(**dict(data))

    def weight(self, severity: Severity) -> int:
        return getattr(self, severity.value)

    def to_dict(self) -> Dict[str, int]:
        return {
            "error": self.error,
            "warning": self.warning,
            "info": self.info,
            "suggestion": self.suggestion,
        }


DEFAULT_WEIGHTS = ScoringWeights()


def compute_score(issues: Iterable[LintIssue], weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """
    Score a set of issues.

    Args:
        issues: Issues to deduct for
        weights: Points per severity

    Returns:
        ``max(0, 100 - sum of weights)``
    """
    penalty = sum(weights.weight(issue.severity) for issue in issues)
    return max(0, MAX_SCORE - penalty)


def grade(score: int) -> str:
    """Letter grade for a score."""
    for threshold, letter in GRADE_THRESHOLDS:
        if score >= threshold:
            return letter
    return "F"


def is_production_ready(report) -> bool:
    """A report is production ready with a score of 70+ and no errors."""
    return report.score >= PRODUCTION_READY_SCORE and report.stats.errors == 0


def category_scores(
    issues: Iterable[LintIssue],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Dict[str, int]:
    """
    Per-category scores, each on a 0-100 scale.

    A category's penalty budget is its share in CATEGORY_WEIGHTS; the
    deductions of its issues are measured against that budget.

    Returns:
        {category value: score}, for every category
    """
    penalties = {category: 0 for category in Category}
    for issue in issues:
        penalties[issue.category] += weights.weight(issue.severity)

    scores = {}
    for category, budget in CATEGORY_WEIGHTS.items():
        lost = min(penalties[category], budget)
        scores[category.value] = round(MAX_SCORE * (budget - lost) / budget)
    return scores


def estimate_time_to_fix(issues: Iterable[LintIssue]) -> str:
    """
    Rough editing effort for a set of issues.

    Returns:
        Human-readable estimate such as "~45 minutes" or "~2 hours"
    """
    minutes = sum(MINUTES_PER_ISSUE[issue.severity] for issue in issues)
    if minutes < 60:
        return f"~{minutes} minutes"
    if minutes < 480:
        hours = round(minutes / 60)
        return f"~{hours} hour{'s' if hours > 1 else ''}"
    days = round(minutes / 480)
    return f"~{days} day{'s' if days > 1 else ''}"


def score_message(score: int, ai_product: bool = False) -> str:
    """One-line interpretation of a score."""
    if score >= 90:
        return ("Excellent! Your PRD is comprehensive and AI-ready." if ai_product
                else "Excellent! Your PRD is comprehensive and well-structured.")
    if score >= 80:
        return ("Good! Minor improvements needed for production-ready AI product." if ai_product
                else "Good! Your PRD is nearly complete with minor gaps.")
    if score >= 70:
        return ("Acceptable. Address AI-specific requirements before launch." if ai_product
                else "Acceptable. Some important sections need attention.")
    if score >= 60:
        return ("Needs improvement. Critical AI requirements missing." if ai_product
                else "Needs improvement. Several key areas require work.")
    return ("Major gaps detected. Essential AI requirements not met." if ai_product
            else "Major gaps detected. Significant work needed.")


CATEGORY_FEEDBACK: Dict[Category, Dict[str, str]] = {
    Category.COMPLETENESS: {
        "high": "All essential sections present and detailed.",
        "medium": "Most sections covered, some details missing.",
        "low": "Critical sections missing or incomplete.",
    },
    Category.CLARITY: {
        "high": "Clear, specific language throughout.",
        "medium": "Generally clear with some ambiguous terms.",
        "low": "Too many vague terms and unclear requirements.",
    },
    Category.TECHNICAL: {
        "high": "Technical requirements well-defined.",
        "medium": "Basic technical specs present, needs detail.",
        "low": "Insufficient technical specifications.",
    },
    Category.UX: {
        "high": "User experience thoroughly considered.",
        "medium": "Basic UX covered, missing edge cases.",
        "low": "User experience needs more attention.",
    },
    Category.SECURITY: {
        "high": "Security requirements comprehensive.",
        "medium": "Basic security addressed, needs expansion.",
        "low": "Security requirements need immediate attention.",
    },
}


def category_feedback(category: Category, score: int) -> str:
    level = "high" if score >= 80 else "medium" if score >= 60 else "low"
    return CATEGORY_FEEDBACK[category][level]
