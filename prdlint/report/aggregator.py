"""
Report Aggregator - Run a rule set over a document and score the result.

Pipeline:
1. Parse the raw text once into a ParsedPRD
2. Run every rule (sequentially, or on a thread pool)
3. Merge issues in rule registration order, then emission order
4. Partition rule ids into passed / failed
5. Count issues per severity and compute the score
6. Sort issues for presentation
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import LintReport, SeverityStats
from .scoring import DEFAULT_WEIGHTS, ScoringWeights, compute_score
from ..parser import PRDParser, ParsedPRD
from ..rules.models import LintIssue, PRDLintRule
from ..rules.registry import RuleSet
from ..rules.catalog import default_rules
from ..utils.logger import get_logger

logger = get_logger(__name__)


def presentation_key(issue: LintIssue) -> Tuple[int, int, int]:
    """Sort key: severity rank, then position, spanless issues last."""
    if issue.span is None:
        return (issue.severity.rank, 1, 0)
    return (issue.severity.rank, 0, issue.span.start_offset)


def sort_issues(issues: Iterable[LintIssue]) -> Tuple[LintIssue, ...]:
    """Stable presentation sort; ties keep rule order then emission order."""
    return tuple(sorted(issues, key=presentation_key))


def run_rules(
    prd: ParsedPRD,
    rules: Sequence[PRDLintRule],
    max_workers: Optional[int] = None,
) -> List[Tuple[PRDLintRule, Tuple[LintIssue, ...]]]:
    """
    Run each rule's check against a parsed document.

    Args:
        prd: Parsed document shared by all rules
        rules: Rules in registration order
        max_workers: Run on a thread pool when greater than 1

    Returns:
        (rule, issues) pairs in registration order
    """
    if max_workers is not None and max_workers > 1 and len(rules) > 1:
        logger.debug(f"Running {len(rules)} rules on {max_workers} threads")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outputs = list(executor.map(lambda rule: rule.run(prd), rules))
    else:
        outputs = [rule.run(prd) for rule in rules]
    return list(zip(rules, outputs))


def analyze(
    raw_text: str,
    rules: Optional[Iterable[PRDLintRule]] = None,
    weights: Optional[ScoringWeights] = None,
    max_workers: Optional[int] = None,
) -> LintReport:
    """
    Analyze a PRD and build its report.

    Args:
        raw_text: Document text; never modified
        rules: RuleSet or any iterable of rules (default: all built-in rules)
        weights: Points deducted per severity
        max_workers: Optional thread pool size for rule execution

    Returns:
        LintReport

    Example:
        report = analyze("# Overview\\nBuild a thing.", default_rules())
        report.score      # 100 minus the weights of all issues found
    """
    if rules is None:
        rules = default_rules()
    rule_list = list(rules)
    weights = weights or DEFAULT_WEIGHTS

    prd = PRDParser().parse(raw_text)

    collected: List[LintIssue] = []
    passed: List[str] = []
    failed: List[str] = []
    for rule, issues in run_rules(prd, rule_list, max_workers):
        collected.extend(issues)
        if any(issue.severity.blocks_rule for issue in issues):
            failed.append(rule.id)
        else:
            passed.append(rule.id)

    report = LintReport(
        score=compute_score(collected, weights),
        issues=sort_issues(collected),
        stats=SeverityStats.from_issues(collected),
        passed_rule_ids=tuple(passed),
        failed_rule_ids=tuple(failed),
    )
    logger.debug(
        f"Analyzed {len(raw_text)} chars with {len(rule_list)} rules: "
        f"score={report.score}, issues={len(report.issues)}, failed={len(failed)}"
    )
    return report


class Linter:
    """
    Configured entry point: rule selection and weights come from AppConfig.

    All configuration is validated on construction, so a bad config fails
    before any document is read.

    Example:
        linter = Linter(load_config())
        report = linter.lint(Path("prd.md").read_text())
    """

    def __init__(self, config=None, rules: Optional[RuleSet] = None):
        from ..core.config import AppConfig

        self.config = config or AppConfig()
        rules_config = self.config.rules

        base = rules if rules is not None else default_rules(rules_config.escalation_threshold)
        self.rules = base.filter(
            categories=rules_config.categories or None,
            exclude_categories=rules_config.exclude_categories,
            exclude_ids=rules_config.disabled_rules,
        )
        self.weights = self.config.scoring.to_weights()
        self.max_workers = rules_config.max_workers

        logger.debug(f"Linter ready with {len(self.rules)} rules")

    def lint(self, raw_text: str) -> LintReport:
        return analyze(raw_text, self.rules, self.weights, self.max_workers)
