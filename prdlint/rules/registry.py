"""
Rule Registry - An explicit, ordered, validated collection of rules.

There is no global registry: callers build a RuleSet and pass it to the
aggregator. Registration order is the order rules run in and the order
rule ids appear in a report.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import Category, PRDLintRule, RuleConfigurationError, Severity
from ..utils.logger import get_logger

logger = get_logger(__name__)


class RuleSet:
    """
    Ordered registry of PRDLintRule values.

    Construction validates every rule and fails fast with
    RuleConfigurationError, so a malformed set never reaches a document.

    Example:
        rules = RuleSet([requires_user_stories, has_error_handling])
        ux_only = rules.filter(categories=["ux"])
    """

    def __init__(self, rules: Iterable[PRDLintRule] = ()):
        self._rules: List[PRDLintRule] = []
        self._by_id: Dict[str, PRDLintRule] = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule: PRDLintRule) -> None:
        """
        Append a rule after validating it.

        Raises:
            RuleConfigurationError: Duplicate id, unknown category or
                severity, or a check that is not callable
        """
        if not isinstance(rule, PRDLintRule):
            raise RuleConfigurationError(f"Not a PRDLintRule: {rule!r}")
        if not rule.id or not isinstance(rule.id, str):
            raise RuleConfigurationError(f"Rule id must be a non-empty string, got {rule.id!r}")
        if rule.id in self._by_id:
            raise RuleConfigurationError(f"Duplicate rule id: {rule.id}")
        if not isinstance(rule.category, Category):
            raise RuleConfigurationError(f"Rule {rule.id} has unknown category: {rule.category!r}")
        if not isinstance(rule.severity, Severity):
            raise RuleConfigurationError(f"Rule {rule.id} has unknown severity: {rule.severity!r}")
        if not callable(rule.check):
            raise RuleConfigurationError(f"Rule {rule.id} has a non-callable check")

        self._rules.append(rule)
        self._by_id[rule.id] = rule

    def __iter__(self) -> Iterator[PRDLintRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"

    @property
    def ids(self) -> Tuple[str, ...]:
        """Rule ids in registration order."""
        return tuple(rule.id for rule in self._rules)

    def get(self, rule_id: str) -> Optional[PRDLintRule]:
        return self._by_id.get(rule_id)

    def by_category(self, category) -> List[PRDLintRule]:
        """Rules of one category, in registration order."""
        if not isinstance(category, Category):
            category = Category.from_string(category)
        return [rule for rule in self._rules if rule.category is category]

    def filter(
        self,
        categories: Optional[Iterable] = None,
        exclude_categories: Iterable = (),
        exclude_ids: Iterable[str] = (),
    ) -> 'RuleSet':
        """
        Build a narrower RuleSet, preserving order.

        Args:
            categories: Keep only these categories (None keeps all)
            exclude_categories: Drop these categories
            exclude_ids: Drop these rule ids

        Returns:
            A new RuleSet; this one is left untouched

        Raises:
            RuleConfigurationError: Unknown category name or rule id
        """
        keep = None
        if categories is not None:
            keep = {_as_category(c) for c in categories}
        drop = {_as_category(c) for c in exclude_categories}

        dropped_ids = set(exclude_ids)
        unknown = sorted(dropped_ids - set(self._by_id))
        if unknown:
            raise RuleConfigurationError(f"Unknown rule id(s): {', '.join(unknown)}")

        selected = [
            rule for rule in self._rules
            if (keep is None or rule.category in keep)
            and rule.category not in drop
            and rule.id not in dropped_ids
        ]
        logger.debug(f"Filtered rules: {len(selected)}/{len(self._rules)} kept")
        return RuleSet(selected)


def _as_category(value) -> Category:
    if isinstance(value, Category):
        return value
    return Category.from_string(value)
