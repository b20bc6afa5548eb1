"""
Built-in rule catalog.
"""

from typing import List

from .ai_native import AI_NATIVE_RULES
from .clarity import CLARITY_RULES, DEFAULT_ESCALATION_THRESHOLD, ambiguous_terms_rule
from .completeness import COMPLETENESS_RULES
from .models import PRDLintRule
from .registry import RuleSet
from .security import SECURITY_RULES
from .technical import TECHNICAL_RULES
from .ux import UX_RULES


def builtin_rules() -> List[PRDLintRule]:
    """All built-in rules in their canonical order."""
    return [
        *COMPLETENESS_RULES,
        *CLARITY_RULES,
        *TECHNICAL_RULES,
        *UX_RULES,
        *SECURITY_RULES,
        *AI_NATIVE_RULES,
    ]


def default_rules(escalation_threshold: int = DEFAULT_ESCALATION_THRESHOLD) -> RuleSet:
    """
    Build a fresh RuleSet of every built-in rule.

    Args:
        escalation_threshold: Occurrence count above which an ambiguous
            term is reported as an error

    Returns:
        A new RuleSet; callers may filter or extend it freely
    """
    rules = builtin_rules()
    if escalation_threshold != DEFAULT_ESCALATION_THRESHOLD:
        rules = [
            ambiguous_terms_rule(escalation_threshold) if rule.id == "no-ambiguous-terms" else rule
            for rule in rules
        ]
    return RuleSet(rules)
