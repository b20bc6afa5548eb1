"""
Rules module - Independent checks over a parsed PRD.
"""

from .models import (
    RuleConfigurationError,
    Severity,
    Category,
    LintIssue,
    PRDLintRule,
    lint_rule,
)
from .helpers import keyword_rule
from .registry import RuleSet
from .catalog import builtin_rules, default_rules
from .clarity import ambiguous_terms_rule, DEFAULT_ESCALATION_THRESHOLD

__all__ = [
    # Models
    'RuleConfigurationError',
    'Severity',
    'Category',
    'LintIssue',
    'PRDLintRule',
    # Building rules
    'lint_rule',
    'keyword_rule',
    'ambiguous_terms_rule',
    'DEFAULT_ESCALATION_THRESHOLD',
    # Registry
    'RuleSet',
    'builtin_rules',
    'default_rules',
]
