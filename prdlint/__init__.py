"""
prdlint - Rule-based quality diagnostics for product requirement documents.

Main modules:
- parser: Segment a PRD into facets (user stories, boundaries, flows, edge cases)
- rules: Independent checks over a parsed PRD and the RuleSet registry
- report: Run rules, score the result and build a LintReport
- fixes: Append template sections for missing content
- core: Configuration
- cli: Command-line interface
"""

from .report import analyze, Linter, LintReport
from .rules import default_rules, RuleSet

__version__ = "1.0.0"

__all__ = [
    'analyze',
    'Linter',
    'LintReport',
    'default_rules',
    'RuleSet',
    '__version__',
]
