"""
Report module - Aggregate rule output into a scored report.
"""

from .models import LintReport, SeverityStats
from .scoring import (
    ScoringWeights,
    DEFAULT_WEIGHTS,
    CATEGORY_WEIGHTS,
    compute_score,
    grade,
    is_production_ready,
    category_scores,
    category_feedback,
    estimate_time_to_fix,
    score_message,
)
from .aggregator import analyze, run_rules, sort_issues, Linter

__all__ = [
    # Models
    'LintReport',
    'SeverityStats',
    # Scoring
    'ScoringWeights',
    'DEFAULT_WEIGHTS',
    'CATEGORY_WEIGHTS',
    'compute_score',
    'grade',
    'is_production_ready',
    'category_scores',
    'category_feedback',
    'estimate_time_to_fix',
    'score_message',
    # Aggregation
    'analyze',
    'run_rules',
    'sort_issues',
    'Linter',
]
