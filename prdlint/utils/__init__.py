"""
Utilities module - Common helper functions and classes.
"""

from .text_position import (
    TextSpan,
    line_column,
    make_span,
    locate_first,
    locate_all,
    find_occurrences,
    is_whole_word,
)
from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
    log_json,
)

__all__ = [
    # Text positions
    'TextSpan',
    'line_column',
    'make_span',
    'locate_first',
    'locate_all',
    'find_occurrences',
    'is_whole_word',
    # Logging
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
    'log_json',
]
