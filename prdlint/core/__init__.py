"""
Core module - Configuration.
"""

from .config import (
    AppConfig,
    ScoringConfig,
    RulesConfig,
    OutputConfig,
    LoggingConfig,
    OutputFormat,
    get_default_config,
    load_config,
)

__all__ = [
    # Config classes
    'AppConfig',
    'ScoringConfig',
    'RulesConfig',
    'OutputConfig',
    'LoggingConfig',
    # Config enums
    'OutputFormat',
    # Config functions
    'get_default_config',
    'load_config',
]
