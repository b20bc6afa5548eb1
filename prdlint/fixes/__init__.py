"""
Fixes module - Template-based repair of missing PRD sections.
"""

from .auto_fixer import AutoFixer, FixResult
from .templates import FIX_TEMPLATES

__all__ = [
    'AutoFixer',
    'FixResult',
    'FIX_TEMPLATES',
]
