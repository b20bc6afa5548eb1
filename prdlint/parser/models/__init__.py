"""
PRD Models - Data structures for parsed PRD documents.
"""

from .prd_model import (
    Facet,
    BoundaryKind,
    Boundaries,
    ParsedPRD,
    Section,
)

__all__ = [
    'Facet',
    'BoundaryKind',
    'Boundaries',
    'ParsedPRD',
    'Section',
]
