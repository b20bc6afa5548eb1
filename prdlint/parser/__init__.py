"""
Parser module - Extract structured facets from PRD documents.
"""

from .models import (
    Facet,
    BoundaryKind,
    Boundaries,
    ParsedPRD,
    Section,
)
from .prd_parser import PRDParser, parse
from .extractors import (
    BaseExtractor,
    UserStoryExtractor,
    BoundaryExtractor,
    FlowExtractor,
    EdgeCaseExtractor,
    classify_boundary,
    split_sections,
)

__all__ = [
    # Models
    'Facet',
    'BoundaryKind',
    'Boundaries',
    'ParsedPRD',
    'Section',
    # Parsers
    'PRDParser',
    'parse',
    # Extractors
    'BaseExtractor',
    'UserStoryExtractor',
    'BoundaryExtractor',
    'FlowExtractor',
    'EdgeCaseExtractor',
    'classify_boundary',
    'split_sections',
]
