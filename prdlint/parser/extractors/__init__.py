"""
PRD Extractors - Facet extractors for parsing PRD documents.

Each extractor handles a specific facet:
- UserStoryExtractor: User stories
- BoundaryExtractor: Hard and soft boundaries
- FlowExtractor: Flow steps
- EdgeCaseExtractor: Edge cases
"""

from .base import BaseExtractor, ListItem, parse_heading, split_sections
from .story_extractor import UserStoryExtractor
from .boundary_extractor import BoundaryExtractor, classify_boundary
from .flow_extractor import FlowExtractor
from .edge_case_extractor import EdgeCaseExtractor

__all__ = [
    'BaseExtractor',
    'ListItem',
    'parse_heading',
    'split_sections',
    'UserStoryExtractor',
    'BoundaryExtractor',
    'classify_boundary',
    'FlowExtractor',
    'EdgeCaseExtractor',
]
