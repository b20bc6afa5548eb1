"""
Edge Case Extractor - Extract edge cases from PRD documents.
"""

from typing import List, Optional, Tuple

from .base import BaseExtractor
from ..models import Facet, Section
from ...utils.logger import get_logger

logger = get_logger(__name__)


class EdgeCaseExtractor(BaseExtractor):
    """Extractor for edge-case descriptions listed under "Edge Cases" headings."""

    @property
    def facet(self) -> Facet:
        return Facet.EDGE_CASES

    def extract(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[Tuple[str, ...]]:
        items = self._collect_items(content, sections)
        if items is None:
            return None

        logger.debug(f"Extracted {len(items)} edge cases")
        return tuple(item.text for item in items)
