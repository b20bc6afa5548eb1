"""
User Story Extractor - Extract user stories from PRD documents.

Stories are the items listed under any heading containing "user stor"
(e.g. "## User Stories", "**User story:**").
"""

from typing import List, Optional, Tuple

from .base import BaseExtractor, ListItem
from ..models import Facet, Section
from ...utils.logger import get_logger

logger = get_logger(__name__)


class UserStoryExtractor(BaseExtractor):
    """Extractor for user stories."""

    @property
    def facet(self) -> Facet:
        return Facet.USER_STORIES

    def extract(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[Tuple[str, ...]]:
        """
        Extract user stories from PRD content.

        Args:
            content: Raw PRD text
            sections: Pre-computed sections

        Returns:
            Tuple of story strings, or None if there is no stories heading
        """
        items = self.extract_items(content, sections)
        if items is None:
            return None
        return tuple(item.text for item in items)

    def extract_items(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[List[ListItem]]:
        """Stories with their source positions, or None if there is no stories heading."""
        items = self._collect_items(content, sections)
        if items is not None:
            logger.debug(f"Extracted {len(items)} user stories")
        return items
