"""
Flow Extractor - Extract user flows from PRD documents.

Flows are the numbered steps (or bullets) listed under any heading
containing "flow", e.g. "## User Flow" or "### Checkout Flow".
"""

from typing import List, Optional, Tuple

from .base import BaseExtractor
from ..models import Facet, Section
from ...utils.logger import get_logger

logger = get_logger(__name__)


class FlowExtractor(BaseExtractor):
    """Extractor for flow descriptions."""

    @property
    def facet(self) -> Facet:
        return Facet.FLOWS

    def extract(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[Tuple[str, ...]]:
        items = self._collect_items(content, sections)
        if items is None:
            return None

        logger.debug(f"Extracted {len(items)} flow steps")
        return tuple(item.text for item in items)
