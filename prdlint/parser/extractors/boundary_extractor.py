"""
Boundary Extractor - Extract hard and soft constraints from PRD documents.

Items under a heading containing "boundar" are filed as:
- hard: under a "Hard ..." sub-heading, or phrased with binding modals
  (must, never, shall, cannot, ...) in the item or its lead-in line
- soft: under a "Soft ..." sub-heading, or phrased with advisory modals
  (should, prefer, ideally, ...) in the item or its lead-in line

Items that match neither are dropped rather than misfiled.
"""

import re
from typing import List, Optional

from .base import BaseExtractor
from ..models import Boundaries, BoundaryKind, Facet, Section
from ...utils.logger import get_logger

logger = get_logger(__name__)

HARD_MODALS = re.compile(
    r"\b(?:must|never|shall|always|cannot|can't|can not|will not|won't|"
    r"required|mandatory|prohibited|forbidden|not allowed|under no circumstances)\b",
    re.IGNORECASE,
)

SOFT_MODALS = re.compile(
    r"\b(?:should|shouldn't|prefer|preferably|preferred|ideally|may|might|"
    r"recommended|avoid|try to|where possible|if possible)\b",
    re.IGNORECASE,
)

_HARD_CONTEXT = re.compile(r'\bhard\b', re.IGNORECASE)
_SOFT_CONTEXT = re.compile(r'\bsoft\b', re.IGNORECASE)


def classify_boundary(text: str, context: Optional[str] = None) -> Optional[BoundaryKind]:
    """
    Classify a boundary item as hard or soft.

    A "hard"/"soft" sub-heading decides first, then the item's own modal
    verbs, then modal verbs in a lead-in such as "The service must:".

    Args:
        text: Item text
        context: Title of the enclosing (sub-)heading

    Returns:
        BoundaryKind, or None when the item cannot be classified
    """
    if context:
        if _HARD_CONTEXT.search(context):
            return BoundaryKind.HARD
        if _SOFT_CONTEXT.search(context):
            return BoundaryKind.SOFT

    for source in (text, context):
        if not source:
            continue
        if HARD_MODALS.search(source):
            return BoundaryKind.HARD
        if SOFT_MODALS.search(source):
            return BoundaryKind.SOFT
    return None


class BoundaryExtractor(BaseExtractor):
    """Extractor for hard/soft boundaries."""

    @property
    def facet(self) -> Facet:
        return Facet.BOUNDARIES

    def extract(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[Boundaries]:
        """
        Extract boundaries from PRD content.

        Args:
            content: Raw PRD text
            sections: Pre-computed sections

        Returns:
            Boundaries, or None if there is no boundaries heading
        """
        found = self._facet_sections(content, sections)
        if found is None:
            return None

        hard: List[str] = []
        soft: List[str] = []
        dropped = 0

        for section in found:
            for item in self._section_items(content, section):
                kind = classify_boundary(item.text, item.context or section.title)
                if kind is BoundaryKind.HARD:
                    hard.append(item.text)
                elif kind is BoundaryKind.SOFT:
                    soft.append(item.text)
                else:
                    dropped += 1

        if dropped:
            logger.debug(f"Dropped {dropped} unclassifiable boundary item(s)")

        return Boundaries(hard=self._unique(hard), soft=self._unique(soft))
