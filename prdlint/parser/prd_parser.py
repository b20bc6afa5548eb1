"""
PRD Parser - Main orchestrator for parsing PRD documents.

Coordinates the facet extractors to convert raw PRD text into an
immutable ParsedPRD ready for linting.
"""

from typing import Dict

from .models import Facet, ParsedPRD
from .extractors.base import BaseExtractor, split_sections
from .extractors.story_extractor import UserStoryExtractor
from .extractors.boundary_extractor import BoundaryExtractor
from .extractors.flow_extractor import FlowExtractor
from .extractors.edge_case_extractor import EdgeCaseExtractor

from ..utils.logger import get_logger

logger = get_logger(__name__)


class PRDParser:
    """
    PRD parser orchestrating the facet extractors.

    Parses raw PRD text in two stages:
    1. Sectioning by headings (markdown, bold and colon titles)
    2. Facet extraction (user stories, boundaries, flows, edge cases)

    Parsing never raises for string input; text without recognizable
    headings yields a ParsedPRD with every facet absent.
    """

    def __init__(self):
        self._extractors: Dict[Facet, BaseExtractor] = {}
        self._init_extractors()

    def _init_extractors(self) -> None:
        """Initialize all extractors."""
        self._extractors = {
            Facet.USER_STORIES: UserStoryExtractor(),
            Facet.BOUNDARIES: BoundaryExtractor(),
            Facet.FLOWS: FlowExtractor(),
            Facet.EDGE_CASES: EdgeCaseExtractor(),
        }

    def parse(self, prd_content: str) -> ParsedPRD:
        """
        Parse PRD content into a ParsedPRD.

        Args:
            prd_content: Raw PRD text content

        Returns:
            ParsedPRD with the extracted facets
        """
        if not isinstance(prd_content, str):
            raise TypeError(f"PRD content must be str, got {type(prd_content).__name__}")

        sections = split_sections(prd_content)

        facets = {
            facet.value: extractor.extract(prd_content, sections=sections)
            for facet, extractor in self._extractors.items()
            if facet is not Facet.USER_STORIES
        }

        # Stories keep their source spans so rules can point at the item itself
        story_items = self._extractors[Facet.USER_STORIES].extract_items(prd_content, sections)
        if story_items is not None:
            facets[Facet.USER_STORIES.value] = tuple(item.text for item in story_items)
            facets['story_spans'] = tuple(item.span(prd_content) for item in story_items)

        parsed = ParsedPRD(content=prd_content, **facets)
        logger.debug(f"Parsing complete: {parsed.summary()}")
        return parsed


def parse(prd_content: str) -> ParsedPRD:
    """Parse PRD content with a default parser."""
    return PRDParser().parse(prd_content)
