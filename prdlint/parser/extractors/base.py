"""
Base Extractor - Abstract base class for PRD facet extractors.

All extractors inherit from this class and implement the extract method
for their specific facet (user stories, boundaries, flows, edge cases).
Sectioning is purely textual: markdown ATX headings, whole-line bold
titles and short ``Title:`` lines are recognized; no markdown AST is built.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional

from ..models import Facet, Section
from ...utils.logger import get_logger
from ...utils.text_position import TextSpan, make_span

logger = get_logger(__name__)

# Pseudo-headings (bold or colon titles) rank below every markdown level
PSEUDO_HEADING_LEVEL = 7

_ATX_HEADING = re.compile(r'^ {0,3}(#{1,6})[ \t]+(.*?)[ \t]*#*[ \t]*$')
_BOLD_HEADING = re.compile(r'^\s*\*\*([^*\n]+?)\*\*\s*:?\s*$')
_COLON_HEADING = re.compile(r"^\s*([A-Za-z][A-Za-z0-9 /&()'\-]{0,60}):\s*$")
_FENCE = re.compile(r'^\s*(```|~~~)')

_BULLET_ITEM = re.compile(r'^(\s*)(?:[-*+•])\s+(.*)$')
_NUMBERED_ITEM = re.compile(r'^(\s*)\d{1,3}[.)]\s+(.*)$')
_CHECKBOX = re.compile(r'^\[[ xX]\]\s*')


class ListItem(NamedTuple):
    """
    A list item or paragraph line pulled out of a section.

    ``start``/``end`` delimit the raw item in the document, from just after
    the bullet marker to the end of its last continuation line. ``text``
    is the cleaned form and may not occur verbatim in the source.
    """
    text: str
    context: Optional[str]  # title of the closest sub-heading, if any
    start: int
    end: int

    def span(self, content: str) -> TextSpan:
        return make_span(content, self.start, self.end)


class BaseExtractor(ABC):
    """
    Abstract base class for PRD facet extractors.

    Each extractor is responsible for a single facet. Extractors return
    ``None`` when no heading for their facet exists, so callers can tell
    an absent section apart from an empty one.
    """

    @property
    @abstractmethod
    def facet(self) -> Facet:
        """Facet this extractor handles."""
        pass

    @abstractmethod
    def extract(self, content: str, sections: Optional[List[Section]] = None) -> Any:
        """
        Extract the facet from PRD content.

        Args:
            content: Raw PRD text content
            sections: Pre-computed sections (computed from content if None)

        Returns:
            Facet value, or None when the facet's heading is absent
        """
        pass

    def _facet_sections(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[List[Section]]:
        """
        Find the outermost sections whose heading names this facet.

        Returns:
            Matching sections in document order, or None if there are none
        """
        if sections is None:
            sections = split_sections(content)

        accepted: List[Section] = []
        for section in sections:
            if not section.matches(self.facet):
                continue
            if any(parent.contains(section) for parent in accepted):
                continue
            accepted.append(section)

        if not accepted:
            return None
        return accepted

    def _section_items(self, content: str, section: Section) -> List[ListItem]:
        """
        Extract items from a section body.

        List items (bullets or numbers) win; when a section holds no list
        at all, each non-empty paragraph line becomes an item. Lines under
        a sub-heading that names a different facet are skipped.
        """
        list_items: List[List[Any]] = []  # [text, context, start, end]
        paragraph_items: List[ListItem] = []
        context: Optional[str] = None
        skipping = False
        in_fence = False
        offset = section.body_start

        for line in content[section.body_start:section.end_offset].split('\n'):
            line_start = offset
            offset += len(line) + 1
            line_end = line_start + len(line.rstrip())

            if _FENCE.match(line):
                in_fence = not in_fence
                continue
            if in_fence:
                continue

            heading = parse_heading(line)
            if heading is not None:
                context = heading[1]
                skipping = self._belongs_to_other_facet(context)
                continue
            if skipping:
                continue

            item_match = _BULLET_ITEM.match(line) or _NUMBERED_ITEM.match(line)
            if item_match:
                text = self._clean_text(item_match.group(2))
                if text:
                    list_items.append([text, context, line_start + item_match.start(2), line_end])
                continue

            stripped = line.strip()
            if not stripped:
                continue

            if list_items and line[:1].isspace():
                # Indented continuation of the previous list item
                list_items[-1][0] = f"{list_items[-1][0]} {self._clean_text(stripped)}".strip()
                list_items[-1][3] = line_end
                continue

            text = self._clean_text(stripped)
            if text:
                indent = len(line) - len(line.lstrip())
                paragraph_items.append(ListItem(text, context, line_start + indent, line_end))

        if list_items:
            return [ListItem(*item) for item in list_items]
        return paragraph_items

    def _collect_items(
        self,
        content: str,
        sections: Optional[List[Section]] = None,
    ) -> Optional[List[ListItem]]:
        """
        Items of every section for this facet, deduplicated by text.

        Returns:
            Items in document order, or None if the facet's heading is absent
        """
        found = self._facet_sections(content, sections)
        if found is None:
            return None

        items: List[ListItem] = []
        seen = set()
        for section in found:
            for item in self._section_items(content, section):
                if item.text not in seen:
                    seen.add(item.text)
                    items.append(item)
        return items

    def _belongs_to_other_facet(self, title: str) -> bool:
        lowered = title.lower()
        mine = any(k in lowered for k in self.facet.heading_keywords)
        other = any(
            k in lowered
            for facet in Facet if facet is not self.facet
            for k in facet.heading_keywords
        )
        return other and not mine

    def _clean_text(self, text: str) -> str:
        """
        Clean extracted text.

        Args:
            text: Raw extracted text

        Returns:
            Text without checkbox markers, emphasis or excess whitespace
        """
        text = _CHECKBOX.sub('', text.strip())
        text = re.sub(r'\*{1,3}|_{2,3}', '', text)
        text = re.sub(r'\s{2,}', ' ', text)
        return text.strip()

    def _unique(self, items: List[str]) -> tuple:
        """Drop duplicates while keeping first-seen order."""
        seen = set()
        out = []
        for item in items:
            if item not in seen:
                seen.add(item)
                out.append(item)
        return tuple(out)


def parse_heading(line: str) -> Optional[tuple]:
    """
    Recognize a heading line.

    Returns:
        Tuple of (level, title) or None if the line is not a heading
    """
    match = _ATX_HEADING.match(line)
    if match:
        title = match.group(2).strip()
        if not title:
            return None
        return len(match.group(1)), title

    match = _BOLD_HEADING.match(line)
    if match:
        return PSEUDO_HEADING_LEVEL, match.group(1).strip().rstrip(':').strip()

    match = _COLON_HEADING.match(line)
    if match:
        return PSEUDO_HEADING_LEVEL, match.group(1).strip()

    return None


def split_sections(content: str) -> List[Section]:
    """
    Split a document into heading-delimited sections.

    A section runs from its heading to the next heading of the same or a
    higher level. Headings inside fenced code blocks are ignored.

    Args:
        content: Raw PRD text

    Returns:
        Sections in document order (possibly nested)
    """
    headings = []  # (level, title, line_start, body_start)
    offset = 0
    in_fence = False

    for line in content.split('\n'):
        line_start = offset
        offset += len(line) + 1

        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = parse_heading(line)
        if heading is not None:
            level, title = heading
            headings.append((level, title, line_start, min(offset, len(content))))

    sections = []
    for index, (level, title, start, body_start) in enumerate(headings):
        end = len(content)
        for next_level, _, next_start, _ in headings[index + 1:]:
            if next_level <= level:
                end = next_start
                break
        sections.append(Section(
            title=title,
            level=level,
            start_offset=start,
            body_start=body_start,
            end_offset=end,
        ))

    logger.debug(f"Found {len(sections)} sections")
    return sections
