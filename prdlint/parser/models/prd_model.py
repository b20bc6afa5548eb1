"""
PRD Data Models - Structured representation of parsed PRD documents.

These models are the intermediate format between raw PRD text and the
lint rules. A facet is ``None`` when the document has no heading for it,
and an empty tuple when the heading exists but nothing was written under it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ...utils.text_position import TextSpan, find_occurrences


class Facet(Enum):
    """Structured aspects extracted from a PRD."""
    USER_STORIES = "user_stories"
    BOUNDARIES = "boundaries"
    FLOWS = "flows"
    EDGE_CASES = "edge_cases"

    @property
    def heading_keywords(self) -> Tuple[str, ...]:
        """Lower-case fragments that identify this facet in a heading."""
        return _FACET_KEYWORDS[self]


_FACET_KEYWORDS = {
    Facet.USER_STORIES: ("user stor",),
    Facet.BOUNDARIES: ("boundar",),
    Facet.FLOWS: ("flow",),
    Facet.EDGE_CASES: ("edge case",),
}


class BoundaryKind(Enum):
    """Constraint strength of a boundary item."""
    HARD = "hard"   # must / never
    SOFT = "soft"   # should / prefer


@dataclass(frozen=True)
class Boundaries:
    """Hard and soft constraints, each ordered and free of duplicates."""
    hard: Tuple[str, ...] = ()
    soft: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.hard and not self.soft

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hard": list(self.hard),
            "soft": list(self.soft),
        }


@dataclass(frozen=True)
class ParsedPRD:
    """
    Immutable snapshot derived from a raw PRD document.

    This is the output of the parsing phase and the only input to lint
    rules. ``content`` is kept verbatim for position lookups.
    ``story_spans`` runs parallel to ``user_stories`` and holds each
    story's raw source span. Occurrence lookups are memoized on the
    instance, so the memo is dropped together with the document.
    """
    content: str
    user_stories: Optional[Tuple[str, ...]] = None
    boundaries: Optional[Boundaries] = None
    flows: Optional[Tuple[str, ...]] = None
    edge_cases: Optional[Tuple[str, ...]] = None
    story_spans: Optional[Tuple[TextSpan, ...]] = field(default=None, repr=False, compare=False)
    _occurrence_memo: Dict[Tuple[str, bool], Tuple[TextSpan, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False,
    )

    def occurrences(self, term: str, case_insensitive: bool = True) -> Tuple[TextSpan, ...]:
        """All non-overlapping occurrences of ``term`` in the content."""
        key = (term, case_insensitive)
        spans = self._occurrence_memo.get(key)
        if spans is None:
            spans = find_occurrences(self.content, term, case_insensitive)
            self._occurrence_memo[key] = spans
        return spans

    def story_span(self, index: int) -> Optional[TextSpan]:
        """Source span of the ``index``-th user story, if recorded."""
        if self.story_spans is None or index >= len(self.story_spans):
            return None
        return self.story_spans[index]

    def mentions_any(self, keywords) -> bool:
        """Whether any keyword occurs anywhere in the content (case-insensitive)."""
        return any(self.occurrences(keyword) for keyword in keywords)

    def get_facet(self, facet: Facet):
        """Return the value of a facet by enum."""
        return getattr(self, facet.value)

    @property
    def present_facets(self) -> List[Facet]:
        """Facets for which a section heading was found."""
        return [f for f in Facet if self.get_facet(f) is not None]

    def summary(self) -> str:
        """Get a one-line summary for logging."""
        def describe(value) -> str:
            if value is None:
                return "absent"
            if isinstance(value, Boundaries):
                return f"{len(value.hard)} hard/{len(value.soft)} soft"
            return str(len(value))

        return (
            f"ParsedPRD(chars={len(self.content)}, "
            f"stories={describe(self.user_stories)}, "
            f"boundaries={describe(self.boundaries)}, "
            f"flows={describe(self.flows)}, "
            f"edge_cases={describe(self.edge_cases)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_stories": list(self.user_stories) if self.user_stories is not None else None,
            "boundaries": self.boundaries.to_dict() if self.boundaries is not None else None,
            "flows": list(self.flows) if self.flows is not None else None,
            "edge_cases": list(self.edge_cases) if self.edge_cases is not None else None,
        }


@dataclass(frozen=True)
class Section:
    """A heading-delimited slice of the document."""
    title: str
    level: int
    start_offset: int       # offset of the heading line
    body_start: int         # offset just after the heading line
    end_offset: int

    def contains(self, other: 'Section') -> bool:
        """Whether ``other`` lies strictly inside this section."""
        return (
            other is not self
            and self.start_offset <= other.start_offset
            and other.end_offset <= self.end_offset
        )

    def matches(self, facet: Facet) -> bool:
        title = self.title.lower()
        return any(keyword in title for keyword in facet.heading_keywords)
