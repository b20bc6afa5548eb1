"""
Text position utilities - locate search terms inside a document.

Maps term occurrences to character offsets and 1-based line/column
coordinates. All functions are pure; a miss is reported as ``None`` (or
an empty iterator), never as an exception.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class TextSpan:
    """A located region of source text."""
    start_offset: int
    end_offset: int
    line: int
    column: int
    matched_text: str

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "line": self.line,
            "column": self.column,
            "matched_text": self.matched_text,
        }


def line_column(content: str, offset: int) -> Tuple[int, int]:
    """
    Compute the 1-based line and column of an offset.

    Args:
        content: Document text
        offset: 0-based character offset

    Returns:
        Tuple of (line, column)
    """
    line = content.count("\n", 0, offset) + 1
    last_newline = content.rfind("\n", 0, offset)
    return line, offset - last_newline


def make_span(content: str, start: int, end: int) -> TextSpan:
    """Build a TextSpan for ``content[start:end]``."""
    line, column = line_column(content, start)
    return TextSpan(
        start_offset=start,
        end_offset=end,
        line=line,
        column=column,
        matched_text=content[start:end],
    )


def _term_pattern(term: str, case_insensitive: bool) -> re.Pattern:
    flags = re.IGNORECASE if case_insensitive else 0
    return re.compile(re.escape(term), flags)


def locate_all(
    content: str,
    term: str,
    case_insensitive: bool = True,
) -> Iterator[TextSpan]:
    """
    Lazily yield every non-overlapping occurrence of ``term``.

    Occurrences are produced left to right; after a match at ``[s, e)``
    scanning resumes at ``e``. Each call scans from the start again.

    Args:
        content: Document text
        term: Literal search term (not a regex)
        case_insensitive: Ignore case when matching

    Yields:
        TextSpan for each occurrence, with ``matched_text`` taken from the
        original content
    """
    if not term or not content:
        return

    # Single-character case folding keeps matches the same length as
    # the term, so offsets always index the original content.
    for match in _term_pattern(term, case_insensitive).finditer(content):
        yield make_span(content, match.start(), match.end())


def locate_first(
    content: str,
    term: str,
    case_insensitive: bool = True,
) -> Optional[TextSpan]:
    """
    Find the first occurrence of ``term``.

    Returns:
        TextSpan or None if the term does not occur
    """
    return next(locate_all(content, term, case_insensitive), None)


def find_occurrences(
    content: str,
    term: str,
    case_insensitive: bool = True,
) -> Tuple[TextSpan, ...]:
    """Every occurrence of ``term`` as a tuple, equal to ``tuple(locate_all(...))``."""
    return tuple(locate_all(content, term, case_insensitive))


def is_whole_word(content: str, span: TextSpan) -> bool:
    """Check that a span is not embedded inside a larger word."""
    before = content[span.start_offset - 1] if span.start_offset > 0 else " "
    after = content[span.end_offset] if span.end_offset < len(content) else " "
    return not _is_word_char(before) and not _is_word_char(after)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"
