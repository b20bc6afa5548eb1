"""Unit tests for text position utilities."""

import pytest
from prdlint.utils.text_position import (
    TextSpan,
    find_occurrences,
    is_whole_word,
    line_column,
    locate_all,
    locate_first,
)


class TestLineColumn:
    """Tests for line_column."""

    def test_start_of_document(self):
        assert line_column("abc", 0) == (1, 1)

    def test_middle_of_first_line(self):
        assert line_column("hello world", 6) == (1, 7)

    def test_start_of_second_line(self):
        assert line_column("a\nb", 2) == (2, 1)

    def test_counts_every_newline_before_offset(self):
        content = "one\n\nthree"
        assert line_column(content, content.index("three")) == (3, 1)


class TestLocateAll:
    """Tests for locate_all."""

    def test_two_occurrences_with_positions(self):
        content = "Use etc. here.\nAnd etc. again"
        spans = list(locate_all(content, "etc"))

        assert [s.start_offset for s in spans] == [4, 19]
        assert [(s.line, s.column) for s in spans] == [(1, 5), (2, 5)]
        assert all(s.end_offset == s.start_offset + 3 for s in spans)

    def test_case_insensitive_preserves_original_text(self):
        spans = list(locate_all("ETC and etc", "etc"))
        assert [s.matched_text for s in spans] == ["ETC", "etc"]

    def test_case_sensitive(self):
        spans = list(locate_all("ETC and etc", "etc", case_insensitive=False))
        assert len(spans) == 1
        assert spans[0].start_offset == 8

    def test_non_overlapping(self):
        spans = list(locate_all("aaaa", "aa"))
        assert [s.start_offset for s in spans] == [0, 2]

    def test_empty_term_never_matches(self):
        assert list(locate_all("anything", "")) == []

    def test_empty_content(self):
        assert list(locate_all("", "term")) == []

    def test_term_is_literal_not_regex(self):
        spans = list(locate_all("a.b and axb", "a.b"))
        assert len(spans) == 1
        assert spans[0].matched_text == "a.b"

    def test_is_lazy_and_restartable(self):
        content = "x x x"
        first = locate_all(content, "x")
        assert next(first).start_offset == 0
        # A new call scans from the start again
        assert next(locate_all(content, "x")).start_offset == 0
        assert next(first).start_offset == 2

    def test_span_slices_original_content(self):
        content = "Some Text\nmore TEXT"
        for span in locate_all(content, "text"):
            assert content[span.start_offset:span.end_offset] == span.matched_text


class TestLocateFirst:
    """Tests for locate_first."""

    def test_returns_first_occurrence(self):
        span = locate_first("b a b", "b")
        assert span == TextSpan(0, 1, 1, 1, "b")

    def test_miss_returns_none(self):
        assert locate_first("nothing here", "missing") is None

    def test_empty_term_returns_none(self):
        assert locate_first("content", "") is None


class TestFindOccurrences:
    """Tests for the memoized occurrence lookup."""

    def test_matches_fresh_scan(self):
        content = "Maybe. maybe? MAYBE!"
        assert find_occurrences(content, "maybe") == tuple(locate_all(content, "maybe"))

    def test_repeated_calls_are_equal(self):
        content = "etc etc"
        assert find_occurrences(content, "etc") == find_occurrences(content, "etc")

    def test_case_flag_is_part_of_key(self):
        content = "Etc etc"
        assert len(find_occurrences(content, "etc", True)) == 2
        assert len(find_occurrences(content, "etc", False)) == 1


class TestIsWholeWord:
    """Tests for is_whole_word."""

    @pytest.mark.parametrize("content,expected", [
        ("etc", True),
        ("etc.", True),
        ("(etc)", True),
        ("etcetera", False),
        ("xetc", False),
        ("etc_1", False),
    ])
    def test_boundaries(self, content, expected):
        span = locate_first(content, "etc")
        assert is_whole_word(content, span) is expected
