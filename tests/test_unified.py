"""Tests for describe.git.unified module."""

import pytest

from describe.git.models import LineKind
from describe.git.unified import build_hunk, split_lines, unified_diff


class TestSplitLines:
    """Tests for the newline-as-terminator splitting rule."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\nb", ["a", "b"]),
            ("a\nb\n", ["a", "b"]),
            ("a\n\n", ["a", ""]),
            ("\n", [""]),
            ("a\r\nb\r\n", ["a\r", "b\r"]),
        ],
    )
    def test_split(self, text, expected):
        """Test that a trailing newline closes the last line."""
        assert split_lines(text) == expected


class TestUnifiedDiff:
    """Tests for unified_diff."""

    @pytest.mark.parametrize("text", ["", "x\n", "a\nb\nc\n", "no newline", "\n\n\n"])
    def test_identical_content_has_no_hunk(self, text):
        """Test that equal inputs produce no output."""
        assert unified_diff(text, text) == ""

    def test_added_file(self):
        """Test diff from empty content."""
        assert unified_diff("", "x\ny\n") == "@@ -1,0 +1,2 @@\n+x\n+y\n"

    def test_deleted_file(self):
        """Test diff to empty content."""
        assert unified_diff("x\n", "") == "@@ -1,1 +1,0 @@\n-x\n"

    def test_single_line_change(self):
        """Test a one-line file changed in place has no context."""
        assert unified_diff("x\n", "y\n") == "@@ -1,1 +1,1 @@\n-x\n+y\n"

    def test_context_is_clipped_to_three_lines(self):
        """Test that at most three context lines surround the change."""
        old = "".join(f"{i}\n" for i in range(1, 11))
        new = old.replace("5\n", "five\n")

        result = unified_diff(old, new)

        assert result == (
            "@@ -2,7 +2,7 @@\n"
            " 2\n"
            " 3\n"
            " 4\n"
            "-5\n"
            "+five\n"
            " 6\n"
            " 7\n"
            " 8\n"
        )

    def test_context_near_file_start(self):
        """Test that leading context is clipped at the first line."""
        result = unified_diff("a\nb\nc\nd\ne\n", "a\nB\nc\nd\ne\n")

        assert result.startswith("@@ -1,5 +1,5 @@\n a\n-b\n+B\n")
        assert result.endswith(" c\n d\n e\n")

    def test_insertion_between_lines(self):
        """Test a pure insertion keeps surrounding context."""
        result = unified_diff("a\nc\n", "a\nb\nc\n")

        assert result == "@@ -1,2 +1,3 @@\n a\n+b\n c\n"

    def test_removed_lines_come_before_added(self):
        """Test the ordering of removed and added blocks."""
        result = unified_diff("a\nold1\nold2\nz\n", "a\nnew1\nz\n")

        assert result == "@@ -1,4 +1,3 @@\n a\n-old1\n-old2\n+new1\n z\n"

    def test_repeated_lines_are_not_minimized(self):
        """Test that a moved line rewrites the whole window."""
        result = unified_diff("x\na\nb\nc\n", "a\nb\nc\nx\n")

        assert result == "@@ -1,4 +1,4 @@\n-x\n-a\n-b\n-c\n+a\n+b\n+c\n+x\n"

    def test_suffix_does_not_overlap_prefix(self):
        """Test that a shared line is counted once as prefix, not again as suffix."""
        result = unified_diff("a\na\n", "a\n")

        assert result == "@@ -1,2 +1,1 @@\n a\n-a\n"

    def test_missing_final_newline_is_not_a_change(self):
        """Test that only the final newline differing yields no hunk."""
        assert unified_diff("a\nb", "a\nb\n") == ""

    def test_crlf_change_is_visible(self):
        """Test that carriage returns are part of the line."""
        assert unified_diff("a\r\n", "a\n") == "@@ -1,1 +1,1 @@\n-a\r\n+a\n"

    def test_blank_line_appended(self):
        """Test that an added empty line shows as a bare '+'."""
        assert unified_diff("a\n", "a\n\n") == "@@ -1,1 +1,2 @@\n a\n+\n"


class TestBuildHunk:
    """Tests for build_hunk."""

    def test_returns_none_when_equal(self):
        """Test that equal sequences have no hunk."""
        assert build_hunk(["a", "b"], ["a", "b"]) is None

    def test_hunk_fields(self):
        """Test starts, counts and tagged lines."""
        hunk = build_hunk(["a", "b", "c"], ["a", "x", "c"])

        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 3, 1, 3)
        assert [line.kind for line in hunk.lines] == [
            LineKind.CONTEXT,
            LineKind.REMOVED,
            LineKind.ADDED,
            LineKind.CONTEXT,
        ]
        assert [line.text for line in hunk.lines] == ["a", "b", "x", "c"]

    def test_custom_context(self):
        """Test a narrower context window."""
        hunk = build_hunk(["1", "2", "3", "4", "5"], ["1", "2", "X", "4", "5"], context=1)

        assert hunk.header == "@@ -2,3 +2,3 @@"
        assert [line.text for line in hunk.lines] == ["2", "3", "X", "4"]
