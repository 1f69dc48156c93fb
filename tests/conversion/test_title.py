"""Tests for title derivation."""
import pytest

from notes2md.conversion.title import derive_title, first_content_line


class TestFirstContentLine:
    """Test selection of the line a title is derived from."""

    def test_skips_blank_lines(self):
        """Test leading blank and whitespace-only lines are skipped."""
        assert first_content_line("\n   \n\t\nFirst real line\nSecond") == "First real line"

    def test_empty_content(self):
        """Test content without any text yields an empty line."""
        assert first_content_line("") == ""
        assert first_content_line("  \n \n") == ""


class TestDeriveTitle:
    """Test deriving titles from note content."""

    def test_markdown_heading_with_link(self):
        """Test emphasis, heading and link syntax is removed."""
        content = "# ~ _ * ![`Test Code Markdown Document`](http://google.com) * _ ~ "
        assert derive_title(content) == "Test Code Markdown Document"

    def test_clean_title_unchanged(self):
        """Test a title without markup is kept as-is."""
        content = "A plain title\n\nSome body text."
        assert derive_title(content) == "A plain title"
        assert derive_title(derive_title(content)) == "A plain title"

    def test_trims_surrounding_whitespace(self):
        """Test surrounding whitespace is trimmed."""
        assert derive_title("   Spaced out title   \nbody") == "Spaced out title"

    def test_strips_leading_dots(self):
        """Test leading dots and spaces are removed."""
        assert derive_title(". .. .hidden thoughts") == "hidden thoughts"

    def test_inline_link_keeps_text(self):
        """Test only the destination of an inline link is dropped."""
        assert derive_title("[Example](http://example.com) and more") == "Example and more"

    def test_removes_quotes_and_backticks(self):
        """Test quote characters are removed without replacement."""
        assert derive_title("\"Quoted\" 'single' `code`") == "Quoted single code"

    def test_crlf_content(self):
        """Test carriage returns do not leak into the title."""
        assert derive_title("Windows title\r\nbody\r\n") == "Windows title"

    def test_punctuation_only_line_gives_empty_title(self):
        """Test a first line made only of markup yields an empty title."""
        assert derive_title("#### \nReal content below") == ""
        assert derive_title("!!!") == ""

    def test_empty_content(self):
        """Test empty content yields an empty title."""
        assert derive_title("") == ""

    def test_truncates_to_200_characters(self):
        """Test long titles are cut to 200 characters."""
        assert len(derive_title("x" * 250)) == 200

    def test_truncation_counts_characters(self):
        """Test truncation counts characters rather than bytes."""
        title = derive_title("é" * 250)
        assert title == "é" * 200

    @pytest.mark.parametrize("max_length,expected", [(5, "Short"), (50, "Short title")])
    def test_custom_max_length(self, max_length, expected):
        """Test an explicit maximum length."""
        assert derive_title("Short title", max_length=max_length) == expected
