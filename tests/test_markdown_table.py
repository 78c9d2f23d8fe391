"""Unit tests for markdown table parsing."""
from docugen_mcp.editing.markdown_table import (
    fence_markdown_tables,
    is_separator_line,
    parse_markdown_table,
    table_source_lines,
)


class TestParseMarkdownTable:
    """Tests for parse_markdown_table."""

    def test_simple_table(self):
        grid = parse_markdown_table("| A | B |\n|---|---|\n| 1 | 2 |")
        assert grid == [["A", "B"], ["1", "2"]]

    def test_separator_lines_never_become_rows(self):
        text = "\n".join([
            "| Name | Qty |",
            "|:-----|----:|",
            "| Apple | 3 |",
            "| --- | --- |",
            "| Pear | 5 |",
        ])
        grid = parse_markdown_table(text)
        assert grid == [["Name", "Qty"], ["Apple", "3"], ["Pear", "5"]]

    def test_other_lines_are_ignored(self):
        text = "Inventory below\n\n| A | B |\n|---|---|\n| 1 | 2 |\n\nEnd of table"
        grid = parse_markdown_table(text)
        assert len(grid) == 2

    def test_rows_without_outer_pipes(self):
        grid = parse_markdown_table("A | B | C\n--- | --- | ---\n1 | 2 | 3")
        assert grid == [["A", "B", "C"], ["1", "2", "3"]]
        assert all(len(row) == 3 for row in grid)

    def test_empty_cells_collapse(self):
        """Interior empty cells are dropped, shortening the row."""
        grid = parse_markdown_table("| A | | C |")
        assert grid == [["A", "C"]]

    def test_cells_are_trimmed(self):
        grid = parse_markdown_table("|   spaced out   |x|")
        assert grid == [["spaced out", "x"]]

    def test_no_rows(self):
        assert parse_markdown_table("") == []
        assert parse_markdown_table("just text") == []
        assert parse_markdown_table("|---|---|") == []


class TestSeparatorLine:
    """Tests for separator detection."""

    def test_separator_variants(self):
        assert is_separator_line("|---|---|")
        assert is_separator_line("| :--- | :---: | ---: |")
        assert is_separator_line("---|---")

    def test_data_row_is_not_separator(self):
        assert not is_separator_line("| A | B |")
        assert not is_separator_line("|   | B |")
        assert not is_separator_line("| -1 | 2 |")


def test_table_source_lines():
    text = "  intro\n| A | B |  \n|---|---|\n| 1 | 2 |\noutro  "
    assert table_source_lines(text) == ["| A | B |", "|---|---|", "| 1 | 2 |"]


class TestFenceMarkdownTables:
    """Tests for monospace fencing of tables in new documents."""

    def test_table_in_middle(self):
        text = "Title\n| A | B |\n| 1 | 2 |\nAfter"
        assert fence_markdown_tables(text) == "Title\n```\n| A | B |\n| 1 | 2 |\n```\nAfter"

    def test_table_at_end_is_closed(self):
        assert fence_markdown_tables("| A |") == "```\n| A |\n```"

    def test_plain_text_unchanged(self):
        assert fence_markdown_tables("no tables\nhere") == "no tables\nhere"
