"""Markdown table parsing.

Only lines containing a pipe are treated as table rows. Separator lines
(``|---|:--:|``) are skipped, and empty cells are dropped, so ``| A | | C |``
parses as two cells.
"""
import re

from ..utils.constants import CODE_FENCE

TableGrid = list[list[str]]

SEPARATOR_PATTERN = re.compile(r'[\s|:\-]+')


def is_table_line(line: str) -> bool:
    return '|' in line


def is_separator_line(line: str) -> bool:
    """True for header/body ruling lines made only of ``|``, ``-``, ``:`` and spaces."""
    return bool(SEPARATOR_PATTERN.fullmatch(line))


def split_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split('|') if cell.strip()]


def parse_markdown_table(text: str) -> TableGrid:
    """Parse markdown table text into rows of cell strings.

    Args:
        text: Raw markdown, possibly with prose around the table.

    Returns:
        The grid; empty if no row survives.
    """
    rows = []
    for line in text.strip().split('\n'):
        if not is_table_line(line) or is_separator_line(line):
            continue
        cells = split_cells(line)
        if cells:
            rows.append(cells)
    return rows


def table_source_lines(text: str) -> list[str]:
    """Return the stripped table lines of ``text``, separators included."""
    return [line.strip() for line in text.strip().split('\n') if is_table_line(line)]


def fence_markdown_tables(text: str) -> str:
    """Wrap every run of table lines in code fences so it renders monospace."""
    output = []
    in_table = False

    for line in text.split('\n'):
        if is_table_line(line):
            if not in_table:
                in_table = True
                output.append(CODE_FENCE)
            output.append(line)
        else:
            if in_table:
                in_table = False
                output.append(CODE_FENCE)
            output.append(line)

    if in_table:
        output.append(CODE_FENCE)

    return '\n'.join(output)
