"""Insertion points for the cells of a freshly inserted table."""
from typing import Any, Optional

from ..utils.constants import TABLE_COLUMN_STRIDE, TABLE_FIRST_CELL_OFFSET, TABLE_ROW_STRIDE
from .markdown_table import TableGrid
from .batch import Request, insert_text_request


def estimate_cell_offset(table_start: int, row: int, col: int) -> int:
    """Guess a cell's insertion index from fixed strides.

    Only reliable for small tables with empty cells; prefer
    find_table_cell_offsets when the document can be re-read.
    """
    return table_start + TABLE_FIRST_CELL_OFFSET + row * TABLE_ROW_STRIDE + col * TABLE_COLUMN_STRIDE


def build_cell_text_requests(grid: TableGrid, table_start: int) -> list[Request]:
    """insertText requests at estimated offsets, one per non-empty cell, row-major.

    The table has as many columns as the first row; extra cells in longer
    rows are dropped.
    """
    columns = len(grid[0]) if grid else 0
    requests = []
    for row_index, row in enumerate(grid):
        for col_index, cell_text in enumerate(row[:columns]):
            if cell_text:
                index = estimate_cell_offset(table_start, row_index, col_index)
                requests.append(insert_text_request(index, cell_text))
    return requests


def find_table_cell_offsets(
    body: dict[str, Any], table_start: int
) -> Optional[list[list[int]]]:
    """Read cell insertion indices from the document structure.

    Finds the first table element starting at or after ``table_start`` and
    returns, per row, the start index of each cell's first paragraph.

    Returns:
        Rows of indices, or None if no table follows ``table_start``.
    """
    for item in body.get('content', []) or []:
        if 'table' not in item or item.get('startIndex', 0) < table_start:
            continue
        offsets = []
        for row in item['table'].get('tableRows', []):
            row_offsets = []
            for cell in row.get('tableCells', []):
                cell_content = cell.get('content', [])
                if cell_content:
                    row_offsets.append(cell_content[0].get('startIndex', cell.get('startIndex', 0)))
                else:
                    row_offsets.append(cell.get('startIndex', 0) + 1)
            offsets.append(row_offsets)
        return offsets
    return None


def build_structural_cell_requests(
    grid: TableGrid, cell_offsets: list[list[int]]
) -> list[Request]:
    """insertText requests at real cell indices, last cell first.

    Filling from the end keeps every earlier index valid while the batch is
    applied. Cells outside the inserted table's shape, or beyond the first
    row's column count, are skipped.
    """
    columns = len(grid[0]) if grid else 0
    placements = []
    for row_index, row in enumerate(grid):
        if row_index >= len(cell_offsets):
            break
        for col_index, cell_text in enumerate(row[:columns]):
            if cell_text and col_index < len(cell_offsets[row_index]):
                placements.append((cell_offsets[row_index][col_index], cell_text))

    placements.sort(key=lambda placement: placement[0], reverse=True)
    return [insert_text_request(index, text) for index, text in placements]
