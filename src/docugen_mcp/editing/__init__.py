"""Offset-based editing helpers for Google Docs.

Turns a document body into text spans, locates text in them, and builds
``batchUpdate`` requests for styling, rewriting and table conversion.
"""
from .spans import TextSpan, OffsetRange, document_body, flatten_body, body_end_index
from .markdown_table import TableGrid, parse_markdown_table, table_source_lines, fence_markdown_tables
from .locator import find_occurrences, locate_table_source
from .batch import (
    FormatInstruction,
    build_format_requests,
    build_table_conversion_requests,
    build_replace_requests,
    build_append_requests,
)
from .table_cells import (
    estimate_cell_offset,
    build_cell_text_requests,
    find_table_cell_offsets,
    build_structural_cell_requests,
)

__all__ = [
    "TextSpan",
    "OffsetRange",
    "TableGrid",
    "FormatInstruction",
    "document_body",
    "flatten_body",
    "body_end_index",
    "parse_markdown_table",
    "table_source_lines",
    "fence_markdown_tables",
    "find_occurrences",
    "locate_table_source",
    "build_format_requests",
    "build_table_conversion_requests",
    "build_replace_requests",
    "build_append_requests",
    "estimate_cell_offset",
    "build_cell_text_requests",
    "find_table_cell_offsets",
    "build_structural_cell_requests",
]
