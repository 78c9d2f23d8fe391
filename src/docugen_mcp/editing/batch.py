"""Builders for Docs API ``batchUpdate`` requests.

Requests in one batch are applied in order and every insertion or deletion
shifts the indices after it. The batches built here are either style updates
(which shift nothing) or a single delete followed by an insert at the
delete's start.
"""
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from ..utils.constants import DOCUMENT_START_INDEX, HEADING_STYLES, TEXT_STYLE_FIELDS
from .locator import find_occurrences
from .markdown_table import TableGrid
from .spans import OffsetRange, TextSpan

Request = dict[str, Any]


class FormatInstruction(BaseModel):
    """Formatting to apply to every occurrence of ``text``."""

    text: str = Field(..., description="Text to format")
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    heading: Optional[int] = Field(None, ge=1, le=3, description="Heading level (1-3)")


def insert_text_request(index: int, text: str) -> Request:
    return {'insertText': {'location': {'index': index}, 'text': text}}


def delete_range_request(range_: OffsetRange) -> Request:
    return {'deleteContentRange': {'range': range_.to_api()}}


def insert_table_request(index: int, rows: int, columns: int) -> Request:
    return {'insertTable': {'rows': rows, 'columns': columns, 'location': {'index': index}}}


def text_style_request(range_: OffsetRange, instruction: FormatInstruction) -> Optional[Request]:
    """Build an updateTextStyle request touching only the fields that are set.

    Returns:
        The request, or None when the instruction sets no text style field.
    """
    style = {}
    for field in TEXT_STYLE_FIELDS:
        value = getattr(instruction, field)
        if value is not None:
            style[field] = value
    if not style:
        return None
    return {
        'updateTextStyle': {
            'range': range_.to_api(),
            'textStyle': style,
            'fields': ','.join(style),
        }
    }


def heading_request(range_: OffsetRange, level: int) -> Request:
    return {
        'updateParagraphStyle': {
            'range': range_.to_api(),
            'paragraphStyle': {'namedStyleType': HEADING_STYLES[level]},
            'fields': 'namedStyleType',
        }
    }


def build_format_requests(
    instructions: Iterable[FormatInstruction], spans: list[TextSpan]
) -> list[Request]:
    """Build style requests for every occurrence of every instruction's text.

    Overlapping instructions are not reconciled; the later request wins when
    the service applies them in order.
    """
    requests = []
    for instruction in instructions:
        for occurrence in find_occurrences(spans, instruction.text):
            style = text_style_request(occurrence, instruction)
            if style:
                requests.append(style)
            if instruction.heading:
                requests.append(heading_request(occurrence, instruction.heading))
    return requests


def build_table_conversion_requests(grid: TableGrid, source: OffsetRange) -> list[Request]:
    """Delete the markdown source and insert an empty table in its place."""
    requests = []
    if source.end > source.start:
        requests.append(delete_range_request(source))
    requests.append(insert_table_request(source.start, len(grid), len(grid[0])))
    return requests


def build_replace_requests(end_index: int, text: str) -> list[Request]:
    """Clear the body (keeping its final newline) and insert ``text`` at the start."""
    requests = []
    clear = OffsetRange(DOCUMENT_START_INDEX, end_index - 1)
    if clear.end > clear.start:
        requests.append(delete_range_request(clear))
    requests.append(insert_text_request(DOCUMENT_START_INDEX, text))
    return requests


def build_append_requests(end_index: int, text: str) -> list[Request]:
    """Insert ``text`` on a new line before the body's final newline."""
    index = max(DOCUMENT_START_INDEX, end_index - 1)
    return [insert_text_request(index, '\n' + text)]
