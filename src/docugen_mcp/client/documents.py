"""Document operations mixin for DocsClient."""
import logging
from typing import Iterable, Optional

from ..editing import (
    FormatInstruction,
    body_end_index,
    build_append_requests,
    build_cell_text_requests,
    build_format_requests,
    build_replace_requests,
    build_structural_cell_requests,
    build_table_conversion_requests,
    document_body,
    fence_markdown_tables,
    find_table_cell_offsets,
    flatten_body,
    locate_table_source,
    parse_markdown_table,
    table_source_lines,
)
from ..editing.batch import insert_text_request
from ..utils.constants import DOCUMENT_START_INDEX
from ..utils.errors import EmptyTableError, TextNotFoundError

logger = logging.getLogger(__name__)

UPDATE_MODES = ('replace', 'append')


class DocumentsMixin:
    """Mixin providing document editing operations."""

    def create_doc(self, title: str, content: Optional[str] = None) -> str:
        """Create a new Google Doc, optionally with initial content.

        Markdown tables in the content are kept as text inside code fences.

        Args:
            title: Document title.
            content: Optional initial text.

        Returns:
            Success message with document ID.
        """
        document = self.docs_service.documents().create(body={'title': title}).execute()
        document_id = document.get('documentId')

        if content:
            text = fence_markdown_tables(content)
            self.batch_update(document_id, [insert_text_request(DOCUMENT_START_INDEX, text)])

        return f'✅ Created document "{title}"\nID: {document_id}'

    def update_doc(self, document_id: str, content: str, mode: str = 'append') -> str:
        """Replace the body of a document or append to it.

        Args:
            document_id: The document ID.
            content: Text to write.
            mode: 'replace' clears the body first; 'append' adds a new line at the end.

        Returns:
            Success message.
        """
        if mode not in UPDATE_MODES:
            raise ValueError(f"Unsupported mode '{mode}'. Supported: {', '.join(UPDATE_MODES)}")

        body = document_body(self.get_document(document_id))
        end_index = body_end_index(body)

        if mode == 'replace':
            requests = build_replace_requests(end_index, content)
        else:
            requests = build_append_requests(end_index, content)

        self.batch_update(document_id, requests)
        return f"✅ Updated document {document_id} (mode: {mode})"

    def format_doc(self, document_id: str, formatting: Iterable[FormatInstruction]) -> str:
        """Apply text and heading styles to every occurrence of each target text.

        Text that does not occur in the document is skipped silently.

        Args:
            document_id: The document ID.
            formatting: Formatting instructions.

        Returns:
            Success message.
        """
        spans = flatten_body(document_body(self.get_document(document_id)))
        requests = build_format_requests(formatting, spans)

        if requests:
            self.batch_update(document_id, requests)
        else:
            logger.info(f"No formatting targets found in document {document_id}")

        return f"✅ Applied formatting to document {document_id}"

    def convert_to_table(self, document_id: str, table_text: str) -> str:
        """Replace markdown table text in a document with a native table.

        The markdown is deleted and an empty table inserted in one batch; the
        document is then re-read to place each cell's text. If the new table
        can't be found in the re-read document, cell positions are estimated.

        Args:
            document_id: The document ID.
            table_text: The markdown table, as it appears in the document.

        Returns:
            Success message with the table dimensions.

        Raises:
            EmptyTableError: If the markdown has no table rows.
            TextNotFoundError: If the table text is not in the document.
        """
        grid = parse_markdown_table(table_text)
        if not grid:
            raise EmptyTableError()

        source_lines = table_source_lines(table_text)
        spans = flatten_body(document_body(self.get_document(document_id)))
        source = locate_table_source(spans, source_lines)
        if source is None:
            raise TextNotFoundError("❌ Could not find table text in document", document_id)

        self.batch_update(document_id, build_table_conversion_requests(grid, source))

        body = document_body(self.get_document(document_id))
        cell_offsets = find_table_cell_offsets(body, source.start)
        if cell_offsets is None:
            logger.warning(
                f"Inserted table not found in document {document_id}; estimating cell positions"
            )
            cell_requests = build_cell_text_requests(grid, source.start)
        else:
            cell_requests = build_structural_cell_requests(grid, cell_offsets)

        if cell_requests:
            self.batch_update(document_id, cell_requests)

        rows, columns = len(grid), len(grid[0])
        return f"✅ Converted markdown table to Google Docs table ({rows} rows × {columns} columns)"
