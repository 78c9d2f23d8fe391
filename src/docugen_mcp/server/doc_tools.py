"""Document-related MCP tools."""
import logging
from typing import Annotated, Literal, Optional

from googleapiclient.errors import HttpError
from pydantic import Field

from .main import mcp, get_client
from ..editing import FormatInstruction
from ..utils.errors import handle_http_error, format_error, DocuGenError

logger = logging.getLogger(__name__)


def _failure(action: str, error: Exception, document_id: Optional[str] = None) -> str:
    """Log a tool failure and turn it into the message returned to the caller."""
    if isinstance(error, HttpError):
        error = handle_http_error(error, document_id)
    if isinstance(error, DocuGenError):
        logger.error(f"{action} failed: {error}")
        return format_error(action, error)
    logger.exception(f"{action} failed with unexpected error")
    return f"{action} failed: Unexpected error ({type(error).__name__}: {error})"


@mcp.tool(name="CreateDoc")
def create_doc(
    title: Annotated[str, Field(description="Document title")],
    content: Annotated[
        Optional[str],
        Field(description="Initial content - plain text or markdown (tables rendered as text)"),
    ] = None,
) -> str:
    """
    Create a new Google Doc, optionally with initial content.
    Args:
        title: The name of the new document.
        content: The initial text content.
    """
    try:
        return get_client().create_doc(title, content)
    except Exception as e:
        return _failure("Create doc", e)


@mcp.tool(name="UpdateDoc")
def update_doc(
    documentId: Annotated[str, Field(description="Document ID")],
    content: Annotated[str, Field(description="New content to add or replace")],
    mode: Annotated[
        Literal["replace", "append"], Field(description="Update mode (default: append)")
    ] = "append",
) -> str:
    """
    Update a Google Doc's content.
    'replace' clears the document first; 'append' adds the content on a new line at the end.
    Args:
        documentId: The ID of the document.
        content: The text to write.
        mode: 'replace' or 'append'.
    """
    try:
        return get_client().update_doc(documentId, content, mode)
    except Exception as e:
        return _failure("Update doc", e, documentId)


@mcp.tool(name="DeleteDoc")
def delete_doc(
    documentId: Annotated[str, Field(description="Document ID to delete")],
) -> str:
    """
    Permanently delete a Google Doc.
    Args:
        documentId: The ID of the document.
    """
    try:
        return get_client().delete_doc(documentId)
    except Exception as e:
        return _failure("Delete doc", e, documentId)


@mcp.tool(name="FormatDoc")
def format_doc(
    documentId: Annotated[str, Field(description="Document ID")],
    formatting: Annotated[list[FormatInstruction], Field(description="Formatting instructions")],
) -> str:
    """
    Apply bold, italic, underline or heading styles to text in a Google Doc.
    Every occurrence of each instruction's text is formatted.
    Args:
        documentId: The ID of the document.
        formatting: List of {text, bold?, italic?, underline?, heading? (1-3)}.
    """
    try:
        return get_client().format_doc(documentId, formatting)
    except Exception as e:
        return _failure("Format doc", e, documentId)


@mcp.tool(name="ConvertToTable")
def convert_to_table(
    documentId: Annotated[str, Field(description="Document ID")],
    tableText: Annotated[str, Field(description="Markdown table text to convert (with | separators)")],
) -> str:
    """
    Convert markdown table text already in a Google Doc into a real table.
    Args:
        documentId: The ID of the document.
        tableText: The markdown table exactly as it appears in the document.
    """
    try:
        return get_client().convert_to_table(documentId, tableText)
    except Exception as e:
        return _failure("Convert table", e, documentId)
