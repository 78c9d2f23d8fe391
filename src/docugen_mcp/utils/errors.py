"""Custom exceptions for the DocuGen MCP server.

This module provides structured error handling with specific exception types
for different failure scenarios. All exceptions inherit from DocuGenError.
"""
from typing import Optional, Any


class DocuGenError(Exception):
    """Base exception for all docugen-mcp errors.

    Attributes:
        message: Human-readable error description.
        document_id: Optional document ID related to the error.
    """

    def __init__(self, message: str, document_id: Optional[str] = None) -> None:
        self.message = message
        self.document_id = document_id
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the error message, optionally including the document ID."""
        if self.document_id:
            return f"{self.message} (document: {self.document_id})"
        return self.message


class ClientNotInitializedError(DocuGenError):
    """Raised when the Google API client could not be established."""

    def __init__(self) -> None:
        super().__init__("❌ Google API not initialized. Please check credentials.")


class AuthenticationError(DocuGenError):
    """Raised when authentication fails or token is expired."""
    pass


class DocumentNotFoundError(DocuGenError):
    """Raised when a requested document doesn't exist or was deleted."""
    pass


class PermissionDeniedError(DocuGenError):
    """Raised when access to a document is denied."""
    pass


class QuotaExceededError(DocuGenError):
    """Raised when API rate limit or quota is exceeded."""
    pass


class TextNotFoundError(DocuGenError):
    """Raised when text to operate on cannot be located in a document."""
    pass


class EmptyTableError(DocuGenError):
    """Raised when markdown table text yields no rows."""

    def __init__(self) -> None:
        super().__init__("❌ No valid table data found")


def handle_http_error(error: Any, document_id: Optional[str] = None) -> DocuGenError:
    """Convert googleapiclient HttpError to a specific exception.

    Args:
        error: The HttpError from googleapiclient.
        document_id: Optional document ID for context.

    Returns:
        An appropriate DocuGenError subclass.
    """
    try:
        status = error.resp.status
    except AttributeError:
        return DocuGenError(f"API error: {str(error)}", document_id)

    if status == 401:
        return AuthenticationError(
            "Authentication failed. Delete the saved token and restart to re-authenticate.",
            document_id
        )
    elif status == 403:
        return PermissionDeniedError(
            "Access denied. Check document sharing settings or request access.",
            document_id
        )
    elif status == 404:
        return DocumentNotFoundError(
            "Document not found. It may have been deleted or the ID is wrong.",
            document_id
        )
    elif status == 429:
        return QuotaExceededError(
            "API quota exceeded. Please wait a moment and try again.",
            document_id
        )
    else:
        return DocuGenError(f"API error (HTTP {status}): {str(error)}", document_id)


def format_error(action: str, error: Exception) -> str:
    """Format an error message consistently.

    Messages of user-facing errors that already carry a marker are returned
    unchanged.

    Args:
        action: The action that failed (e.g., "Create doc", "Format doc").
        error: The exception that occurred.

    Returns:
        Formatted error string.
    """
    if isinstance(error, (ClientNotInitializedError, EmptyTableError, TextNotFoundError)):
        return error.format_message()
    if isinstance(error, DocuGenError):
        return f"{action} failed: {error.message}"
    return f"{action} failed: {str(error)}"
