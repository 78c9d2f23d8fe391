"""Drive file operations mixin for DocsClient."""
from typing import Any

from ..utils.constants import (
    GOOGLE_DOC_MIME_TYPE,
    LIST_DOCS_FIELDS,
    LIST_DOCS_ORDER_BY,
    LIST_DOCS_PAGE_SIZE,
)


class FilesMixin:
    """Mixin providing Drive file operations."""

    def delete_doc(self, document_id: str) -> str:
        """Permanently delete a document.

        Args:
            document_id: The document ID.

        Returns:
            Success message.
        """
        self.drive_service.files().delete(fileId=document_id).execute()
        return f"✅ Deleted document {document_id}"

    def list_recent_docs(self, limit: int = LIST_DOCS_PAGE_SIZE) -> list[dict[str, Any]]:
        """List Google Docs, most recently modified first.

        Args:
            limit: Maximum number of documents.

        Returns:
            File metadata dicts with id, name, createdTime and modifiedTime.
        """
        response = self.drive_service.files().list(
            q=f"mimeType='{GOOGLE_DOC_MIME_TYPE}'",
            fields=LIST_DOCS_FIELDS,
            pageSize=limit,
            orderBy=LIST_DOCS_ORDER_BY,
        ).execute()
        return response.get('files', [])
