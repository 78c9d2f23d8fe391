"""Base client with Google API service initialization."""
import logging
from typing import Any, Optional

from googleapiclient.discovery import build

from ..auth import get_creds

logger = logging.getLogger(__name__)


class DocsClientBase:
    """Base class holding the Docs and Drive services.

    Services can be passed in directly (e.g. fakes in tests); otherwise they
    are built from the saved OAuth credentials.
    """

    def __init__(
        self,
        creds: Any = None,
        docs_service: Optional[Any] = None,
        drive_service: Optional[Any] = None,
    ) -> None:
        if docs_service is None or drive_service is None:
            creds = creds or get_creds()
        self.creds = creds
        self.docs_service = docs_service or build('docs', 'v1', credentials=creds)
        self.drive_service = drive_service or build('drive', 'v3', credentials=creds)

    def get_document(self, document_id: str) -> dict[str, Any]:
        """Fetch the full document resource.

        Args:
            document_id: The document ID.

        Returns:
            Raw JSON resource from Docs API.
        """
        return self.docs_service.documents().get(documentId=document_id).execute()

    def batch_update(self, document_id: str, requests: list[dict[str, Any]]) -> dict[str, Any]:
        """Submit one batch of edit requests, applied in order by the service.

        Args:
            document_id: The document ID.
            requests: Docs API request objects.

        Returns:
            The batchUpdate response.
        """
        logger.debug(f"batchUpdate {document_id}: {len(requests)} request(s)")
        return self.docs_service.documents().batchUpdate(
            documentId=document_id, body={'requests': requests}
        ).execute()
