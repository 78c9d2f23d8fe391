"""Shared pytest fixtures for docugen-mcp tests."""
from unittest.mock import MagicMock

import pytest

from docugen_mcp.client import DocsClient


def make_document(paragraphs, document_id="doc123"):
    """Build a Docs API document resource with one text run per paragraph.

    Offsets start at 1 after the leading section break, like a real document.
    """
    content = [{"startIndex": 0, "endIndex": 1, "sectionBreak": {}}]
    index = 1
    for text in paragraphs:
        end = index + len(text)
        content.append({
            "startIndex": index,
            "endIndex": end,
            "paragraph": {
                "elements": [
                    {"startIndex": index, "endIndex": end, "textRun": {"content": text}}
                ]
            },
        })
        index = end
    return {"documentId": document_id, "body": {"content": content}}


@pytest.fixture
def mock_docs_service():
    """Create a mock Google Docs service."""
    service = MagicMock()
    service.documents.return_value.create.return_value.execute.return_value = {
        "documentId": "new_doc_1"
    }
    service.documents.return_value.batchUpdate.return_value.execute.return_value = {"replies": []}
    return service


@pytest.fixture
def mock_drive_service():
    """Create a mock Google Drive service."""
    service = MagicMock()
    service.files.return_value.list.return_value.execute.return_value = {
        "files": [
            {"id": "doc1", "name": "Plan", "modifiedTime": "2024-03-05T10:00:00.000Z"},
            {"id": "doc2", "name": "Notes", "modifiedTime": "2024-03-01T08:30:00.000Z"},
        ]
    }
    return service


@pytest.fixture
def client(mock_docs_service, mock_drive_service):
    """DocsClient wired to mock services."""
    return DocsClient(docs_service=mock_docs_service, drive_service=mock_drive_service)


def set_documents(service, *documents):
    """Make successive documents().get() calls return the given resources."""
    service.documents.return_value.get.return_value.execute.side_effect = list(documents)


def sent_batches(service):
    """Return the request lists passed to each batchUpdate call, in order."""
    calls = service.documents.return_value.batchUpdate.call_args_list
    return [c.kwargs["body"]["requests"] for c in calls]


def make_table_element(start, cell_starts):
    """Table element whose cells' first paragraphs start at ``cell_starts``."""
    rows = []
    for row in cell_starts:
        rows.append({"tableCells": [
            {"startIndex": s - 1, "content": [{"startIndex": s, "paragraph": {"elements": []}}]}
            for s in row
        ]})
    return {"startIndex": start, "table": {"rows": len(rows), "tableRows": rows}}
