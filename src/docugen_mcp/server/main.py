"""MCP Server initialization and client lifecycle."""
import logging
from datetime import datetime
from typing import Optional

from fastmcp import FastMCP
from googleapiclient.errors import HttpError

from ..client import DocsClient
from ..core.config import SERVER_NAME
from ..utils.constants import LIST_DOCS_URI
from ..utils.errors import ClientNotInitializedError, DocuGenError, format_error, handle_http_error

logger = logging.getLogger(__name__)

# Initialize MCP Server
mcp = FastMCP(SERVER_NAME)

# Shared client, set by init_client() or set_client()
_client: Optional[DocsClient] = None


def init_client() -> bool:
    """Authenticate and create the shared DocsClient.

    Failures are logged rather than raised so the server can still start
    and report the problem from each tool call.

    Returns:
        True if the client is ready.
    """
    global _client
    try:
        _client = DocsClient()
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Google API clients: {e}")
        _client = None
        return False


def set_client(client: Optional[DocsClient]) -> None:
    """Install the client used by all tools (None to clear it)."""
    global _client
    _client = client


def get_client() -> DocsClient:
    """Get the shared DocsClient instance.

    Returns:
        The authenticated DocsClient instance.

    Raises:
        ClientNotInitializedError: If no client has been established.
    """
    if _client is None:
        raise ClientNotInitializedError()
    return _client


def format_doc_listing(files: list[dict]) -> str:
    """Render Drive file metadata as the ListDocs text listing."""
    content = "Recent Google Docs:\n\n"
    if not files:
        return content + "No documents found."

    for file in files:
        content += f"📄 {file.get('name')}\n"
        content += f"   ID: {file.get('id')}\n"
        content += f"   Modified: {_format_date(file.get('modifiedTime'))}\n\n"
    return content


def _format_date(timestamp: Optional[str]) -> str:
    if not timestamp:
        return "unknown"
    try:
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return timestamp


@mcp.resource(LIST_DOCS_URI, name="ListDocs", mime_type="text/plain")
def list_docs() -> str:
    """List the 20 most recently modified Google Docs."""
    try:
        return format_doc_listing(get_client().list_recent_docs())
    except HttpError as e:
        logger.error(f"List docs failed: {e}")
        return format_error("List docs", handle_http_error(e))
    except DocuGenError as e:
        logger.error(f"List docs failed: {e}")
        return format_error("List docs", e)
    except Exception as e:
        logger.exception("List docs failed with unexpected error")
        return f"List docs failed: Unexpected error ({type(e).__name__}: {e})"
