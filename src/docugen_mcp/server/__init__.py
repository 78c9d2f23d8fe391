"""DocuGen MCP Server - modular implementation."""

from .main import mcp, get_client, set_client, init_client

from . import doc_tools

__all__ = ["mcp", "get_client", "set_client", "init_client", "serve"]


def serve():
    """Authenticate and run the DocuGen MCP server over stdio."""
    init_client()
    mcp.run(show_banner=False)
