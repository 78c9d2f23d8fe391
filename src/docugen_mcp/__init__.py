"""DocuGen MCP - Google Docs automation MCP Server Package.

This package provides an MCP (Model Context Protocol) server that lets AI
assistants create, update, format and delete Google Docs, and convert
markdown tables into native tables.
"""
from .client import DocsClient
from .auth import get_creds

__version__ = "2.0.0"
__all__ = ["DocsClient", "get_creds"]
