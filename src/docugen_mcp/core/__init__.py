"""
Core utilities package for DocuGen MCP.

This package provides shared configuration.
"""

from .config import (
    SERVER_NAME,
    SCOPES,
    DOCUGEN_DIR,
    LOG_LEVEL,
    get_docugen_dir,
    get_token_path,
    get_client_secrets_path,
)

__all__ = [
    "SERVER_NAME",
    "SCOPES",
    "DOCUGEN_DIR",
    "LOG_LEVEL",
    "get_docugen_dir",
    "get_token_path",
    "get_client_secrets_path",
]
