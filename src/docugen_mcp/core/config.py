"""
Shared configuration for DocuGen MCP.

This module centralizes configuration values to avoid hardcoded values
scattered throughout the codebase. Values come from the environment, with a
``.env`` file in the working directory loaded first.
"""

import os

from dotenv import load_dotenv

load_dotenv()

SERVER_NAME = "docgen"

# If modifying these scopes, delete the saved token.
SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/drive",
]

# State directory holding the OAuth token
DOCUGEN_DIR = os.path.expanduser(os.getenv("DOCUGEN_DIR", "~/.docugen"))

LOG_LEVEL = os.getenv("DOCUGEN_LOG_LEVEL", "INFO").upper()


def get_docugen_dir() -> str:
    """
    Get the state directory path, creating it if necessary.

    Returns:
        Path to the DocuGen state directory.
    """
    if not os.path.exists(DOCUGEN_DIR):
        os.makedirs(DOCUGEN_DIR, exist_ok=True)
    return DOCUGEN_DIR


def get_token_path() -> str:
    """Get the path of the saved OAuth token (``TOKEN_PATH`` overrides)."""
    return os.getenv("TOKEN_PATH") or os.path.join(get_docugen_dir(), "token.json")


def get_client_secrets_path() -> str:
    """
    Get the path of the OAuth client secrets file.

    Returns:
        ``GOOGLE_OAUTH_PATH`` if set, else ``credentials.json`` in the
        current working directory.
    """
    return os.getenv("GOOGLE_OAUTH_PATH") or os.path.join(os.getcwd(), "credentials.json")
