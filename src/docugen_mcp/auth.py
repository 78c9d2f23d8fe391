"""OAuth credentials for the Docs and Drive APIs."""
import logging
import os

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from .core.config import SCOPES, get_client_secrets_path, get_token_path
from .utils.errors import AuthenticationError

logger = logging.getLogger(__name__)


def load_saved_creds(token_path: str):
    """Load credentials from a saved token file, or None if unusable."""
    if not os.path.exists(token_path):
        return None
    try:
        return Credentials.from_authorized_user_file(token_path, SCOPES)
    except ValueError as e:
        logger.warning(f"Invalid token at {token_path}, re-authenticating: {e}")
        return None


def get_creds():
    """Return valid user credentials, running the browser consent flow if needed.

    Returns:
        Credentials object.

    Raises:
        AuthenticationError: If no token can be refreshed and the client
            secrets file is missing.
    """
    token_path = get_token_path()
    creds = load_saved_creds(token_path)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
        except RefreshError as e:
            logger.warning(f"Error refreshing token: {e}. Re-authenticating.")
            creds = None
    else:
        creds = None

    if not creds:
        secrets_path = get_client_secrets_path()
        if not os.path.exists(secrets_path):
            raise AuthenticationError(f"Credentials file not found at {secrets_path}")

        flow = InstalledAppFlow.from_client_secrets_file(secrets_path, SCOPES)
        creds = flow.run_local_server(port=0)

    # Save the credentials for the next run
    with open(token_path, "w") as token:
        token.write(creds.to_json())
    logger.info(f"Saved token to {token_path}")

    return creds
