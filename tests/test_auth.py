"""Unit tests for credential loading."""
import os
from unittest.mock import Mock, patch

import pytest

from docugen_mcp.auth import get_creds
from docugen_mcp.core.config import get_client_secrets_path, get_token_path
from docugen_mcp.utils.errors import AuthenticationError


@pytest.fixture
def token_path(tmp_path, monkeypatch):
    path = tmp_path / "token.json"
    monkeypatch.setenv("TOKEN_PATH", str(path))
    monkeypatch.setenv("GOOGLE_OAUTH_PATH", str(tmp_path / "credentials.json"))
    return path


class TestConfig:
    """Tests for environment-driven paths."""

    def test_token_path_override(self, token_path):
        assert get_token_path() == str(token_path)

    def test_client_secrets_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GOOGLE_OAUTH_PATH", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_client_secrets_path() == os.path.join(str(tmp_path), "credentials.json")


class TestGetCreds:
    """Tests for the token load / refresh / consent sequence."""

    def test_valid_saved_token(self, token_path):
        token_path.write_text("{}")
        creds = Mock(valid=True)
        with patch("docugen_mcp.auth.Credentials.from_authorized_user_file", return_value=creds), \
                patch("docugen_mcp.auth.InstalledAppFlow") as mock_flow:
            assert get_creds() is creds
        mock_flow.from_client_secrets_file.assert_not_called()

    def test_expired_token_is_refreshed_and_saved(self, token_path):
        token_path.write_text("{}")
        creds = Mock(valid=False, expired=True, refresh_token="refresh")
        creds.to_json.return_value = '{"token": "fresh"}'
        with patch("docugen_mcp.auth.Credentials.from_authorized_user_file", return_value=creds):
            assert get_creds() is creds

        creds.refresh.assert_called_once()
        assert token_path.read_text() == '{"token": "fresh"}'

    def test_consent_flow_when_no_token(self, token_path, tmp_path):
        (tmp_path / "credentials.json").write_text("{}")
        new_creds = Mock()
        new_creds.to_json.return_value = '{"token": "new"}'
        with patch("docugen_mcp.auth.InstalledAppFlow") as mock_flow:
            mock_flow.from_client_secrets_file.return_value.run_local_server.return_value = new_creds
            assert get_creds() is new_creds

        assert token_path.read_text() == '{"token": "new"}'

    def test_missing_client_secrets(self, token_path):
        with pytest.raises(AuthenticationError, match="Credentials file not found"):
            get_creds()
