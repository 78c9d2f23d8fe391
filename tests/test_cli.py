"""CLI tests for the docugen-mcp command."""
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from docugen_mcp import __version__
from docugen_mcp.cli import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


class TestCli:
    """Tests for the top-level command."""

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert f"docugen-mcp, version {__version__}" in result.output

    def test_help_lists_tools(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(main, ["-h"])

        assert result.exit_code == 0
        for tool in ("CreateDoc", "UpdateDoc", "DeleteDoc", "FormatDoc", "ConvertToTable"):
            assert tool in result.output

    def test_no_arguments_starts_server(self, cli_runner: CliRunner) -> None:
        with patch("docugen_mcp.server.serve") as mock_serve:
            result = cli_runner.invoke(main, [])

        assert result.exit_code == 0
        mock_serve.assert_called_once_with()
