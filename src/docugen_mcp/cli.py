"""Command-line interface for docugen-mcp."""
import logging
import sys

import click

from . import __version__
from .core.config import LOG_LEVEL


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="docugen-mcp")
def main() -> None:
    """DocuGen MCP Server - simple Google Docs automation.

    Starts the MCP server on stdio.

    \b
    Tools:
      CreateDoc      - Create a new Google Doc
      UpdateDoc      - Update existing document content
      DeleteDoc      - Delete a document
      FormatDoc      - Apply formatting to document text
      ConvertToTable - Turn markdown table text into a real table
    Resources:
      googledocs://list - Recently modified documents
    """
    # stdout carries the MCP stream
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from .server import serve

    serve()


if __name__ == "__main__":
    main()
