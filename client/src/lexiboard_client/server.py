"""lexiboard MCP server: exposes the catalog to AI assistants."""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from lexiboard_client.client import LexiboardClient
from lexiboard_client.errors import SUPPORTED_LOCALES, ErrorClassifier
from lexiboard_client.tools.catalog import register_catalog_tools

logger = logging.getLogger(__name__)


def create_server() -> tuple[FastMCP, LexiboardClient]:
    """Create and configure the MCP server."""
    url = os.environ.get("LEXIBOARD_URL")
    username = os.environ.get("LEXIBOARD_USERNAME")
    password = os.environ.get("LEXIBOARD_PASSWORD")
    locale = os.environ.get("LEXIBOARD_LOCALE", "en")

    if not url:
        print("Error: the LEXIBOARD_URL environment variable is required.", file=sys.stderr)
        sys.exit(1)
    if locale not in SUPPORTED_LOCALES:
        print(
            f"Error: LEXIBOARD_LOCALE must be one of: {', '.join(SUPPORTED_LOCALES)}",
            file=sys.stderr,
        )
        sys.exit(1)

    client = LexiboardClient(url, username, password)
    server = FastMCP("lexiboard")
    register_catalog_tools(server, client, ErrorClassifier(locale))
    return server, client


def main() -> None:
    """Entry point for the lexiboard-mcp command."""
    server, _client = create_server()
    logger.info("Starting lexiboard MCP server")
    server.run()


if __name__ == "__main__":
    main()
