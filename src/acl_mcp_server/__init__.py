"""acl-mcp-server: MCP server delivering the Agent Communication Language specification."""

import logging
import os
import sys

from acl_mcp_server.server import mcp


def main() -> None:
    """CLI entry point: starts the MCP server over stdio."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="stdio")
