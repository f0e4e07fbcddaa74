"""Main entry point for the Shell Line MCP Server.

Logging is configured by shell_line_mcp.server on import. FastMCP handles
the command-line arguments and server configuration.
"""

import os
import signal
import sys

from shell_line_mcp.server import logger, mcp


def handle_interrupt(signum, frame):
    """Handle interrupt signal by exiting immediately."""
    logger.info(f"Received signal {signum}, shutting down...")
    os._exit(0)


def main():
    """Entry point for the Shell Line MCP Server CLI."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)

    from shell_line_mcp import config

    if config.TRANSPORT not in ("stdio", "sse"):
        logger.error(f"Invalid transport protocol: {config.TRANSPORT}. Must be 'stdio' or 'sse'")
        sys.exit(1)

    if not config.check_marker_conflicts():
        sys.exit(1)

    logger.info(
        f"Parser settings: background marker {config.BACKGROUND_MARKER!r}, "
        f"strip trailing marker {config.STRIP_BACKGROUND_MARKER}, "
        f"max line length {config.MAX_LINE_LENGTH}"
    )
    logger.info(f"Starting server with transport protocol: {config.TRANSPORT}")

    try:
        mcp.run(transport=config.TRANSPORT)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received. Shutting down...")
        os._exit(0)


if __name__ == "__main__":
    main()
