"""Resource definitions for the Shell Line MCP Server.

This module provides MCP Resources that describe the operator syntax the
parser understands and the settings it is running with.
"""

import logging
from typing import Any

from shell_line_mcp import config

logger = logging.getLogger(__name__)


def get_operator_syntax() -> dict[str, Any]:
    """Describe each operator character and its role.

    Returns:
        Dictionary with operator information
    """
    return {
        "operators": [
            {
                "symbol": config.PIPE,
                "name": "pipe",
                "description": "Separates pipeline stages; each stage's output feeds the next",
            },
            {
                "symbol": config.INPUT_REDIRECT,
                "name": "input_redirect",
                "description": "Reads the first stage's input from the following path",
            },
            {
                "symbol": config.OUTPUT_REDIRECT,
                "name": "output_redirect",
                "description": "Writes the last stage's output to the following path",
            },
            {
                "symbol": config.BACKGROUND_MARKER,
                "name": "background",
                "description": "Runs the pipeline without waiting for it to finish",
            },
        ],
        "limitations": [
            "No quoting or escaping",
            "No environment variable expansion or globbing",
            "Each redirection operator may appear at most once",
            "Paths may not contain '<' or '>'",
        ],
    }


def get_parser_settings() -> dict[str, Any]:
    """Get the effective parser settings.

    Returns:
        Dictionary with parser settings
    """
    return {
        "background_marker": config.BACKGROUND_MARKER,
        "strip_background_marker": config.STRIP_BACKGROUND_MARKER,
        "max_line_length": config.MAX_LINE_LENGTH,
        "transport": config.TRANSPORT,
    }


def register_resources(mcp):
    """Register all resources with the MCP server instance.

    Args:
        mcp: The FastMCP server instance
    """
    logger.info("Registering shell syntax resources")

    @mcp.resource(
        name="shell_operators",
        description="Get the operator characters understood by the parser",
        uri="shell://syntax/operators",
        mime_type="application/json",
    )
    async def shell_operators() -> dict:
        """Get the operator characters understood by the parser.

        Returns:
            Dictionary with operator information
        """
        return get_operator_syntax()

    @mcp.resource(
        name="parser_settings",
        description="Get the effective parser settings",
        uri="shell://config/parser",
        mime_type="application/json",
    )
    async def parser_settings() -> dict:
        return get_parser_settings()

    logger.info("Successfully registered all shell syntax resources")
