"""Configuration settings for the Shell Line MCP Server.

This module contains configuration settings for the Shell Line MCP Server.

Environment variables:
- SHELL_LINE_MCP_TRANSPORT: Transport protocol to use ("stdio" or "sse", default: "stdio")
- SHELL_LINE_MCP_BACKGROUND_MARKER: Character marking a background pipeline (default: "&")
- SHELL_LINE_MCP_STRIP_BACKGROUND_MARKER: Strip a trailing background marker before
  parsing ("true" or "false", default: "true")
- SHELL_LINE_MCP_MAX_LINE_LENGTH: Maximum line length accepted by the tools (default: 4096)
- SHELL_LINE_MCP_LOG_LEVEL: Logging level (default: "INFO")
"""

import logging
import os

logger = logging.getLogger(__name__)


def is_truthy(value: str | None) -> bool:
    """Interpret an environment variable value as a boolean.

    Args:
        value: Raw value, possibly None

    Returns:
        True for "1", "true", "yes" and "on" (case-insensitive), False otherwise
    """
    if value is None:
        return False
    return value.strip().lower() in ("1", "true", "yes", "on")


TRANSPORT = os.environ.get("SHELL_LINE_MCP_TRANSPORT", "stdio")
BACKGROUND_MARKER = os.environ.get("SHELL_LINE_MCP_BACKGROUND_MARKER", "&")
STRIP_BACKGROUND_MARKER = is_truthy(os.environ.get("SHELL_LINE_MCP_STRIP_BACKGROUND_MARKER", "true"))
MAX_LINE_LENGTH = int(os.environ.get("SHELL_LINE_MCP_MAX_LINE_LENGTH", "4096"))
LOG_LEVEL = os.environ.get("SHELL_LINE_MCP_LOG_LEVEL", "INFO").upper()

# Operator characters recognised by the parser. They are fixed; only the
# background marker is configurable.
INPUT_REDIRECT = "<"
OUTPUT_REDIRECT = ">"
PIPE = "|"


def marker_problem(marker: str) -> str | None:
    """Describe why a background marker cannot be used, if it cannot.

    Args:
        marker: Candidate background marker

    Returns:
        A description of the problem, or None if the marker is usable
    """
    if len(marker) != 1:
        return f"Background marker must be a single character, got: {marker!r}"
    if marker in (INPUT_REDIRECT, OUTPUT_REDIRECT, PIPE) or marker.isspace():
        return f"Background marker {marker!r} conflicts with an operator or whitespace"
    return None


def check_marker_conflicts() -> bool:
    """Check that the configured background marker does not shadow an operator.

    Returns:
        True if the marker is a single character distinct from the operators
    """
    problem = marker_problem(BACKGROUND_MARKER)
    if problem:
        logger.error(problem)
        return False
    return True


INSTRUCTIONS = """
Shell Line MCP Server parses single lines of shell-like input into a
structured pipeline. It never executes anything.

TOOLS:
- parse_shell_line: Parse a line into commands, redirections and background flag
  Example: parse_shell_line(line="cat | sort < in.txt > out.txt &")
- split_shell_pipeline: Split a line into its pipeline stages only
  Example: split_shell_pipeline(line="ls -l | grep py | wc -l")

SYNTAX:
- "|" separates pipeline stages
- "< path" redirects the first stage's input from a file
- "> path" redirects the last stage's output to a file
- A background marker (default "&") runs the pipeline without waiting
- No quoting, escaping, variable expansion or globbing

RESOURCES:
  - shell://syntax/operators: Operator characters and their roles
  - shell://config/parser: Effective parser settings

PROMPTS:
  - explain_pipeline: Walk through how a line is parsed
  - build_pipeline: Compose a line for a described goal
"""
