"""Command parsing utilities for Shell Line MCP Server.

This module provides utilities for parsing the commands part of a line:
- Pipe command splitting
- Stage tokenizing into a Command
"""

from shell_line_mcp.config import PIPE
from shell_line_mcp.errors import EmptyCommandToken
from shell_line_mcp.models import Command


def split_pipeline(commands: str) -> list[str]:
    """Split the commands part of a line into pipeline stages.

    Args:
        commands: The commands substring, redirections already removed

    Returns:
        List of trimmed, non-empty stage strings; empty if the input is blank

    Raises:
        EmptyCommandToken: If any stage is blank, e.g. "a || b" or "a |"
    """
    commands = commands.strip()
    if not commands:
        return []

    stages = [stage.strip() for stage in commands.split(PIPE)]
    for index, stage in enumerate(stages):
        if not stage:
            raise EmptyCommandToken(f"Empty pipeline stage at position {index + 1}", commands)
    return stages


def tokenize_stage(stage: str) -> Command:
    """Split a pipeline stage into an executable name and its arguments.

    Args:
        stage: One stage of a pipeline

    Returns:
        Command built from the whitespace-separated tokens

    Raises:
        EmptyCommandToken: If the stage has no tokens
    """
    tokens = stage.split()
    if not tokens:
        raise EmptyCommandToken("Pipeline stage has no executable", stage)
    return Command(name=tokens[0], arguments=tuple(tokens[1:]))
