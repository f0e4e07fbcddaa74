"""Prompt definitions for the Shell Line MCP Server.

This module provides concise, example-driven prompt templates for working with
the line parser. Each prompt leads with a concrete example line and specifies
the expected output format.
"""

import logging

logger = logging.getLogger(__name__)

# Example lines for common pipeline shapes
_GOAL_EXAMPLES = {
    "count": "grep -v comment | wc -l < config.txt",
    "filter": "cat access.log | grep ERROR > errors.txt",
    "sort": "sort -u < names.txt > sorted.txt",
    "background": "tar -czf backup.tgz data &",
}


def register_prompts(mcp):
    """Register all prompts with the MCP server instance.

    Args:
        mcp: The FastMCP server instance
    """
    logger.info("Registering shell line prompt templates")

    @mcp.prompt(
        name="explain_pipeline",
        description="Explain how a shell-like line is split into commands and redirections",
    )
    def explain_pipeline(line: str) -> str:
        """Generate an explanation request for a line."""
        return f"""Explain how this line is parsed:
{line}

Use the parse_shell_line tool, then describe:
1. Each pipeline stage in order, with its command name and arguments
2. Which file feeds the first stage's input, if any
3. Which file receives the last stage's output, if any
4. Whether the pipeline runs in the background

If the tool reports an error, name the error kind and show a corrected line."""

    @mcp.prompt(
        name="build_pipeline",
        description="Compose a shell-like line for a described goal",
    )
    def build_pipeline(goal: str, kind: str = "filter") -> str:
        """Generate a line-building request."""
        example = _GOAL_EXAMPLES.get(kind, _GOAL_EXAMPLES["filter"])

        return f"""Write a single shell-like line that achieves: {goal}

Example:
{example}

Rules: stages joined by '|', at most one '< path' and one '> path', optional trailing '&'.
No quotes, variables or globs. Paths may not contain '<' or '>'.
Verify the line with parse_shell_line before answering. Output the line and the parsed result."""

    logger.info("Successfully registered all shell line prompt templates")
