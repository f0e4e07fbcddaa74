"""Main server implementation for Shell Line MCP Server.

This module defines the MCP server instance and tool functions for parsing
shell-like lines into pipelines. It also registers MCP Resources describing
the operator syntax and parser settings, and prompt templates.
"""

import logging
import sys
from typing import Any

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from shell_line_mcp import config
from shell_line_mcp.config import INSTRUCTIONS
from shell_line_mcp.models import ParseResult
from shell_line_mcp.parser import ParseError, parse_line, split_stages
from shell_line_mcp.prompts import register_prompts
from shell_line_mcp.resources import register_resources

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger("shell-line-mcp")

mcp = FastMCP(
    "Shell Line MCP Server",
    instructions=INSTRUCTIONS,
)

register_prompts(mcp)
register_resources(mcp)


def _check_length(line: str) -> str | None:
    if len(line) > config.MAX_LINE_LENGTH:
        return f"Line too long: {len(line)} characters (maximum {config.MAX_LINE_LENGTH})"
    return None


@mcp.tool()
async def parse_shell_line(
    line: str = Field(description="One line of shell-like input, e.g. 'cat | sort < in.txt > out.txt &'"),
    ctx: Context | None = None,
) -> ParseResult:
    """Parse a shell-like line into commands, redirections and a background flag.

    The line is split on '|' into pipeline stages; each stage becomes a command
    name followed by its arguments. '< path' and '> path' set the input and
    output redirections, in either order. A background marker ('&' by default)
    sets the background flag.

    No quoting, escaping, variable expansion or globbing is performed.

    Returns status ('success' or 'error'), a message, and the parsed pipeline
    on success or the error kind on failure.
    """
    logger.info(f"Parsing line: {line!r}")

    too_long = _check_length(line)
    if too_long:
        logger.warning(too_long)
        return ParseResult(status="error", output=too_long, error_kind="LineTooLong")

    try:
        pipeline = parse_line(line)
    except ParseError as e:
        logger.warning(f"Parse error: {e}")
        if ctx:
            await ctx.warning(f"Could not parse line: {e}")
        return ParseResult(status="error", output=str(e), error_kind=type(e).__name__)
    except Exception as e:
        logger.error(f"Error in parse_shell_line: {e}", exc_info=True)
        return ParseResult(status="error", output=f"Unexpected error: {str(e)}", error_kind="InternalError")

    if ctx:
        await ctx.info(f"Parsed {len(pipeline.commands)} command(s)")

    return ParseResult(
        status="success",
        output=f"Parsed {len(pipeline.commands)} command(s)",
        pipeline=pipeline.to_dict(),
    )


@mcp.tool()
async def split_shell_pipeline(
    line: str = Field(description="One line of shell-like input to split into pipeline stages"),
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Split a shell-like line into its pipeline stages without tokenizing them.

    A trailing background marker and the redirection clauses are removed first,
    so 'ls | sort > out.txt &' yields the stages 'ls' and 'sort'.

    Returns status, the list of stages, and whether the line is a pipe.
    """
    logger.info(f"Splitting line: {line!r}")

    too_long = _check_length(line)
    if too_long:
        logger.warning(too_long)
        return {"status": "error", "output": too_long, "error_kind": "LineTooLong"}

    try:
        stages = split_stages(line)
    except ParseError as e:
        logger.warning(f"Parse error: {e}")
        if ctx:
            await ctx.warning(f"Could not split line: {e}")
        return {"status": "error", "output": str(e), "error_kind": type(e).__name__}
    except Exception as e:
        logger.error(f"Error in split_shell_pipeline: {e}", exc_info=True)
        return {"status": "error", "output": f"Unexpected error: {str(e)}", "error_kind": "InternalError"}

    if ctx:
        await ctx.info(f"Split into {len(stages)} stage(s)")

    return {"status": "success", "stages": stages, "is_pipe": len(stages) > 1}
