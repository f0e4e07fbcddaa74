"""Line parser for Shell Line MCP Server.

This module turns one line of shell-like input into a Pipeline:
redirection clauses are extracted first, the remaining text is split into
pipeline stages, and each stage is tokenized into a Command. Background
detection runs independently on the raw line.
"""

import logging
from pathlib import Path

from shell_line_mcp import config
from shell_line_mcp.errors import (
    EmptyCommandToken,
    MalformedRedirection,
    ParseError,
    UnbalancedRedirection,
)
from shell_line_mcp.models import Pipeline
from shell_line_mcp.redirection import extract_redirections
from shell_line_mcp.tools import split_pipeline, tokenize_stage

__all__ = [
    "EmptyCommandToken",
    "MalformedRedirection",
    "ParseError",
    "UnbalancedRedirection",
    "has_background_marker",
    "parse_line",
    "split_stages",
    "strip_trailing_marker",
]

logger = logging.getLogger(__name__)


def has_background_marker(line: str, marker: str = "&") -> bool:
    """Check whether the background marker appears anywhere in a line.

    Args:
        line: The raw, unmodified input line
        marker: The background marker character

    Returns:
        True if the marker is present, False otherwise
    """
    return marker in line


def strip_trailing_marker(line: str, marker: str = "&") -> str:
    """Remove a background marker sitting at the end of a line.

    Markers anywhere else are left in place.
    """
    trimmed = line.rstrip()
    if trimmed.endswith(marker):
        return trimmed[: -len(marker)]
    return line


def _resolve_marker(background_marker: str | None, strip_background_marker: bool | None) -> tuple[str, bool]:
    if background_marker is None:
        background_marker = config.BACKGROUND_MARKER
    if strip_background_marker is None:
        strip_background_marker = config.STRIP_BACKGROUND_MARKER
    problem = config.marker_problem(background_marker)
    if problem:
        raise ValueError(problem)
    return background_marker, strip_background_marker


def _split_line(line: str, marker: str, strip_marker: bool) -> tuple[list[str], Path | None, Path | None, bool]:
    background = has_background_marker(line, marker)
    text = strip_trailing_marker(line, marker) if background and strip_marker else line

    try:
        commands_part, input_path, output_path = extract_redirections(text)
        stages = split_pipeline(commands_part)
    except ParseError as e:
        e.line = line
        logger.debug(f"Rejected line ({type(e).__name__}): {line!r}")
        raise
    return stages, input_path, output_path, background


def split_stages(
    line: str,
    *,
    background_marker: str | None = None,
    strip_background_marker: bool | None = None,
) -> list[str]:
    """Split a line into its pipeline stages without tokenizing them.

    The background marker and redirection clauses are handled exactly as in
    parse_line, so the stages match the commands parse_line would build.

    Raises:
        ValueError: If the background marker is unusable
        EmptyCommandToken: If a pipeline stage is blank
        MalformedRedirection: If a redirection operator has no path
    """
    marker, strip_marker = _resolve_marker(background_marker, strip_background_marker)
    stages, _, _, _ = _split_line(line, marker, strip_marker)
    return stages


def parse_line(
    line: str,
    *,
    background_marker: str | None = None,
    strip_background_marker: bool | None = None,
) -> Pipeline:
    """Parse a single input line into a Pipeline.

    Args:
        line: The input line, without its trailing newline
        background_marker: Marker character (defaults to config.BACKGROUND_MARKER)
        strip_background_marker: Strip a trailing marker before parsing
            (defaults to config.STRIP_BACKGROUND_MARKER)

    Returns:
        Pipeline with the ordered commands, redirections and background flag

    Raises:
        TypeError: If line is not a string
        ValueError: If the background marker is not a single character
            distinct from the operators and whitespace
        EmptyCommandToken: If a pipeline stage is blank
        MalformedRedirection: If a redirection operator has no path
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be a str, not {type(line).__name__}")

    marker, strip_marker = _resolve_marker(background_marker, strip_background_marker)
    stages, input_path, output_path, background = _split_line(line, marker, strip_marker)

    try:
        commands = tuple(tokenize_stage(stage) for stage in stages)
    except ParseError as e:
        e.line = line
        raise

    pipeline = Pipeline(
        commands=commands,
        input_redirect=input_path,
        output_redirect=output_path,
        background=background,
    )
    logger.debug(f"Parsed {len(commands)} command(s) from line: {line!r}")
    return pipeline
