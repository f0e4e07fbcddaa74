"""Redirection clause extraction.

This module pulls the input (`<`) and output (`>`) redirection clauses off
the end of a line. It works on operator positions only: the first `<` and the
first `>` are located and their relative order decides how the trailing
redirection region is split. Paths may therefore contain neither operator
character.
"""

import logging
from pathlib import Path

from shell_line_mcp.config import INPUT_REDIRECT, OUTPUT_REDIRECT
from shell_line_mcp.errors import MalformedRedirection, UnbalancedRedirection

logger = logging.getLogger(__name__)


def _clean_path(raw: str, operator: str, line: str) -> Path:
    """Trim a raw path fragment and validate it.

    Args:
        raw: Text following the operator, up to the next clause
        operator: The operator the path belongs to, for diagnostics
        line: The full line, for diagnostics

    Returns:
        The path

    Raises:
        MalformedRedirection: If the path is empty
        UnbalancedRedirection: If the path contains another operator
    """
    path = raw.strip()
    if not path:
        raise MalformedRedirection(f"Missing path after '{operator}'", line)
    if INPUT_REDIRECT in path or OUTPUT_REDIRECT in path:
        raise UnbalancedRedirection(f"Repeated redirection operator after '{operator}'", line)
    # Path() normalizes: "out/" becomes "out" and "./log" becomes "log".
    return Path(path)


def extract_redirections(line: str) -> tuple[str, Path | None, Path | None]:
    """Split a line into its commands part and its redirection paths.

    Args:
        line: The raw input line

    Returns:
        Tuple of (commands substring, input path or None, output path or None)

    Raises:
        MalformedRedirection: If an operator is present without a path
    """
    pos_in = line.find(INPUT_REDIRECT)
    pos_out = line.find(OUTPUT_REDIRECT)

    if pos_in == -1 and pos_out == -1:
        return line, None, None

    if pos_in != -1 and pos_out != -1:
        if pos_in > pos_out:
            # cmd > out.txt < in.txt
            out_part, in_part = line[pos_out + 1 :].split(INPUT_REDIRECT, 1)
            input_path = _clean_path(in_part, INPUT_REDIRECT, line)
            output_path = _clean_path(out_part, OUTPUT_REDIRECT, line)
            commands = line[:pos_out]
        else:
            # cmd < in.txt > out.txt
            in_part, out_part = line[pos_in + 1 :].split(OUTPUT_REDIRECT, 1)
            input_path = _clean_path(in_part, INPUT_REDIRECT, line)
            output_path = _clean_path(out_part, OUTPUT_REDIRECT, line)
            commands = line[:pos_in]
    elif pos_in != -1:
        input_path = _clean_path(line[pos_in + 1 :], INPUT_REDIRECT, line)
        output_path = None
        commands = line[:pos_in]
    else:
        input_path = None
        output_path = _clean_path(line[pos_out + 1 :], OUTPUT_REDIRECT, line)
        commands = line[:pos_out]

    logger.debug(f"Extracted redirections: input={input_path}, output={output_path}")
    return commands, input_path, output_path
