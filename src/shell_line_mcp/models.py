"""Data model for parsed shell lines.

A Command holds an executable name and its arguments. A Pipeline holds the
ordered commands of one input line together with the optional input/output
redirection paths and the background flag. Both are immutable.
"""

from pathlib import Path
from typing import Any, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, Field


class Command(BaseModel):
    """One executable invocation within a pipeline."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Executable token")
    arguments: tuple[str, ...] = Field(default=(), description="Arguments in left-to-right order")

    def to_line(self) -> str:
        """Rebuild the command text, joining name and arguments by single spaces."""
        return " ".join((self.name, *self.arguments))


class Pipeline(BaseModel):
    """Parse result for a single input line.

    Redirection paths are pathlib.Path values, so they carry the normalized
    form of what was typed (no trailing slash, no leading "./").
    """

    model_config = ConfigDict(frozen=True)

    commands: tuple[Command, ...] = ()
    input_redirect: Path | None = None
    output_redirect: Path | None = None
    background: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def is_pipe(self) -> bool:
        return len(self.commands) > 1

    def to_line(self, background_marker: str = "&") -> str:
        """Rebuild a canonical line for this pipeline.

        Redirections are emitted input first, then output, and the background
        marker is appended last.

        Args:
            background_marker: Marker character to append when backgrounded

        Returns:
            The reconstructed line
        """
        parts = [" | ".join(command.to_line() for command in self.commands)] if self.commands else []
        if self.input_redirect is not None:
            parts.append(f"< {self.input_redirect}")
        if self.output_redirect is not None:
            parts.append(f"> {self.output_redirect}")
        if self.background:
            parts.append(background_marker)
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the pipeline."""
        return {
            "commands": [{"name": command.name, "arguments": list(command.arguments)} for command in self.commands],
            "input_redirect": str(self.input_redirect) if self.input_redirect is not None else None,
            "output_redirect": str(self.output_redirect) if self.output_redirect is not None else None,
            "background": self.background,
        }


class ParseResult(TypedDict):
    """Type definition for parse tool results."""

    status: str
    output: str
    pipeline: NotRequired[dict[str, Any]]
    error_kind: NotRequired[str]
