"""Exception types raised while parsing a shell line."""


class ParseError(Exception):
    """Base class for all parse errors.

    The offending line is kept on the exception so that callers can echo it
    back in a diagnostic before discarding it.
    """

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} in line: {self.line!r}"


class EmptyCommandToken(ParseError):
    """Raised when a pipeline stage has no executable token."""


class MalformedRedirection(ParseError):
    """Raised when a redirection operator has no usable path."""


class UnbalancedRedirection(MalformedRedirection):
    """Raised when a redirection operator is repeated within a line."""
