"""Shell Line MCP Server - parse shell-like lines into pipelines."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("shell-line-mcp")
except PackageNotFoundError:
    pass
