"""Tests for the package initialization module."""

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pytest


@pytest.fixture
def fresh_module():
    """Remove shell_line_mcp from sys.modules for clean import."""
    saved = sys.modules.pop("shell_line_mcp", None)
    yield
    sys.modules.pop("shell_line_mcp", None)
    if saved is not None:
        sys.modules["shell_line_mcp"] = saved


def test_version_from_package(fresh_module):
    with patch("importlib.metadata.version", return_value="1.2.3"):
        import shell_line_mcp

        assert shell_line_mcp.__version__ == "1.2.3"


def test_version_fallback_on_package_not_found(fresh_module):
    with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
        import shell_line_mcp

        assert not hasattr(shell_line_mcp, "__version__")
