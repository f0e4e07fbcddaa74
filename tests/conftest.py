"""Configuration for pytest."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as exercising the MCP server surface")


@pytest.fixture(autouse=True)
def default_parser_settings(monkeypatch):
    """Pin parser settings to their defaults regardless of the environment."""
    from shell_line_mcp import config

    monkeypatch.setattr(config, "BACKGROUND_MARKER", "&")
    monkeypatch.setattr(config, "STRIP_BACKGROUND_MARKER", True)
    monkeypatch.setattr(config, "MAX_LINE_LENGTH", 4096)


@pytest.fixture
def mock_ctx():
    """Return a mock MCP context with async logging methods."""
    from unittest.mock import AsyncMock

    return AsyncMock()
