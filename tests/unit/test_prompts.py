"""Unit tests for the prompts module."""

from unittest.mock import MagicMock

from shell_line_mcp.prompts import register_prompts


def _capture_prompts():
    """Register prompts against a mock server and return them by name."""
    mock_mcp = MagicMock()
    prompts = {}

    def prompt(name, description):
        def decorator(func):
            prompts[name] = func
            return func

        return decorator

    mock_mcp.prompt.side_effect = prompt
    register_prompts(mock_mcp)
    return prompts


def test_register_prompts():
    prompts = _capture_prompts()

    assert set(prompts) == {"explain_pipeline", "build_pipeline"}


def test_explain_pipeline():
    prompts = _capture_prompts()

    text = prompts["explain_pipeline"]("ls | wc -l > count.txt")

    assert "ls | wc -l > count.txt" in text
    assert "parse_shell_line" in text


def test_build_pipeline_uses_example_for_kind():
    prompts = _capture_prompts()

    text = prompts["build_pipeline"]("archive the data directory", kind="background")

    assert "archive the data directory" in text
    assert "tar -czf backup.tgz data &" in text


def test_build_pipeline_unknown_kind_falls_back():
    prompts = _capture_prompts()

    text = prompts["build_pipeline"]("anything", kind="unknown")

    assert "cat access.log | grep ERROR > errors.txt" in text
