"""Integration tests for the Shell Line MCP Server surface."""

import logging

import pytest

from shell_line_mcp.server import mcp, parse_shell_line, split_shell_pipeline

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def mcp_client():
    """Return the FastMCP server instance for testing."""
    return mcp


@pytest.mark.integration
class TestServerIntegration:
    """Integration tests for the Shell Line MCP Server."""

    @pytest.mark.asyncio
    async def test_server_registrations(self, mcp_client):
        """Test that tools, resources and prompts are all registered."""
        tools = await mcp_client.list_tools()
        resources = await mcp_client.list_resources()
        prompts = await mcp_client.list_prompts()

        assert {tool.name for tool in tools} == {"parse_shell_line", "split_shell_pipeline"}
        assert {str(resource.uri) for resource in resources} == {
            "shell://syntax/operators",
            "shell://config/parser",
        }
        assert {prompt.name for prompt in prompts} == {"explain_pipeline", "build_pipeline"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "line,expected_names,expected_input,expected_output,expected_background",
        [
            ("ls", ["ls"], None, None, False),
            ("ls -l | grep py | wc -l", ["ls", "grep", "wc"], None, None, False),
            ("cat < in.txt > out.txt", ["cat"], "in.txt", "out.txt", False),
            ("cat > out.txt < in.txt", ["cat"], "in.txt", "out.txt", False),
            ("find . -name x | sort > found.txt &", ["find", "sort"], None, "found.txt", True),
            ("> truncated.txt", [], None, "truncated.txt", False),
        ],
    )
    async def test_parse_shell_line_scenarios(
        self,
        line,
        expected_names,
        expected_input,
        expected_output,
        expected_background,
    ):
        """Test parse_shell_line with various lines using table-driven tests."""
        result = await parse_shell_line(line=line, ctx=None)

        assert result["status"] == "success", result["output"]
        pipeline = result["pipeline"]
        assert [command["name"] for command in pipeline["commands"]] == expected_names
        assert pipeline["input_redirect"] == expected_input
        assert pipeline["output_redirect"] == expected_output
        assert pipeline["background"] is expected_background

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "line",
        [
            "cat access.log | grep ERROR | sort -r > errors.txt",
            "ls | sort &",
            "tar -czf backup.tgz data | wc -c > size.txt &",
            "sleep 5&",
        ],
    )
    async def test_split_then_parse_agree(self, line):
        """Test that both tools see the same stages."""
        split_result = await split_shell_pipeline(line=line, ctx=None)
        parse_result = await parse_shell_line(line=line, ctx=None)

        assert len(split_result["stages"]) == len(parse_result["pipeline"]["commands"])
        for stage, command in zip(split_result["stages"], parse_result["pipeline"]["commands"], strict=True):
            assert stage == " ".join([command["name"], *command["arguments"]])
