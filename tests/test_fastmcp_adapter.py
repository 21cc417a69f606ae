"""Tests for the FastMCP adapter."""

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from wpmcp.adapters.fastmcp_adapter import RegistryTool, create_fastmcp_server
from wpmcp.registry import REGISTRY


def test_tool_from_description(context):
    tool = RegistryTool.from_description(REGISTRY.get_description("get_post"), context)
    assert tool.name == "get_post"
    assert tool.parameters["required"] == ["id"]
    assert tool.parameters["additionalProperties"] is False
    assert "posts" in tool.tags


@pytest.mark.asyncio
async def test_run_returns_text(context, wordpress):
    wordpress.queue(json={"id": 3})
    tool = RegistryTool.from_description(REGISTRY.get_description("get_post"), context)
    result = await tool.run({"id": 3})
    assert result.content[0].text.startswith("Post details for ID: 3")


@pytest.mark.asyncio
async def test_run_raises_error_text(context, wordpress):
    wordpress.queue(404, json={"message": "Invalid post ID."})
    tool = RegistryTool.from_description(REGISTRY.get_description("get_post"), context)
    with pytest.raises(ToolError, match="Error: Invalid post ID."):
        await tool.run({"id": 3})


@pytest.mark.asyncio
async def test_server_lists_every_tool(context):
    server = create_fastmcp_server(context=context)
    async with Client(server) as client:
        tools = await client.list_tools()
    assert {tool.name for tool in tools} == set(REGISTRY.names)


@pytest.mark.asyncio
async def test_server_call_round_trip(context, wordpress):
    wordpress.queue(json=[{"id": 1}, {"id": 2}])
    server = create_fastmcp_server(context=context)
    async with Client(server) as client:
        result = await client.call_tool("get_tags", {"per_page": 2})
    assert not result.is_error
    assert result.content[0].text.startswith("Found 2 tags")
    assert wordpress.last.url.params["per_page"] == "2"


@pytest.mark.asyncio
async def test_server_call_reports_errors(context, wordpress):
    server = create_fastmcp_server(context=context)
    async with Client(server) as client:
        result = await client.call_tool("get_tags", {"per_page": 500}, raise_on_error=False)
    assert result.is_error
    assert "100" in result.content[0].text
    assert wordpress.requests == []
