"""Tests for tool context scoping."""

import pytest

from wpmcp.context import get_tool_context, set_tool_context


def test_no_context_outside_adapter():
    with pytest.raises(RuntimeError, match="No tool context available"):
        get_tool_context()


def test_context_is_scoped(context):
    with set_tool_context(context):
        assert get_tool_context() is context
        assert get_tool_context().client.config.api_url == "https://blog.example.com/wp-json/wp/v2"
    with pytest.raises(RuntimeError):
        get_tool_context()


@pytest.mark.asyncio
async def test_tool_without_context_returns_error_envelope():
    from wpmcp.registry import REGISTRY

    response = await REGISTRY.invoke("get_settings", {})
    assert response.is_error
    assert "No tool context available" in response.text
