"""Scoping of the tool context (configuration and HTTP client) to a tool call.

Typical usage is ``with set_tool_context(context):`` at an entry point, e.g. per
MCP request or CLI invocation. Handlers then call ``get_tool_context()``.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_tool_context: ContextVar[Any | None] = ContextVar("tool_context", default=None)


def get_tool_context() -> Any:
    """Get current tool context from contextvar.

    Raises:
        RuntimeError: If no context is set (tool called outside an adapter)
    """
    context = _tool_context.get()
    if context is None:
        raise RuntimeError(
            "No tool context available. Ensure tools are called within "
            "a configured adapter (FastMCP, CLI, etc.)"
        )
    return context


@contextmanager
def set_tool_context(context: Any):
    """Context manager to set tool context for a block of code.

    Usage:
        with set_tool_context(my_context):
            response = await registry.invoke("get_posts", {})
    """
    token = _tool_context.set(context)
    try:
        yield
    finally:
        _tool_context.reset(token)
