"""FastMCP adapter for registry tools."""

import logging
from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.server import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from wpmcp.context import set_tool_context
from wpmcp.function_schema import FunctionDescription
from wpmcp.registry import REGISTRY, Registry
from wpmcp.tools.context import ToolContext

logger = logging.getLogger(__name__)


class RegistryTool(Tool):
    """MCP tool backed by a registry entry.

    Arguments are validated by the registry, not by FastMCP. A success envelope
    becomes text content; an error envelope becomes an MCP error result with the
    same text.
    """

    func_desc: Any = Field(exclude=True)
    context: Any = Field(exclude=True)

    @classmethod
    def from_description(cls, func_desc: FunctionDescription, context: ToolContext) -> "RegistryTool":
        return cls(
            name=func_desc.name,
            description=func_desc.description,
            parameters=func_desc.args_json_schema,
            tags=set(func_desc.tags),
            func_desc=func_desc,
            context=context,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        with set_tool_context(self.context):
            response = await self.func_desc.invoke(arguments)
        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(content=response.text)


def create_fastmcp_server(
    context: ToolContext,
    registry: Registry | None = None,
    name: str = "WordPress MCP Server",
) -> FastMCP:
    """Create a FastMCP server that exposes the registered WordPress tools.

    Args:
        context: ToolContext used for every tool call (required)
        registry: Registry to expose, defaults to the global one
        name: Server name

    Returns:
        FastMCP server with all registered tools

    Example:
        from wpmcp.adapters.fastmcp_adapter import create_fastmcp_server
        from wpmcp.tools.context import create_context

        server = create_fastmcp_server(context=create_context())
    """
    registry = registry or REGISTRY
    server = FastMCP(name)

    for func_desc in registry.functions:
        server.add_tool(RegistryTool.from_description(func_desc, context))

    logger.info(f"Exposing {len(registry.functions)} tools for {context.config.api_url}")
    return server
