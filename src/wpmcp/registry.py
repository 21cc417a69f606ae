"""Global registry for tools."""

import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from wpmcp.fields import FieldSpec
from wpmcp.formatting import failure
from wpmcp.function_schema import FunctionDescription, JSONSchema
from wpmcp.models import ToolResponse

logger = logging.getLogger(__name__)


class Registry:
    """Catalog of tools, fixed once the tool modules are imported."""

    def __init__(self):
        self._tools: dict[str, FunctionDescription] = OrderedDict()

    def register(
        self,
        func: Callable,
        name: str | None = None,
        fields: Iterable[FieldSpec] | None = None,
        doc_override: str | None = None,
        description: str = "",
        tags: list[str] | None = None,
    ) -> FunctionDescription:
        """Register a tool handler and generate its schema.

        Args:
            func: Handler to register
            name: Tool name, defaults to the handler's name
            fields: Explicit argument fields; derived from the signature if omitted
            doc_override: Optional documentation override
            description: Tool description
            tags: List of tags for categorization

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        name = name or func.__name__

        if name in self._tools:
            raise ValueError(f"Tool {name} is already registered")

        func_desc = FunctionDescription(
            func,
            name=name,
            fields=fields,
            doc_override=doc_override,
            description=description,
            tags=tags,
        )

        self._tools[name] = func_desc
        logger.debug(f"Registered tool: {name}")
        return func_desc

    @property
    def functions(self) -> list[FunctionDescription]:
        """Get all registered tool descriptions."""
        return list(self._tools.values())

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get_description(self, name: str) -> FunctionDescription | None:
        """Get a tool description by name."""
        return self._tools.get(name)

    def get_function(self, name: str) -> Callable[..., Any]:
        """Get the raw handler by name."""
        func_desc = self._tools.get(name)
        if func_desc is None:
            raise KeyError(f"Tool '{name}' not found")
        return func_desc.function

    def get_schemas(self) -> list[JSONSchema]:
        """Get OpenAI-format schemas for all tools."""
        return [func_desc.function_schema for func_desc in self._tools.values()]

    async def invoke(self, name: str, arguments: dict | None = None) -> ToolResponse:
        """Run a tool by name; unknown names produce an error envelope."""
        func_desc = self._tools.get(name)
        if func_desc is None:
            return failure(f"Unknown tool: {name}")
        return await func_desc.invoke(arguments)


# Global registry instance
REGISTRY = Registry()

F = TypeVar("F", bound=Callable[..., Any])


def register(
    *,
    name: str | None = None,
    fields: Iterable[FieldSpec] | None = None,
    doc: str | None = None,
    description: str = "",
    tags: list[str] | None = None,
    registry: Registry | None = None,
) -> Callable[[F], F]:
    """
    Register a handler as a tool.

    Usage:
        @register()
        async def get_settings(): ...

        @register(name="update_settings", fields=SETTINGS_FIELDS, tags=["system"])
        async def update_settings(**settings): ...

    Args:
        name: Override tool name
        fields: Explicit argument fields for handlers taking ``**params``
        doc: Override docstring
        description: Tool description
        tags: List of tags for categorization
        registry: Target registry, defaults to the global one
    """
    def decorator(func: F) -> F:
        (registry or REGISTRY).register(
            func,
            name=name,
            fields=fields,
            doc_override=doc,
            description=description,
            tags=tags,
        )
        return func

    return decorator
