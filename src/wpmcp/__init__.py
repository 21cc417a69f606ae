"""wpmcp - the WordPress REST API as MCP tools."""

from wpmcp.client import WordPressClient
from wpmcp.config import Config
from wpmcp.context import get_tool_context, set_tool_context
from wpmcp.encoding import build_json_body, build_query_string
from wpmcp.errors import (
    MediaMetadataError,
    NotFoundError,
    ToolArgumentError,
    WordPressAPIError,
    WordPressError,
)
from wpmcp.fields import FieldSpec
from wpmcp.formatting import failure, success
from wpmcp.function_schema import FunctionDescription
from wpmcp.models import TextContent, ToolResponse
from wpmcp.registry import REGISTRY, Registry, register

__all__ = [
    # Registry and tool descriptions
    "register",
    "REGISTRY",
    "Registry",
    "FunctionDescription",
    "FieldSpec",
    # HTTP layer
    "Config",
    "WordPressClient",
    "build_query_string",
    "build_json_body",
    # Envelopes
    "ToolResponse",
    "TextContent",
    "success",
    "failure",
    # Errors
    "WordPressError",
    "WordPressAPIError",
    "NotFoundError",
    "MediaMetadataError",
    "ToolArgumentError",
    # Context management
    "get_tool_context",
    "set_tool_context",
]
