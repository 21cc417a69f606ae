"""Build success and error envelopes.

Neither function raises: they are the last step of every tool invocation.
"""

import json
from typing import Any

from wpmcp.models import TextContent, ToolResponse


def to_pretty_json(data: Any) -> str:
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(data)


def success(data: Any, message: str | None = None) -> ToolResponse:
    body = to_pretty_json(data)
    text = f"{message}\n\n{body}" if message else body
    return ToolResponse(content=[TextContent(text=text)])


def error_message(err: Any) -> str:
    try:
        if isinstance(err, BaseException):
            return str(err) or type(err).__name__
        return str(err)
    except Exception:
        return object.__repr__(err)


def failure(err: Any) -> ToolResponse:
    return ToolResponse(
        content=[TextContent(text=f"Error: {error_message(err)}")],
        isError=True,
    )


def count_items(data: Any) -> int:
    """Number of entries in a list or mapping payload."""
    if isinstance(data, list | dict):
        return len(data)
    return 0 if data is None else 1
