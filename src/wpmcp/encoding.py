"""Query string and JSON body construction for REST requests."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """URL-encode ``params``, skipping absent values.

    List values become one ``key=value`` pair per element, in list order.
    Keys keep the mapping's iteration order.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            pairs.extend((key, _to_text(item)) for item in value if item is not None)
        else:
            pairs.append((key, _to_text(value)))
    return urlencode(pairs)


def build_endpoint(path: str, params: Mapping[str, Any] | None = None) -> str:
    query = build_query_string(params or {})
    return f"{path}?{query}" if query else path


def build_json_body(params: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` without absent values, for use as a JSON payload."""
    return {key: value for key, value in params.items() if value is not None}
