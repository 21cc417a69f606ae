"""Generic CRUD tool group for one WordPress resource type.

Each resource family (posts, pages, ...) is described by a ``ResourceFamily``
table; ``register_resource_family`` turns that table into the list, get,
create, update and delete tools. Operations that do not fit this shape are
registered by the family modules themselves with the helpers below.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from wpmcp.context import get_tool_context
from wpmcp.encoding import build_json_body
from wpmcp.errors import NotFoundError, WordPressAPIError
from wpmcp.fields import FieldSpec, force, identifier, pagination
from wpmcp.formatting import count_items, success
from wpmcp.models import ToolResponse
from wpmcp.registry import REGISTRY, Registry


@dataclass(frozen=True)
class SummaryField:
    """A labelled value shown in the summary line of a write operation.

    ``rendered`` reads ``data[key]["rendered"]`` when the field is an object, as
    WordPress returns for titles and captions. ``fallback_arg`` names an input
    argument used when the response lacks the value. A field without ``key``
    always shows the argument.
    """

    label: str
    key: str | None = None
    rendered: bool = False
    fallback_arg: str | None = None

    @classmethod
    def argument(cls, label: str, name: str) -> "SummaryField":
        return cls(label, fallback_arg=name)

    def value(self, data: Any, args: dict[str, Any]) -> Any:
        value = data.get(self.key) if self.key and isinstance(data, dict) else None
        if self.rendered and isinstance(value, dict):
            value = value.get("rendered")
        if value in (None, "") and self.fallback_arg:
            value = args.get(self.fallback_arg)
        return value


def summarize(headline: str, fields: tuple[SummaryField, ...], data: Any, args: dict[str, Any]) -> str:
    if not fields:
        return headline
    lines = [f"{f.label}: {_display(f.value(data, args))}" for f in fields]
    return headline + "\n\n" + "\n".join(lines)


def _display(value: Any) -> str:
    return "unknown" if value is None else str(value)


@dataclass(frozen=True)
class ResourceFamily:
    """Declarative description of a resource's standard tools."""

    singular: str
    plural: str
    path: str
    label: str
    list_fields: tuple[FieldSpec, ...]
    create_fields: tuple[FieldSpec, ...] | None
    update_fields: tuple[FieldSpec, ...]
    summary: tuple[SummaryField, ...] = ()
    update_summary: tuple[SummaryField, ...] | None = None
    delete_fields: tuple[FieldSpec, ...] = ()
    list_noun: str | None = None
    list_tool: str | None = None
    get_tool: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def item_path(self, item_id: Any) -> str:
        return f"{self.path}/{item_id}"

    @property
    def noun(self) -> str:
        return self.list_noun or self.plural


def _list_tool(family: ResourceFamily) -> Callable:
    async def handler(**params) -> ToolResponse:
        items = await get_tool_context().client.get(family.path, params)
        return success(items, f"Found {count_items(items)} {family.noun}")

    return handler


def _get_tool(family: ResourceFamily) -> Callable:
    async def handler(id: int) -> ToolResponse:
        item = await get_tool_context().client.get(family.item_path(id))
        return success(item, f"{family.label} details for ID: {id}")

    return handler


def _create_tool(family: ResourceFamily) -> Callable:
    async def handler(**params) -> ToolResponse:
        item = await get_tool_context().client.post(family.path, params)
        message = summarize(f"✅ {family.label} created successfully!", family.summary, item, params)
        return success(item, message)

    return handler


def _update_tool(family: ResourceFamily) -> Callable:
    summary = family.summary if family.update_summary is None else family.update_summary

    async def handler(id: int, **params) -> ToolResponse:
        item = await get_tool_context().client.post(family.item_path(id), params)
        message = summarize(f"✅ {family.label} updated successfully!", summary, item, params)
        return success(item, message)

    return handler


def _delete_tool(family: ResourceFamily) -> Callable:
    async def handler(id: int, force: bool = False, **params) -> ToolResponse:
        result = await get_tool_context().client.delete(
            family.item_path(id), {"force": force, **params}
        )
        return success(result, delete_message(family.label, force))

    return handler


def delete_message(label: str, forced: bool) -> str:
    outcome = "permanently deleted" if forced else "moved to trash"
    return f"✅ {label} {outcome} successfully!"


def register_resource_family(family: ResourceFamily, registry: Registry | None = None) -> None:
    """Register the list, get, create, update and delete tools for ``family``.

    The create tool is skipped when ``family.create_fields`` is None.
    """
    registry = registry or REGISTRY
    tags = list(family.tags) or [family.plural]
    label = family.label.lower()

    registry.register(
        _list_tool(family),
        name=family.list_tool or f"get_{family.plural}",
        fields=(*pagination(), *family.list_fields),
        description=f"List {family.noun} with optional filters, pagination and ordering.",
        tags=tags,
    )
    registry.register(
        _get_tool(family),
        name=family.get_tool or f"get_{family.singular}",
        fields=(identifier(description=f"ID of the {label}"),),
        description=f"Get a single {label} by ID.",
        tags=tags,
    )
    if family.create_fields is not None:
        registry.register(
            _create_tool(family),
            name=f"create_{family.singular}",
            fields=family.create_fields,
            description=f"Create a new {label}.",
            tags=tags,
        )
    registry.register(
        _update_tool(family),
        name=f"update_{family.singular}",
        fields=(identifier(description=f"ID of the {label} to update"), *family.update_fields),
        description=f"Update an existing {label}. Only the supplied fields change.",
        tags=tags,
    )
    registry.register(
        _delete_tool(family),
        name=f"delete_{family.singular}",
        fields=(
            identifier(description=f"ID of the {label} to delete"),
            force(),
            *family.delete_fields,
        ),
        description=f"Delete a {label}; moved to the trash unless force is true.",
        tags=tags,
    )


async def find_by_slug(path: str, slug: str, label: str, **filters: Any) -> ToolResponse:
    """Return the first item whose slug matches; zero matches is an error.

    Slug matching is left to the remote API.
    """
    query = build_json_body({"slug": [slug], **filters})
    items = await get_tool_context().client.get(path, query)
    if not isinstance(items, list):
        raise WordPressAPIError(
            f"Expected a list of {label}s from {path}, got {type(items).__name__}"
        )
    if not items:
        raise NotFoundError(f"No {label} found with slug: {slug}")
    return success(items[0], f"{label.title()} found with slug: {slug}")


async def list_related(path: str, message: str, **query: Any) -> ToolResponse:
    items = await get_tool_context().client.get(path, query)
    return success(items, message.format(count=count_items(items)))
