"""Page tools: CRUD, lookup by slug and child pages."""

from typing import Literal

from wpmcp.fields import (
    FieldSpec,
    OpenClosed,
    PostStatus,
    RequestContext,
    identifier,
    ordering,
    pagination,
)
from wpmcp.models import ToolResponse
from wpmcp.registry import register
from wpmcp.tools.resources import (
    ResourceFamily,
    SummaryField,
    find_by_slug,
    list_related,
    register_resource_family,
)

PageOrderBy = Literal[
    "author",
    "date",
    "id",
    "include",
    "modified",
    "parent",
    "relevance",
    "slug",
    "title",
    "menu_order",
]
ChildPageOrderBy = Literal["date", "id", "title", "menu_order"]

PAGE_FIELDS = (
    FieldSpec("title", str, "Page title", required=True),
    FieldSpec("content", str, "Page content (HTML or block markup)", required=True),
    FieldSpec("excerpt", str, "Page excerpt"),
    FieldSpec("status", PostStatus, "Publication status; WordPress defaults to draft"),
    FieldSpec("slug", str, "URL slug"),
    FieldSpec("parent", int, "ID of the parent page"),
    FieldSpec("menu_order", int, "Order of the page in menus"),
    FieldSpec("comment_status", OpenClosed, "Whether comments are open"),
    FieldSpec("ping_status", OpenClosed, "Whether pings are accepted"),
    FieldSpec("template", str, "Theme template file used to render the page"),
)

PAGES = ResourceFamily(
    singular="page",
    plural="pages",
    path="/pages",
    label="Page",
    list_fields=(
        FieldSpec("context", RequestContext, "Scope under which the request is made"),
        FieldSpec("search", str, "Limit results to those matching a string"),
        FieldSpec("status", str, "Limit results to a post status"),
        FieldSpec("author", list[int], "Limit results to these author IDs"),
        FieldSpec("author_exclude", list[int], "Exclude these author IDs"),
        FieldSpec("parent", int, "Limit results to children of this page ID"),
        FieldSpec("parent_exclude", list[int], "Exclude children of these page IDs"),
        FieldSpec("menu_order", int, "Limit results to pages with this menu order"),
        FieldSpec("after", str, "Limit to pages published after this ISO 8601 date"),
        FieldSpec("before", str, "Limit to pages published before this ISO 8601 date"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
        FieldSpec("offset", int, "Offset the result set by this many items", ge=0),
        *ordering(PageOrderBy),
    ),
    create_fields=PAGE_FIELDS,
    update_fields=tuple(spec.optional() for spec in PAGE_FIELDS),
    summary=(
        SummaryField("ID", "id"),
        SummaryField("Title", "title", rendered=True, fallback_arg="title"),
        SummaryField("Status", "status"),
    ),
)

register_resource_family(PAGES)


@register(tags=["pages"])
async def get_page_by_slug(slug: str, status: list[str] | None = None) -> ToolResponse:
    """Get a single page by its slug. Only the first match is returned.

    Args:
        slug: Page slug to look up
        status: Post statuses to search (WordPress searches published pages by default)
    """
    return await find_by_slug(PAGES.path, slug, "page", status=status)


@register(
    fields=(
        identifier("parent_id", "ID of the parent page"),
        *pagination(),
        *ordering(ChildPageOrderBy),
    ),
    tags=["pages"],
)
async def get_page_children(parent_id: int, **query) -> ToolResponse:
    """List the child pages of a page."""
    return await list_related(
        PAGES.path,
        f"Found {{count}} child pages for parent {parent_id}",
        parent=parent_id,
        **query,
    )
