"""Post tools: CRUD, revisions and lookup by slug."""

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

PostOrderBy = Literal[
    "author", "date", "id", "include", "modified", "parent", "relevance", "slug", "title"
]
RevisionOrderBy = Literal["date", "id", "include", "relevance", "slug", "title"]
PostFormat = Literal[
    "standard", "aside", "chat", "gallery", "link", "image", "quote", "status", "video", "audio"
]

POST_FIELDS = (
    FieldSpec("title", str, "Post title", required=True),
    FieldSpec("content", str, "Post content (HTML or block markup)", required=True),
    FieldSpec("excerpt", str, "Post excerpt"),
    FieldSpec("status", PostStatus, "Publication status; WordPress defaults to draft"),
    FieldSpec("slug", str, "URL slug"),
    FieldSpec("format", PostFormat, "Post format"),
    FieldSpec("categories", list[int], "Category IDs"),
    FieldSpec("tags", list[int], "Tag IDs"),
    FieldSpec("featured_media", int, "ID of the featured image"),
    FieldSpec("comment_status", OpenClosed, "Whether comments are open"),
    FieldSpec("ping_status", OpenClosed, "Whether pings are accepted"),
    FieldSpec("sticky", bool, "Whether the post is sticky"),
)

POSTS = ResourceFamily(
    singular="post",
    plural="posts",
    path="/posts",
    label="Post",
    list_fields=(
        FieldSpec("context", RequestContext, "Scope under which the request is made"),
        FieldSpec("search", str, "Limit results to those matching a string"),
        FieldSpec("status", str, "Limit results to a post status"),
        FieldSpec("author", list[int], "Limit results to these author IDs"),
        FieldSpec("author_exclude", list[int], "Exclude these author IDs"),
        FieldSpec("categories", list[int], "Limit results to these category IDs"),
        FieldSpec("categories_exclude", list[int], "Exclude these category IDs"),
        FieldSpec("tags", list[int], "Limit results to these tag IDs"),
        FieldSpec("tags_exclude", list[int], "Exclude these tag IDs"),
        FieldSpec("after", str, "Limit to posts published after this ISO 8601 date"),
        FieldSpec("before", str, "Limit to posts published before this ISO 8601 date"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
        FieldSpec("offset", int, "Offset the result set by this many items", ge=0),
        FieldSpec("slug", list[str], "Limit results to these slugs"),
        *ordering(PostOrderBy),
        FieldSpec("sticky", bool, "Limit results to sticky (or non-sticky) posts"),
    ),
    create_fields=POST_FIELDS,
    update_fields=tuple(spec.optional() for spec in POST_FIELDS),
    summary=(
        SummaryField("ID", "id"),
        SummaryField("Title", "title", rendered=True, fallback_arg="title"),
        SummaryField("Status", "status"),
    ),
)

register_resource_family(POSTS)


@register(
    fields=(
        identifier("post_id", "ID of the post"),
        *pagination(),
        *ordering(RevisionOrderBy),
    ),
    tags=["posts"],
)
async def get_post_revisions(post_id: int, **query) -> ToolResponse:
    """List the revisions of a post."""
    return await list_related(
        f"{POSTS.item_path(post_id)}/revisions",
        f"Found {{count}} revisions for post {post_id}",
        **query,
    )


@register(tags=["posts"])
async def get_post_by_slug(slug: str, status: list[str] | None = None) -> ToolResponse:
    """Get a single post by its slug. Only the first match is returned.

    Args:
        slug: Post slug to look up
        status: Post statuses to search (WordPress searches published posts by default)
    """
    return await find_by_slug(POSTS.path, slug, "post", status=status)
