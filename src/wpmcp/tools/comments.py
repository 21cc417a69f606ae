"""Comment tools."""

from typing import Literal

from pydantic import EmailStr

from wpmcp.fields import FieldSpec, identifier, ordering, pagination
from wpmcp.models import ToolResponse
from wpmcp.registry import register
from wpmcp.tools.resources import (
    ResourceFamily,
    SummaryField,
    list_related,
    register_resource_family,
)

CommentOrderBy = Literal["date", "date_gmt", "id", "include", "post", "parent", "type"]
CommentStatus = Literal["hold", "approve", "spam", "trash"]
CommentStatusFilter = Literal["hold", "approve", "all", "spam", "trash"]

COMMENTS = ResourceFamily(
    singular="comment",
    plural="comments",
    path="/comments",
    label="Comment",
    list_fields=(
        FieldSpec("search", str, "Limit results to those matching a string"),
        *ordering(CommentOrderBy),
        FieldSpec("post", list[int], "Limit results to comments on these post IDs"),
        FieldSpec("parent", int, "Limit results to replies to this comment ID"),
        FieldSpec("status", CommentStatusFilter, "Limit results to a comment status"),
        FieldSpec("type", str, "Limit results to a comment type"),
        FieldSpec("author_email", str, "Limit results to this author email"),
        FieldSpec("after", str, "Limit to comments published after this ISO 8601 date"),
        FieldSpec("before", str, "Limit to comments published before this ISO 8601 date"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
    ),
    create_fields=(
        FieldSpec("post", int, "ID of the post the comment belongs to", required=True),
        FieldSpec("content", str, "Comment content", required=True),
        FieldSpec("parent", int, "ID of the comment being replied to"),
        FieldSpec("author_name", str, "Author display name"),
        FieldSpec("author_email", EmailStr, "Author email"),
        FieldSpec("author_url", str, "Author website"),
        FieldSpec("status", CommentStatus, "Moderation status"),
    ),
    update_fields=(
        FieldSpec("content", str, "Comment content"),
        FieldSpec("status", CommentStatus, "Moderation status"),
        FieldSpec("author_name", str, "Author display name"),
        FieldSpec("author_email", EmailStr, "Author email"),
        FieldSpec("author_url", str, "Author website"),
    ),
    summary=(
        SummaryField("ID", "id"),
        SummaryField("Post", "post", fallback_arg="post"),
        SummaryField("Status", "status"),
    ),
    update_summary=(
        SummaryField("ID", "id"),
        SummaryField("Status", "status"),
    ),
)

register_resource_family(COMMENTS)


@register(
    fields=(
        identifier("post_id", "ID of the post"),
        *pagination(),
        *ordering(CommentOrderBy),
        FieldSpec("status", CommentStatusFilter, "Limit results to a comment status"),
    ),
    tags=["comments"],
)
async def get_comments_by_post(post_id: int, **query) -> ToolResponse:
    """List the comments on a post."""
    return await list_related(
        COMMENTS.path,
        f"Found {{count}} comments for post {post_id}",
        post=[post_id],
        **query,
    )
