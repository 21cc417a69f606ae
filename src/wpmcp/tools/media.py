"""Media library tools: listing, upload with optional metadata, update and delete.

Uploading with metadata is two sequential requests: the binary upload, then a
metadata update of the new item. There is no rollback; if the second request
fails the item exists with default metadata and the error names its ID.
"""

import base64
import binascii
import logging
from typing import Literal
from urllib.parse import quote

from wpmcp.context import get_tool_context
from wpmcp.encoding import build_json_body
from wpmcp.errors import MediaMetadataError, WordPressError
from wpmcp.fields import FieldSpec, RequestContext, identifier, ordering, pagination
from wpmcp.formatting import success
from wpmcp.models import ToolResponse
from wpmcp.registry import register
from wpmcp.tools.posts import PostOrderBy
from wpmcp.tools.resources import (
    ResourceFamily,
    SummaryField,
    list_related,
    register_resource_family,
    summarize,
)

logger = logging.getLogger(__name__)

MediaType = Literal["image", "video", "text", "application", "audio"]

MEDIA_METADATA_FIELDS = (
    FieldSpec("title", str, "Media title"),
    FieldSpec("alt_text", str, "Alternative text for images"),
    FieldSpec("caption", str, "Caption"),
    FieldSpec("description", str, "Description"),
    FieldSpec("post", int, "ID of the post the media is attached to"),
)

MEDIA = ResourceFamily(
    singular="media",
    plural="media",
    path="/media",
    label="Media",
    list_noun="media items",
    list_tool="get_media",
    get_tool="get_media_item",
    list_fields=(
        FieldSpec("context", RequestContext, "Scope under which the request is made"),
        FieldSpec("search", str, "Limit results to those matching a string"),
        *ordering(PostOrderBy),
        FieldSpec("parent", int, "Limit results to media attached to this post ID"),
        FieldSpec("media_type", MediaType, "Limit results to a media type"),
        FieldSpec("mime_type", str, "Limit results to a MIME type, e.g. image/png"),
        FieldSpec("author", list[int], "Limit results to these author IDs"),
        FieldSpec("after", str, "Limit to media published after this ISO 8601 date"),
        FieldSpec("before", str, "Limit to media published before this ISO 8601 date"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
    ),
    create_fields=None,
    update_fields=MEDIA_METADATA_FIELDS,
    update_summary=(
        SummaryField("ID", "id"),
        SummaryField("Title", "title", rendered=True),
    ),
)

register_resource_family(MEDIA)


def content_disposition(filename: str) -> str:
    """Attachment header value; non-ASCII names use the RFC 5987 form."""
    fallback = filename.replace("\\", "_").replace('"', "_")
    try:
        fallback.encode("ascii")
    except UnicodeEncodeError:
        ascii_name = fallback.encode("ascii", "replace").decode().replace("?", "_")
        return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
    return f'attachment; filename="{fallback}"'


def decode_content(content_base64: str) -> bytes:
    try:
        return base64.b64decode(content_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"content_base64 is not valid base64: {e}") from e


UPLOAD_SUMMARY = (
    SummaryField("ID", "id"),
    SummaryField.argument("Filename", "filename"),
    SummaryField("URL", "source_url"),
)


def _upload_summary(headline: str, item, filename: str) -> str:
    return summarize(headline, UPLOAD_SUMMARY, item, {"filename": filename})


@register(tags=["media"])
async def upload_media(
    filename: str,
    content_base64: str,
    title: str | None = None,
    alt_text: str | None = None,
    caption: str | None = None,
    description: str | None = None,
    post: int | None = None,
) -> ToolResponse:
    """Upload a file to the media library, optionally setting its metadata.

    Args:
        filename: File name, including extension, used by WordPress to detect the type
        content_base64: File contents encoded as base64
        title: Media title
        alt_text: Alternative text for images
        caption: Caption
        description: Description
        post: ID of the post to attach the media to
    """
    client = get_tool_context().client
    data = decode_content(content_base64)

    uploaded = await client.upload(MEDIA.path, data, content_disposition(filename))

    metadata = build_json_body(
        {
            "title": title,
            "alt_text": alt_text,
            "caption": caption,
            "description": description,
            "post": post,
        }
    )
    if not metadata:
        return success(
            uploaded, _upload_summary("✅ Media uploaded successfully!", uploaded, filename)
        )

    media_id = uploaded.get("id") if isinstance(uploaded, dict) else None
    if media_id is None:
        raise MediaMetadataError(None, "the upload response did not include an ID")
    try:
        updated = await client.post(MEDIA.item_path(media_id), metadata)
    except WordPressError as e:
        logger.warning(f"Metadata update failed for uploaded media {media_id}: {e}")
        raise MediaMetadataError(media_id, str(e)) from e

    return success(
        updated, _upload_summary("✅ Media uploaded and updated successfully!", updated, filename)
    )


@register(
    fields=(
        identifier("post_id", "ID of the post"),
        *pagination(),
        *ordering(PostOrderBy),
        FieldSpec("media_type", MediaType, "Limit results to a media type"),
    ),
    tags=["media"],
)
async def get_media_by_post(post_id: int, **query) -> ToolResponse:
    """List the media attached to a post."""
    return await list_related(
        MEDIA.path,
        f"Found {{count}} media items for post {post_id}",
        parent=post_id,
        **query,
    )
