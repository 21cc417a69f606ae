"""Site-wide tools: settings, post types, statuses, taxonomies, blocks, search and health."""

from typing import Annotated, Literal
from urllib.parse import quote

from pydantic import EmailStr, Field

from wpmcp.context import get_tool_context
from wpmcp.fields import FieldSpec, OpenClosed
from wpmcp.formatting import count_items, success
from wpmcp.models import ToolResponse
from wpmcp.registry import register

SETTINGS_PATH = "/settings"
POST_TYPES_PATH = "/types"
POST_STATUSES_PATH = "/statuses"
TAXONOMIES_PATH = "/taxonomies"
BLOCK_TYPES_PATH = "/block-types"
SEARCH_PATH = "/search"
SITE_HEALTH_PATH = "/site-health/tests"

SETTINGS_FIELDS = (
    FieldSpec("title", str, "Site title"),
    FieldSpec("description", str, "Site tagline"),
    FieldSpec("url", str, "Site URL"),
    FieldSpec("email", EmailStr, "Administration email address"),
    FieldSpec("timezone", str, "City in the same timezone as the site"),
    FieldSpec("date_format", str, "Format for all date strings"),
    FieldSpec("time_format", str, "Format for all time strings"),
    FieldSpec("start_of_week", int, "Day the week starts on (0 = Sunday)", ge=0, le=6),
    FieldSpec("language", str, "WordPress locale code"),
    FieldSpec("use_smilies", bool, "Convert emoticons to graphics"),
    FieldSpec("default_category", int, "Default post category ID"),
    FieldSpec("default_post_format", str, "Default post format"),
    FieldSpec("posts_per_page", int, "Blog pages show at most this many posts", ge=1),
    FieldSpec("default_ping_status", OpenClosed, "Default ping status for new posts"),
    FieldSpec("default_comment_status", OpenClosed, "Default comment status for new posts"),
)


def _client():
    return get_tool_context().client


@register(tags=["system"])
async def get_settings() -> ToolResponse:
    """Get the site settings."""
    return success(await _client().get(SETTINGS_PATH), "WordPress settings retrieved")


@register(fields=SETTINGS_FIELDS, tags=["system"])
async def update_settings(**settings) -> ToolResponse:
    """Update site settings. Only the supplied settings change."""
    updated = await _client().post(SETTINGS_PATH, settings)
    return success(updated, "✅ WordPress settings updated successfully!")


@register(tags=["system"])
async def get_post_types() -> ToolResponse:
    """List the registered post types."""
    post_types = await _client().get(POST_TYPES_PATH)
    return success(post_types, f"Found {count_items(post_types)} post types")


@register(tags=["system"])
async def get_post_type(type: str) -> ToolResponse:
    """Get one post type.

    Args:
        type: Post type key, e.g. post or page
    """
    post_type = await _client().get(f"{POST_TYPES_PATH}/{quote(type, safe='')}")
    return success(post_type, f"Post type details for: {type}")


@register(tags=["system"])
async def get_post_statuses() -> ToolResponse:
    """List the registered post statuses."""
    statuses = await _client().get(POST_STATUSES_PATH)
    return success(statuses, f"Found {count_items(statuses)} post statuses")


@register(tags=["system"])
async def get_post_status(status: str) -> ToolResponse:
    """Get one post status.

    Args:
        status: Status key, e.g. publish or draft
    """
    post_status = await _client().get(f"{POST_STATUSES_PATH}/{quote(status, safe='')}")
    return success(post_status, f"Post status details for: {status}")


@register(tags=["system"])
async def get_taxonomies(type: str | None = None) -> ToolResponse:
    """List the registered taxonomies.

    Args:
        type: Limit results to taxonomies associated with this post type
    """
    taxonomies = await _client().get(TAXONOMIES_PATH, {"type": type})
    return success(taxonomies, f"Found {count_items(taxonomies)} taxonomies")


@register(tags=["system"])
async def get_taxonomy(taxonomy: str) -> ToolResponse:
    """Get one taxonomy.

    Args:
        taxonomy: Taxonomy key, e.g. category or post_tag
    """
    details = await _client().get(f"{TAXONOMIES_PATH}/{quote(taxonomy, safe='')}")
    return success(details, f"Taxonomy details for: {taxonomy}")


@register(tags=["system"])
async def get_block_types(namespace: str | None = None) -> ToolResponse:
    """List the registered block types.

    Args:
        namespace: Limit results to a block namespace, e.g. core
    """
    block_types = await _client().get(BLOCK_TYPES_PATH, {"namespace": namespace})
    return success(block_types, f"Found {count_items(block_types)} block types")


@register(tags=["system"])
async def get_block_type(namespace: str, name: str) -> ToolResponse:
    """Get one block type.

    Args:
        namespace: Block namespace, e.g. core
        name: Block name within the namespace, e.g. paragraph
    """
    path = f"{BLOCK_TYPES_PATH}/{quote(namespace, safe='')}/{quote(name, safe='')}"
    block_type = await _client().get(path)
    return success(block_type, f"Block type details for: {namespace}/{name}")


@register(tags=["system"])
async def search_wordpress(
    search: str,
    type: list[Literal["post", "page", "attachment"]] | None = None,
    subtype: list[str] | None = None,
    per_page: Annotated[int, Field(ge=1, le=100)] | None = None,
    page: Annotated[int, Field(ge=1)] | None = None,
) -> ToolResponse:
    """Search across all content on the site.

    Args:
        search: Search terms
        type: Object types to search
        subtype: Object subtypes to search, e.g. post or page
        per_page: Maximum number of results per page (1-100)
        page: Page of results to return
    """
    results = await _client().get(
        SEARCH_PATH,
        {"search": search, "type": type, "subtype": subtype, "per_page": per_page, "page": page},
    )
    return success(results, f'Found {count_items(results)} search results for: "{search}"')


@register(tags=["system"])
async def get_site_health() -> ToolResponse:
    """Get the site health test results."""
    return success(await _client().get(SITE_HEALTH_PATH), "Site health information retrieved")
