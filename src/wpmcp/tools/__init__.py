"""WordPress tool catalog; importing this package registers every tool."""

from wpmcp.tools import comments, media, pages, posts, system, taxonomies, users

__all__ = ["comments", "media", "pages", "posts", "system", "taxonomies", "users"]
