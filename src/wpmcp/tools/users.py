"""User tools, including the current user and application passwords."""

from typing import Literal
from urllib.parse import quote

from pydantic import EmailStr

from wpmcp.context import get_tool_context
from wpmcp.fields import FieldSpec, RequestContext, ordering
from wpmcp.formatting import count_items, success
from wpmcp.models import ToolResponse
from wpmcp.registry import register
from wpmcp.tools.resources import ResourceFamily, SummaryField, register_resource_family

UserOrderBy = Literal["id", "include", "name", "registered_date", "slug", "email", "url"]

USER_PROFILE_FIELDS = (
    FieldSpec("name", str, "Display name"),
    FieldSpec("first_name", str, "First name"),
    FieldSpec("last_name", str, "Last name"),
    FieldSpec("url", str, "Website URL"),
    FieldSpec("description", str, "Biographical info"),
    FieldSpec("nickname", str, "Nickname"),
    FieldSpec("slug", str, "URL slug"),
    FieldSpec("roles", list[str], "Roles assigned to the user"),
)

USERS = ResourceFamily(
    singular="user",
    plural="users",
    path="/users",
    label="User",
    list_fields=(
        FieldSpec("context", RequestContext, "Scope under which the request is made"),
        FieldSpec("search", str, "Limit results to those matching a string"),
        *ordering(UserOrderBy),
        FieldSpec("roles", list[str], "Limit results to users with these roles"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
        FieldSpec("slug", list[str], "Limit results to these slugs"),
    ),
    create_fields=(
        FieldSpec("username", str, "Login name", required=True),
        FieldSpec("email", EmailStr, "Email address", required=True),
        FieldSpec("password", str, "Password", required=True),
        *USER_PROFILE_FIELDS,
    ),
    update_fields=(
        FieldSpec("email", EmailStr, "Email address"),
        *USER_PROFILE_FIELDS,
        FieldSpec("password", str, "New password"),
    ),
    delete_fields=(
        FieldSpec("reassign", int, "ID of the user to reassign the deleted user's content to"),
    ),
    summary=(
        SummaryField("ID", "id"),
        SummaryField("Username", "username", fallback_arg="username"),
        SummaryField("Email", "email", fallback_arg="email"),
    ),
    update_summary=(
        SummaryField("ID", "id"),
        SummaryField("Name", "name"),
    ),
)

register_resource_family(USERS)


@register(tags=["users"])
async def get_current_user() -> ToolResponse:
    """Get the user the configured credentials authenticate as."""
    user = await get_tool_context().client.get(f"{USERS.path}/me")
    return success(user, "Current user details")


def _passwords_path(user_id: int) -> str:
    return f"{USERS.item_path(user_id)}/application-passwords"


@register(tags=["users"])
async def get_application_passwords(user_id: int) -> ToolResponse:
    """List a user's application passwords.

    Args:
        user_id: ID of the user
    """
    passwords = await get_tool_context().client.get(_passwords_path(user_id))
    return success(
        passwords,
        f"Found {count_items(passwords)} application passwords for user {user_id}",
    )


@register(tags=["users"])
async def create_application_password(user_id: int, name: str) -> ToolResponse:
    """Create an application password for a user.

    Args:
        user_id: ID of the user
        name: Name identifying the application
    """
    created = await get_tool_context().client.post(_passwords_path(user_id), {"name": name})
    password = created.get("password") if isinstance(created, dict) else None
    return success(
        created,
        "✅ Application password created successfully!\n\n"
        f"Name: {name}\n"
        f"⚠️  Save this password: {password}\n"
        "It will not be shown again!",
    )


@register(tags=["users"])
async def delete_application_password(user_id: int, uuid: str) -> ToolResponse:
    """Revoke one of a user's application passwords.

    Args:
        user_id: ID of the user
        uuid: UUID of the application password
    """
    result = await get_tool_context().client.delete(
        f"{_passwords_path(user_id)}/{quote(uuid, safe='')}"
    )
    return success(result, "✅ Application password deleted successfully!")
