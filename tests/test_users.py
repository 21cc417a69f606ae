"""Tests for the user and application password tools."""

import pytest

pytestmark = pytest.mark.asyncio


async def test_get_users_roles(call_tool, wordpress):
    wordpress.queue(json=[{"id": 1}])
    response = await call_tool("get_users", {"roles": ["editor", "author"]})
    assert wordpress.last.url.params.get_list("roles") == ["editor", "author"]
    assert "Found 1 users" in response.text


async def test_create_user(call_tool, wordpress):
    wordpress.queue(201, json={"id": 4, "username": "jo", "email": "jo@example.com"})
    response = await call_tool(
        "create_user", {"username": "jo", "email": "jo@example.com", "password": "pw"}
    )
    assert wordpress.body(wordpress.last) == {
        "username": "jo",
        "email": "jo@example.com",
        "password": "pw",
    }
    assert "Username: jo\nEmail: jo@example.com" in response.text


async def test_create_user_rejects_bad_email(call_tool, wordpress):
    response = await call_tool("create_user", {"username": "jo", "email": "nope", "password": "pw"})
    assert response.is_error
    assert "email" in response.text
    assert wordpress.requests == []


async def test_update_user(call_tool, wordpress):
    wordpress.queue(json={"id": 4, "name": "Jo Smith"})
    response = await call_tool("update_user", {"id": 4, "name": "Jo Smith"})
    assert wordpress.last.url.path == "/wp-json/wp/v2/users/4"
    assert "ID: 4\nName: Jo Smith" in response.text


async def test_delete_user_with_reassign(call_tool, wordpress):
    wordpress.queue(json={"deleted": True})
    response = await call_tool("delete_user", {"id": 4, "force": True, "reassign": 1})
    assert wordpress.body(wordpress.last) == {"force": True, "reassign": 1}
    assert "User permanently deleted" in response.text


async def test_get_current_user(call_tool, wordpress):
    wordpress.queue(json={"id": 1, "name": "admin"})
    response = await call_tool("get_current_user")
    assert wordpress.last.url.path == "/wp-json/wp/v2/users/me"
    assert response.text.startswith("Current user details")


async def test_application_passwords(call_tool, wordpress):
    wordpress.queue(json=[{"uuid": "a"}, {"uuid": "b"}])
    wordpress.queue(201, json={"uuid": "c", "name": "ci", "password": "xxxx yyyy"})
    wordpress.queue(json={"deleted": True})

    listing = await call_tool("get_application_passwords", {"user_id": 2})
    created = await call_tool("create_application_password", {"user_id": 2, "name": "ci"})
    deleted = await call_tool("delete_application_password", {"user_id": 2, "uuid": "c"})

    listed, posted, removed = wordpress.requests
    assert listed.url.path == "/wp-json/wp/v2/users/2/application-passwords"
    assert "Found 2 application passwords for user 2" in listing.text

    assert wordpress.body(posted) == {"name": "ci"}
    assert "Save this password: xxxx yyyy" in created.text

    assert removed.method == "DELETE"
    assert removed.url.path == "/wp-json/wp/v2/users/2/application-passwords/c"
    assert "Application password deleted" in deleted.text
