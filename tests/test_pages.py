"""Tests for the page tools."""

import pytest

pytestmark = pytest.mark.asyncio


async def test_create_page(call_tool, wordpress):
    wordpress.queue(201, json={"id": 5, "title": {"rendered": "About"}, "status": "draft"})
    response = await call_tool(
        "create_page", {"title": "About", "content": "Us", "parent": 2, "template": "wide.php"}
    )
    assert wordpress.body(wordpress.last) == {
        "title": "About",
        "content": "Us",
        "parent": 2,
        "template": "wide.php",
    }
    assert "✅ Page created successfully!" in response.text
    assert "ID: 5" in response.text


async def test_get_pages_menu_order_filter(call_tool, wordpress):
    wordpress.queue(json=[{"id": 1}])
    response = await call_tool("get_pages", {"menu_order": 0, "orderby": "menu_order"})
    params = wordpress.last.url.params
    assert params["menu_order"] == "0"
    assert params["orderby"] == "menu_order"
    assert "Found 1 pages" in response.text


async def test_get_page_children_maps_parent(call_tool, wordpress):
    """parent_id is sent as the remote 'parent' filter."""
    wordpress.queue(json=[{"id": 3}, {"id": 4}])
    response = await call_tool("get_page_children", {"parent_id": 2, "order": "desc"})
    params = wordpress.last.url.params
    assert params["parent"] == "2"
    assert params["order"] == "desc"
    assert "parent_id" not in params
    assert "Found 2 child pages for parent 2" in response.text


async def test_get_page_children_rejects_bad_orderby(call_tool, wordpress):
    response = await call_tool("get_page_children", {"parent_id": 2, "orderby": "author"})
    assert response.is_error
    assert wordpress.requests == []


async def test_get_page_by_slug(call_tool, wordpress):
    wordpress.queue(json=[{"id": 8, "slug": "contact"}])
    response = await call_tool("get_page_by_slug", {"slug": "contact"})
    assert wordpress.last.url.path == "/wp-json/wp/v2/pages"
    assert "Page found with slug: contact" in response.text


async def test_get_page_by_slug_not_found(call_tool, wordpress):
    wordpress.queue(json=[])
    response = await call_tool("get_page_by_slug", {"slug": "nowhere"})
    assert response.text == "Error: No page found with slug: nowhere"


async def test_delete_page_force(call_tool, wordpress):
    wordpress.queue(json={"deleted": True, "previous": {"id": 5}})
    response = await call_tool("delete_page", {"id": 5, "force": True})
    assert wordpress.last.url.path == "/wp-json/wp/v2/pages/5"
    assert "✅ Page permanently deleted successfully!" in response.text


async def test_get_page_children_forwards_page(call_tool, wordpress):
    wordpress.queue(json=[])
    await call_tool("get_page_children", {"parent_id": 2, "page": 3, "per_page": 10})
    params = wordpress.last.url.params
    assert params["parent"] == "2"
    assert params["page"] == "3"
    assert params["per_page"] == "10"
