"""Tests for the media tools."""

import base64

import pytest

from wpmcp.tools.media import content_disposition
from wpmcp.tools.resources import SummaryField

PNG = b"\x89PNG\r\n\x1a\nfake"
PNG_B64 = base64.b64encode(PNG).decode()


@pytest.mark.asyncio
async def test_upload_with_metadata_issues_two_requests(call_tool, wordpress):
    """Binary upload first, then a metadata update of the created item."""
    wordpress.queue(201, json={"id": 31, "source_url": "https://blog.example.com/a.png"})
    wordpress.queue(
        json={
            "id": 31,
            "title": {"rendered": "Logo"},
            "source_url": "https://blog.example.com/a.png",
        }
    )

    response = await call_tool(
        "upload_media", {"filename": "a.png", "content_base64": PNG_B64, "title": "Logo"}
    )

    upload, update = wordpress.requests
    assert upload.method == "POST"
    assert upload.url.path == "/wp-json/wp/v2/media"
    assert upload.headers["Content-Type"] == "application/octet-stream"
    assert upload.headers["Content-Disposition"] == 'attachment; filename="a.png"'
    assert upload.content == PNG

    assert update.url.path == "/wp-json/wp/v2/media/31"
    assert wordpress.body(update) == {"title": "Logo"}

    assert not response.is_error
    assert "Media uploaded and updated successfully" in response.text
    assert "ID: 31" in response.text
    assert "Filename: a.png" in response.text
    assert '"rendered": "Logo"' in response.text


@pytest.mark.asyncio
async def test_upload_without_metadata_is_one_request(call_tool, wordpress):
    wordpress.queue(201, json={"id": 32, "source_url": "https://blog.example.com/b.png"})
    response = await call_tool("upload_media", {"filename": "b.png", "content_base64": PNG_B64})
    assert len(wordpress.requests) == 1
    assert "✅ Media uploaded successfully!" in response.text
    assert "URL: https://blog.example.com/b.png" in response.text


@pytest.mark.asyncio
async def test_metadata_failure_names_uploaded_item(call_tool, wordpress):
    """The upload is not rolled back; the error says which item was created."""
    wordpress.queue(201, json={"id": 33})
    wordpress.queue(400, json={"message": "Invalid alt text"})

    response = await call_tool(
        "upload_media", {"filename": "c.png", "content_base64": PNG_B64, "alt_text": "x"}
    )

    assert len(wordpress.requests) == 2
    assert response.is_error
    assert "Media uploaded as ID 33" in response.text
    assert "Invalid alt text" in response.text


@pytest.mark.asyncio
async def test_upload_failure_skips_metadata(call_tool, wordpress):
    wordpress.queue(413, json={"message": "File too large"})
    response = await call_tool(
        "upload_media", {"filename": "d.png", "content_base64": PNG_B64, "title": "t"}
    )
    assert len(wordpress.requests) == 1
    assert response.text == "Error: File too large"


@pytest.mark.asyncio
async def test_invalid_base64_makes_no_request(call_tool, wordpress):
    response = await call_tool("upload_media", {"filename": "e.png", "content_base64": "@@not base64@@"})
    assert response.is_error
    assert "not valid base64" in response.text
    assert wordpress.requests == []


@pytest.mark.asyncio
async def test_get_media_by_post_maps_parent(call_tool, wordpress):
    wordpress.queue(json=[{"id": 1}])
    response = await call_tool("get_media_by_post", {"post_id": 12, "media_type": "image"})
    params = wordpress.last.url.params
    assert params["parent"] == "12"
    assert params["media_type"] == "image"
    assert "Found 1 media items for post 12" in response.text


@pytest.mark.asyncio
async def test_get_media_list_and_item(call_tool, wordpress):
    wordpress.queue(json=[{"id": 1}, {"id": 2}])
    wordpress.queue(json={"id": 2})
    listing = await call_tool("get_media", {"mime_type": "image/png"})
    item = await call_tool("get_media_item", {"id": 2})
    assert "Found 2 media items" in listing.text
    assert wordpress.last.url.path == "/wp-json/wp/v2/media/2"
    assert not item.is_error


@pytest.mark.asyncio
async def test_update_media(call_tool, wordpress):
    wordpress.queue(json={"id": 5, "title": {"rendered": "New"}})
    response = await call_tool("update_media", {"id": 5, "title": "New", "caption": None})
    assert wordpress.body(wordpress.last) == {"title": "New"}
    assert "ID: 5\nTitle: New" in response.text


def test_content_disposition_escapes_quotes():
    assert content_disposition('my"file.png') == 'attachment; filename="my_file.png"'


def test_content_disposition_non_ascii():
    value = content_disposition("café.png")
    assert value.startswith('attachment; filename="caf_.png"')
    assert "filename*=UTF-8''caf%C3%A9.png" in value


@pytest.mark.asyncio
async def test_get_media_by_post_pagination_and_ordering(call_tool, wordpress):
    wordpress.queue(json=[])
    await call_tool("get_media_by_post", {"post_id": 12, "page": 2, "order": "asc", "orderby": "title"})
    params = wordpress.last.url.params
    assert params["parent"] == "12"
    assert params["page"] == "2"
    assert params["order"] == "asc"
    assert params["orderby"] == "title"


@pytest.mark.asyncio
async def test_upload_response_without_id_skips_metadata(call_tool, wordpress):
    wordpress.queue(201, json={"source_url": "https://blog.example.com/f.png"})
    response = await call_tool(
        "upload_media", {"filename": "f.png", "content_base64": PNG_B64, "title": "t"}
    )
    assert len(wordpress.requests) == 1
    assert response.is_error
    assert "Media uploaded but the metadata update failed" in response.text
    assert "did not include an ID" in response.text


def test_argument_summary_field_ignores_response():
    field = SummaryField.argument("Filename", "filename")
    assert field.key is None
    assert field.value({"": "wrong", "filename": "wrong"}, {"filename": "a.png"}) == "a.png"
