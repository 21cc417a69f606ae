"""Authenticated HTTP client for the WordPress REST API."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from wpmcp.config import Config
from wpmcp.encoding import build_endpoint, build_json_body
from wpmcp.errors import WordPressAPIError

logger = logging.getLogger(__name__)


class WordPressClient:
    """Issues one-shot requests against ``config.api_url``.

    Each call opens its own connection; nothing is retried. A transport can be
    injected for testing (e.g. ``httpx.MockTransport``).
    """

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._auth_header = config.auth_header()

    def _headers(self, overrides: Mapping[str, str] | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if overrides:
            headers.update(overrides)
        if self._auth_header:
            headers["Authorization"] = self._auth_header
        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json: Any = None,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request to ``endpoint`` (relative to the API prefix).

        Returns:
            The decoded JSON payload, which may be an object, array or primitive.

        Raises:
            WordPressAPIError: On a non-2xx status or a transport failure.
        """
        url = f"{self.config.api_url}{endpoint}"
        logger.debug(f"{method} {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    content=content,
                    headers=self._headers(headers),
                )
        except httpx.TimeoutException as e:
            raise WordPressAPIError(
                f"Request to {url} timed out after {self.config.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise WordPressAPIError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise WordPressAPIError(_error_message(response), status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise WordPressAPIError(
                f"Invalid JSON in response from {url}", status_code=response.status_code
            ) from e

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request(build_endpoint(path, params))

    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        return await self.request(path, "POST", json=build_json_body(body))

    async def delete(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        payload = build_json_body(body) if body is not None else None
        return await self.request(path, "DELETE", json=payload)

    async def upload(self, path: str, data: bytes, content_disposition: str) -> Any:
        return await self.request(
            path,
            "POST",
            content=data,
            headers={
                "Content-Type": "application/octet-stream",
                "Content-Disposition": content_disposition,
            },
        )


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return f"WordPress API error: {response.status_code} {response.reason_phrase}"
