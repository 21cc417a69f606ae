"""Shared fixtures: a fake WordPress site behind httpx.MockTransport."""

import json

import httpx
import pytest

import wpmcp.tools  # noqa: F401
from wpmcp.config import Config
from wpmcp.context import set_tool_context
from wpmcp.models import ToolResponse
from wpmcp.registry import REGISTRY
from wpmcp.tools.context import ToolContext, create_context


class FakeWordPress:
    """Records outgoing requests and answers them from a queue of responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def queue(self, status_code: int = 200, json=None, **kwargs) -> None:
        if json is not None:
            kwargs["json"] = json
        self.responses.append(httpx.Response(status_code, **kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content)


@pytest.fixture
def wordpress():
    return FakeWordPress()


@pytest.fixture
def config():
    return Config(
        _env_file=None,
        base_url="https://blog.example.com/",
        username="admin",
        app_password="abcd efgh ijkl",
    )


@pytest.fixture
def context(config, wordpress) -> ToolContext:
    return create_context(config, transport=httpx.MockTransport(wordpress.handler))


@pytest.fixture
def call_tool(context):
    """Invoke a registered tool by name within the test tool context."""

    async def call(name: str, arguments: dict | None = None) -> ToolResponse:
        with set_tool_context(context):
            return await REGISTRY.invoke(name, arguments or {})

    return call
