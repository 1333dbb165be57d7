from __future__ import annotations

from typing import Any

import httpx
import pytest

from coolify_mcp.core.config import CoolifySettings
from coolify_mcp.core.coolify_client import CoolifyClient
from coolify_mcp.mcp.dispatcher import ToolDispatcher


class FakeCoolify:
    """Records outgoing requests and answers each with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = b"{}"
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, payload: Any = None, *, content: bytes | None = None) -> None:
        self.status_code = status_code
        if content is not None:
            self.content = content
        else:
            self.content = httpx.Response(status_code, json=payload).content

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def settings() -> CoolifySettings:
    return CoolifySettings(
        _env_file=None,
        coolify_base_url="https://coolify.test/",
        coolify_access_token="secret-token",
    )


@pytest.fixture
def fake_coolify() -> FakeCoolify:
    return FakeCoolify()


@pytest.fixture
def client(settings, fake_coolify) -> CoolifyClient:
    return CoolifyClient(settings, transport=fake_coolify.transport)


@pytest.fixture
def dispatcher(client) -> ToolDispatcher:
    return ToolDispatcher(client)
