"""Reusable HTTP client utilities."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx


@asynccontextmanager
async def async_http_client(
    base_url: str = "", transport: httpx.AsyncBaseTransport | None = None
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield an AsyncClient with httpx default timeouts and close it afterwards."""

    async with httpx.AsyncClient(base_url=base_url, transport=transport) as client:
        yield client
