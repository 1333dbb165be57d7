"""Async Coolify REST client."""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from .config import CoolifySettings
from .exceptions import CoolifyAPIError
from .http_client import async_http_client
from .logging_config import get_logger
from .types import RemoteCall

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


class CoolifyClient:
    """Minimal async client for the Coolify API.

    Every call opens its own ``httpx.AsyncClient``; nothing is cached or
    retried between calls.
    """

    def __init__(
        self,
        settings: CoolifySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.coolify_base_url

    def build_url(self, path: str) -> str:
        """Compose ``base + /api/v1 + path``."""

        return f"{self.base_url}{API_PREFIX}{path}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._settings.access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body.

        Raises ``CoolifyAPIError`` for non-2xx responses. A success response
        whose body is not JSON raises ``json.JSONDecodeError`` unchanged.
        """

        url = self.build_url(path)
        content = json.dumps(body) if body is not None else None

        logger.debug("coolify_request", method=method.upper(), url=url, params=params)
        async with async_http_client(transport=self._transport) as client:
            response = await client.request(
                method=method.upper(),
                url=url,
                params=dict(params) if params else None,
                content=content,
                headers=self._headers(),
            )

        if not response.is_success:
            try:
                details = response.json()
            except ValueError:
                details = {}
            logger.warning(
                "coolify_api_error",
                method=method.upper(),
                path=path,
                status_code=response.status_code,
            )
            raise CoolifyAPIError(response.status_code, response.reason_phrase, details)

        return response.json()

    async def execute(self, call: RemoteCall) -> Any:
        """Perform the request described by ``call``."""

        return await self.request(call.path, call.method, call.body, params=call.params)
