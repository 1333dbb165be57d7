"""Route tool invocations to the Coolify API."""

from __future__ import annotations

import time
from typing import Any, Mapping

from mcp.types import TextContent
from pydantic import ValidationError

from ..core.coolify_client import CoolifyClient
from ..core.exceptions import ToolValidationError, UnknownToolError
from ..core.logging_config import get_logger
from ..core.types import RemoteCall
from .registry import ToolRegistry, registry as default_registry
from .tools.utils import format_payload

# Import tool modules so decorators run at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)


class ToolDispatcher:
    """Validate arguments, perform one Coolify request, wrap the JSON reply."""

    def __init__(self, client: CoolifyClient, registry: ToolRegistry | None = None) -> None:
        self._client = client
        self._registry = registry or default_registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def resolve(self, name: str, arguments: Mapping[str, Any] | None) -> RemoteCall:
        """Build the remote call for ``name`` without touching the network."""

        definition = self._registry.get(name)
        if definition is None:
            raise UnknownToolError(name)

        try:
            parsed = definition.arguments_model.model_validate(arguments or {})
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            raise ToolValidationError(name, errors) from exc

        return definition.route(parsed)

    async def dispatch(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> list[TextContent]:
        call = self.resolve(name, arguments)

        logger.debug("tool_call_started", tool=name, method=call.method, path=call.path)
        started = time.perf_counter()
        try:
            payload = await self._client.execute(call)
        except Exception:
            logger.warning(
                "tool_call_failed",
                tool=name,
                latency_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        logger.info(
            "tool_call_completed",
            tool=name,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return [TextContent(type="text", text=format_payload(payload))]
