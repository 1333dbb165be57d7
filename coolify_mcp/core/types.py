"""Shared type definitions."""

from dataclasses import dataclass
from typing import Any, Literal, Mapping

HttpMethod = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]


@dataclass(slots=True, frozen=True)
class RemoteCall:
    """Describes the single Coolify API request behind a tool invocation."""

    path: str
    method: HttpMethod = "GET"
    params: Mapping[str, str] | None = None
    body: Any = None
