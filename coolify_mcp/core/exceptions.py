"""Custom exception hierarchy for the Coolify MCP server."""

from __future__ import annotations

import json
from typing import Any


class CoolifyMCPError(Exception):
    """Base exception for server-level issues."""


class ConfigurationError(CoolifyMCPError):
    """Raised when configuration is invalid or missing."""


class ExternalServiceError(CoolifyMCPError):
    """Raised when an external dependency responds with an error."""


class CoolifyAPIError(ExternalServiceError):
    """Raised when the Coolify API answers with a non-2xx status.

    The string form is a JSON object so MCP clients can parse the failure:
    ``{"error": ..., "status": ..., "details": ...}``.
    """

    def __init__(self, status_code: int, reason: str, details: Any = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.details = details if details is not None else {}
        super().__init__(json.dumps(self.payload, ensure_ascii=False))

    @property
    def payload(self) -> dict[str, Any]:
        return {
            "error": f"Coolify API error: {self.status_code} {self.reason}",
            "status": self.status_code,
            "details": self.details,
        }


class UnknownToolError(CoolifyMCPError, LookupError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolValidationError(CoolifyMCPError, ValueError):
    """Raised when tool arguments fail schema validation."""

    def __init__(self, tool: str, errors: list[dict[str, Any]]) -> None:
        self.tool = tool
        self.errors = errors
        super().__init__(f"Invalid input: {json.dumps(errors, ensure_ascii=False, default=str)}")
