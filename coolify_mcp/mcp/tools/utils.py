"""Shared helpers for MCP tool implementations."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ToolArguments(BaseModel):
    """Base for tool argument records; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")


class NoArguments(ToolArguments):
    """Arguments for tools that take no input."""


class UuidArguments(ToolArguments):
    uuid: StrictStr = Field(..., description="Resource UUID")


def format_payload(payload: Any) -> str:
    """Pretty-print a Coolify response body with two-space indentation."""

    return json.dumps(payload, indent=2, ensure_ascii=False)
