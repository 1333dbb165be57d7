"""Application MCP tools."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from ...core.logging_config import get_logger
from ...core.types import RemoteCall
from ..registry import tool
from .utils import NoArguments, ToolArguments, UuidArguments

logger = get_logger(__name__)

DEFAULT_LOG_LINES = 100


class ApplicationSettings(ToolArguments):
    """Application fields accepted by ``PATCH /applications/{uuid}``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: StrictStr | None = Field(None, description="Application name")
    description: StrictStr | None = Field(None, description="Application description")
    domains: StrictStr | None = Field(
        None,
        validation_alias=AliasChoices("domains", "domain"),
        description="Application domain(s). Comma separated list is accepted",
    )
    health_check_enabled: StrictBool | None = Field(None, description="Enable the health check")
    health_check_path: StrictStr | None = Field(None, description="Health check path")
    health_check_port: StrictStr | None = Field(None, description="Health check port")
    health_check_host: StrictStr | None = Field(None, description="Health check host")
    health_check_method: StrictStr | None = Field(None, description="Health check HTTP method")
    health_check_return_code: StrictInt | None = Field(None, description="Expected HTTP status code")
    health_check_scheme: StrictStr | None = Field(None, description="Health check scheme (http/https)")
    health_check_response_text: StrictStr | None = Field(
        None, description="Text expected in the health check response"
    )
    health_check_interval: StrictInt | None = Field(None, description="Seconds between checks")
    health_check_timeout: StrictInt | None = Field(None, description="Seconds before a check times out")
    health_check_retries: StrictInt | None = Field(None, description="Failures before unhealthy")
    health_check_start_period: StrictInt | None = Field(
        None, description="Grace period in seconds after start"
    )


class UpdateApplicationArguments(ToolArguments):
    uuid: StrictStr = Field(..., description="Resource UUID")
    settings: ApplicationSettings = Field(..., description="Application settings to change")


class LogsArguments(ToolArguments):
    uuid: StrictStr = Field(..., description="Application or deployment UUID")
    type: Literal["application", "deployment"] = Field(
        ..., description="Read runtime logs of an application or the log of a deployment"
    )
    lines: StrictInt = Field(
        DEFAULT_LOG_LINES,
        description="Number of log lines (application logs only)",
    )


@tool("list-applications", "List all applications", NoArguments)
def list_applications(_: NoArguments) -> RemoteCall:
    return RemoteCall("/applications")


@tool("get-application", "Get details of a specific application", UuidArguments)
def get_application(args: UuidArguments) -> RemoteCall:
    return RemoteCall(f"/applications/{args.uuid}")


@tool("start-application", "Start a specific application", UuidArguments)
def start_application(args: UuidArguments) -> RemoteCall:
    return RemoteCall(f"/applications/{args.uuid}/start")


@tool("stop-application", "Stop a specific application", UuidArguments)
def stop_application(args: UuidArguments) -> RemoteCall:
    return RemoteCall(f"/applications/{args.uuid}/stop")


@tool("restart-application", "Restart a specific application", UuidArguments)
def restart_application(args: UuidArguments) -> RemoteCall:
    return RemoteCall(f"/applications/{args.uuid}/restart")


@tool(
    "update-application",
    "Update settings of a specific application (name, description, domains, health check)",
    UpdateApplicationArguments,
)
def update_application(args: UpdateApplicationArguments) -> RemoteCall:
    """Send only the fields the caller supplied; explicit nulls are kept."""

    body = args.settings.model_dump(exclude_unset=True)
    return RemoteCall(f"/applications/{args.uuid}", method="PATCH", body=body)


@tool("get-logs", "Get logs of an application or a deployment", LogsArguments)
def get_logs(args: LogsArguments) -> RemoteCall:
    if args.type == "application":
        return RemoteCall(
            f"/applications/{args.uuid}/logs", params={"lines": str(args.lines)}
        )

    # The deployment endpoint returns the full deployment log; `lines` has no effect.
    if "lines" in args.model_fields_set:
        logger.warning("logs_lines_ignored", uuid=args.uuid, lines=args.lines)
    return RemoteCall(f"/deployments/{args.uuid}")
