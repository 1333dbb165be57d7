"""Deployment MCP tools."""

from pydantic import Field, StrictBool, StrictStr

from ...core.types import RemoteCall
from ..registry import tool
from .utils import NoArguments, ToolArguments


class DeployArguments(ToolArguments):
    """Deploy selectors; Coolify expects at least one of ``tag`` or ``uuid``."""

    tag: StrictStr | None = Field(None, description="Tag name(s). Comma separated list is accepted")
    uuid: StrictStr | None = Field(
        None, description="Resource UUID(s). Comma separated list is accepted"
    )
    force: StrictBool | None = Field(None, description="Force rebuild (without cache)")


@tool("list-deployments", "List all running deployments", NoArguments)
def list_deployments(_: NoArguments) -> RemoteCall:
    return RemoteCall("/deployments")


@tool("deploy", "Deploy by tag or uuid", DeployArguments)
def deploy(args: DeployArguments) -> RemoteCall:
    """
    Trigger deployments through ``GET /deploy``.

    Only supplied values become query parameters; ``force`` is sent as
    ``force=true`` and omitted entirely otherwise.
    """

    params: dict[str, str] = {}
    if args.tag:
        params["tag"] = args.tag
    if args.uuid:
        params["uuid"] = args.uuid
    if args.force:
        params["force"] = "true"
    return RemoteCall("/deploy", params=params or None)
