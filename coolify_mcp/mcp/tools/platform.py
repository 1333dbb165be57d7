"""Instance-wide MCP tools: resources, services, databases, version, health."""

from ...core.types import RemoteCall
from ..registry import tool
from .utils import NoArguments


@tool("list-resources", "List all resources in Coolify", NoArguments)
def list_resources(_: NoArguments) -> RemoteCall:
    return RemoteCall("/resources")


@tool("list-services", "List all services", NoArguments)
def list_services(_: NoArguments) -> RemoteCall:
    return RemoteCall("/services")


@tool("list-databases", "List all databases", NoArguments)
def list_databases(_: NoArguments) -> RemoteCall:
    return RemoteCall("/databases")


@tool("get-version", "Get Coolify version", NoArguments)
def get_version(_: NoArguments) -> RemoteCall:
    return RemoteCall("/version")


@tool("health-check", "Get system health status", NoArguments)
def health_check(_: NoArguments) -> RemoteCall:
    return RemoteCall("/health")
