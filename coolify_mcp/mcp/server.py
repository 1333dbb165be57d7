"""FastMCP server configuration and lifecycle helpers."""

from __future__ import annotations

from typing import Any, Mapping

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.tools.tool import Tool, ToolResult
from pydantic import Field

from ..core.config import CoolifySettings
from ..core.coolify_client import CoolifyClient
from ..core.exceptions import CoolifyMCPError, UnknownToolError
from ..core.logging_config import get_logger
from .dispatcher import ToolDispatcher

logger = get_logger(__name__)

SERVER_NAME = "coolify"
SERVER_VERSION = "1.0.0"


class CoolifyTool(Tool):
    """FastMCP tool whose execution is delegated to a ToolDispatcher."""

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            content = await self.dispatcher.dispatch(self.name, arguments)
        except CoolifyMCPError as exc:
            # ToolError messages reach the client unchanged.
            raise ToolError(str(exc)) from exc
        return ToolResult(content=content)


def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build a FastMCP server exposing every registered Coolify tool."""

    server = FastMCP(name=SERVER_NAME, version=SERVER_VERSION)
    for definition in dispatcher.registry.definitions():
        server.add_tool(
            CoolifyTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.input_schema(),
                dispatcher=dispatcher,
            )
        )
    logger.debug("mcp_server_created", tools=len(dispatcher.registry.names()))
    return server


def build_server(settings: CoolifySettings) -> FastMCP:
    """Wire settings -> client -> dispatcher -> server."""

    return create_server(ToolDispatcher(CoolifyClient(settings)))


async def list_tools(server: FastMCP) -> list[dict[str, Any]]:
    """Describe the tools a server publishes, as seen by MCP clients."""

    tools = await server.get_tools()
    described: list[dict[str, Any]] = []
    for tool in tools.values():
        if not tool.enabled:
            continue
        mcp_tool = tool.to_mcp_tool()
        described.append(
            {
                "name": mcp_tool.name,
                "description": mcp_tool.description or "",
                "inputSchema": mcp_tool.inputSchema or {"type": "object", "properties": {}},
            }
        )
    return described


async def call_tool(server: FastMCP, name: str, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Execute a tool by name and return the ``{"content": [...]}`` envelope.

    Domain errors are re-raised as their original type rather than the
    ToolError the protocol layer sees.
    """

    logger.debug("mcp_tool_call", name=name, arguments=arguments)
    if name not in await server.get_tools():
        raise UnknownToolError(name)
    try:
        tool_result = await server._tool_manager.call_tool(name, dict(arguments))
    except NotFoundError as exc:
        raise UnknownToolError(name) from exc
    except ToolError as exc:
        cause = exc.__cause__
        if isinstance(cause, CoolifyMCPError):
            raise cause
        raise

    return _serialize_tool_result(tool_result)


def _serialize_tool_result(tool_result: ToolResult) -> dict[str, Any]:
    """Convert a FastMCP ToolResult into a JSON-serialisable envelope."""

    return {
        "content": [
            block.model_dump(mode="json", exclude_none=True) for block in tool_result.content
        ]
    }
