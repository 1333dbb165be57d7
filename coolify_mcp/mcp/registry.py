"""Static catalog of Coolify tools."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from ..core.types import RemoteCall

ArgsT = TypeVar("ArgsT", bound=BaseModel)
Route = Callable[[Any], RemoteCall]


@dataclass(slots=True, frozen=True)
class ToolDefinition:
    """A tool name bound to its argument model and remote route."""

    name: str
    description: str
    arguments_model: type[BaseModel]
    route: Route

    def input_schema(self) -> dict[str, Any]:
        return self.arguments_model.model_json_schema()


class ToolRegistry:
    """In-memory tool registry preserving registration order."""

    def __init__(self) -> None:
        self._definitions: dict[str, ToolDefinition] = {}

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._definitions:
            raise ValueError(f"Tool already registered: {definition.name}")
        self._definitions[definition.name] = definition

    def tool(
        self, name: str, description: str, arguments_model: type[ArgsT]
    ) -> Callable[[Callable[[ArgsT], RemoteCall]], Callable[[ArgsT], RemoteCall]]:
        """Register the decorated route function under ``name``."""

        def decorator(route: Callable[[ArgsT], RemoteCall]) -> Callable[[ArgsT], RemoteCall]:
            self.register(ToolDefinition(name, description, arguments_model, route))
            return route

        return decorator

    def get(self, name: str) -> ToolDefinition | None:
        return self._definitions.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def definitions(self) -> list[ToolDefinition]:
        return list(self._definitions.values())

    def list_tools(self) -> list[dict[str, Any]]:
        """Describe every tool as ``{name, description, inputSchema}``."""

        return [
            {
                "name": definition.name,
                "description": definition.description,
                "inputSchema": definition.input_schema(),
            }
            for definition in self._definitions.values()
        ]


registry = ToolRegistry()
tool = registry.tool
