"""Tool Interface & Metadata."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from mcp import types
from pydantic import BaseModel

ToolHandler = Callable[[dict[str, Any]], Awaitable[Any]]


class ToolMetadata(BaseModel):
    """Tool behaviour hints, advertised to clients as MCP annotations."""

    read_only: bool = False
    destructive: bool = False
    idempotent: bool = False

    def to_annotations(self, title: str | None = None) -> types.ToolAnnotations:
        return types.ToolAnnotations(
            title=title,
            readOnlyHint=self.read_only,
            destructiveHint=self.destructive,
            idempotentHint=self.idempotent,
        )


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    metadata: ToolMetadata

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's arguments."""
        ...

    async def execute(self, input_data: dict[str, Any]) -> Any:
        """Execute tool action."""
        ...


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: what it is called, what it accepts, what runs it."""

    name: str
    description: str
    input_schema: dict[str, Any]
    handler: ToolHandler = field(repr=False, compare=False)
    metadata: ToolMetadata = field(default_factory=ToolMetadata)

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=dict(self.input_schema),
            annotations=self.metadata.to_annotations(),
        )
