"""Tool Catalog.

Immutable, ordered registry of tool definitions, built once at startup.
"""

from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType

from mailer_tools.base import Tool, ToolDefinition
from mailer_tools.errors import DuplicateToolError


class ToolCatalog:
    """Name → ToolDefinition lookup. Read-only after construction."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in tools:
                raise DuplicateToolError(f"Tool already registered: {definition.name}")
            tools[definition.name] = definition
        self._tools = MappingProxyType(tools)
        self._ordered = tuple(tools.values())

    @classmethod
    def from_tools(cls, tools: Iterable[Tool]) -> "ToolCatalog":
        """Build a catalog from tool objects, binding each tool's execute as its handler."""
        return cls(
            ToolDefinition(
                name=tool.name,
                description=tool.description,
                input_schema=tool.input_schema,
                handler=tool.execute,
                metadata=tool.metadata,
            )
            for tool in tools
        )

    def list_tools(self) -> tuple[ToolDefinition, ...]:
        """All definitions, in registration order."""
        return self._ordered

    def get(self, name: str) -> ToolDefinition | None:
        """Exact-match lookup by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)


CatalogProvider = Callable[[], ToolCatalog]
