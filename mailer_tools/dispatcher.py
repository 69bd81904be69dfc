"""Tool Dispatcher.

Resolves a tool name against the catalog and awaits its handler once.
Errors propagate untouched; translation happens at the session boundary.
"""

from typing import Any

from mailer_tools.catalog import ToolCatalog
from mailer_tools.errors import ToolNotFoundError


class ToolDispatcher:
    """Exact-match, exactly-once tool invocation."""

    def __init__(self, catalog: ToolCatalog):
        self.catalog = catalog

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        """Invoke the tool registered under ``name``.

        Raises:
            ToolNotFoundError: no such tool; no handler has run.
        """
        definition = self.catalog.get(name)
        if definition is None:
            raise ToolNotFoundError(name)

        return await definition.handler(arguments)
