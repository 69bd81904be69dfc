"""
MCP session adapter.

Receives ``tools/list`` and ``tools/call`` requests from the MCP server and
forwards them to the catalog and dispatcher. Every failure, whatever its
origin, leaves here as exactly one ``McpError`` produced by
:func:`mailer_tools.errors.translate_fault`.
"""

import time
from contextlib import suppress
from typing import Any

from mcp import types
from mcp.server import Server

from mailer_obs.observer import CALL_TOOL, LIST_TOOLS, NullRequestObserver, RequestObserver
from mailer_tools.arguments import normalize_arguments
from mailer_tools.catalog import CatalogProvider
from mailer_tools.dispatcher import ToolDispatcher
from mailer_tools.errors import ToolError, translate_fault


class ToolSessionAdapter:
    """Stateless bridge between MCP requests and the tool layer."""

    def __init__(self, catalog_provider: CatalogProvider, observer: RequestObserver | None = None):
        self.catalog_provider = catalog_provider
        self.observer = observer or NullRequestObserver()

    def _notify(self, hook: str, *args: Any) -> None:
        # Observer failures must never change the response
        with suppress(Exception):
            getattr(self.observer, hook)(*args)

    def _fail(self, kind: str, tool_name: str | None, started: float, fault: object) -> ToolError:
        error = translate_fault(fault)
        self._notify(
            "request_failed",
            kind,
            tool_name,
            time.perf_counter() - started,
            error.category.name,
            error.message,
            fault,
        )
        return error

    async def list_tools(self) -> types.ListToolsResult:
        """Return ``{tools: [...]}`` for the whole catalog.

        Raises:
            McpError: the catalog could not be built or rendered
        """
        started = time.perf_counter()
        self._notify("request_received", LIST_TOOLS, None)
        try:
            catalog = self.catalog_provider()
            tools = [definition.to_mcp_tool() for definition in catalog.list_tools()]
        except Exception as e:
            raise self._fail(LIST_TOOLS, None, started, e).to_mcp_error() from e

        self._notify("request_succeeded", LIST_TOOLS, None, time.perf_counter() - started)
        return types.ListToolsResult(tools=tools)

    async def call_tool(self, name: str, arguments: Any) -> Any:
        """Normalize arguments, dispatch, and return the tool result verbatim.

        Raises:
            McpError: INVALID_REQUEST, METHOD_NOT_FOUND or INTERNAL_ERROR
        """
        started = time.perf_counter()
        self._notify("request_received", CALL_TOOL, name)
        try:
            normalized = normalize_arguments(arguments)
            dispatcher = ToolDispatcher(self.catalog_provider())
            result = await dispatcher.call_tool(name, normalized)
        except Exception as e:
            raise self._fail(CALL_TOOL, name, started, e).to_mcp_error() from e

        self._notify("request_succeeded", CALL_TOOL, name, time.perf_counter() - started)
        return result

    # ========================================================================
    # MCP SERVER WIRING
    # ========================================================================

    async def handle_list_tools(self, req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(await self.list_tools())

    async def handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        result = await self.call_tool(req.params.name, req.params.arguments)
        if not isinstance(result, types.CallToolResult):
            result = types.CallToolResult(content=[types.TextContent(type="text", text=str(result))])
        return types.ServerResult(result)

    def install(self, server: Server) -> None:
        """Register the handlers on a low-level MCP server.

        Handlers go straight into ``request_handlers`` so that a raised
        ``McpError`` becomes a JSON-RPC error response rather than a
        tool result flagged ``isError``.
        """
        server.request_handlers[types.ListToolsRequest] = self.handle_list_tools
        server.request_handlers[types.CallToolRequest] = self.handle_call_tool
