"""
SendGrid MCP Server FastAPI Application Entry Point.

This module initializes:
- Settings and structured logging
- The SendGrid client and the tool catalog (lifespan)
- The low-level MCP server with the tool session adapter installed
- The MCP SSE transport routes, plus /, /healthz and /metrics
"""

import sys
from contextlib import asynccontextmanager
from functools import cache
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from apps.mcp_server.session import ToolSessionAdapter
from mailer_config.settings import Settings
from mailer_obs.logging import get_logger, setup_logging
from mailer_obs.observer import LoggingRequestObserver
from mailer_tools.adapters.sendgrid import SendGridClientWrapper, build_sendgrid_catalog

# Initialize settings
settings = Settings()

# Setup logging
setup_logging(settings)
logger = get_logger(__name__)

mcp_server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)
sse_transport = SseServerTransport(settings.MCP_MESSAGE_PATH)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles:
    - SendGrid client creation (fails fast without an API key)
    - Tool catalog construction and session adapter installation
    - Closing the HTTP client on shutdown
    """
    if not settings.SENDGRID_API_KEY:
        raise RuntimeError("SENDGRID_API_KEY environment variable is required")

    logger.info("server_starting", server=settings.SERVER_NAME, environment=settings.ENVIRONMENT)

    client = SendGridClientWrapper(
        api_key=settings.SENDGRID_API_KEY,
        base_url=settings.SENDGRID_API_BASE_URL,
        timeout_seconds=settings.SENDGRID_TIMEOUT_SECONDS,
    )
    # Built once; a failed build is retried by the next request
    catalog_provider = cache(lambda: build_sendgrid_catalog(client))

    try:
        catalog = catalog_provider()
        logger.info("tool_catalog_built", count=len(catalog), tools=catalog.names())
    except Exception as e:
        logger.error("tool_catalog_build_failed", error=str(e), exc_info=True)

    adapter = ToolSessionAdapter(catalog_provider, observer=LoggingRequestObserver())
    adapter.install(mcp_server)
    app.state.sendgrid_client = client
    app.state.catalog_provider = catalog_provider

    yield

    logger.info("server_stopping")
    await client.close()


# Initialize FastAPI application
app = FastAPI(
    title="SendGrid MCP Server",
    description="SendGrid email API exposed as Model Context Protocol tools over SSE",
    version=settings.SERVER_VERSION,
    lifespan=lifespan,
)


# ============================================================================
# MCP TRANSPORT
# ============================================================================


@app.get(settings.MCP_SSE_PATH, tags=["mcp"])
async def mcp_event_stream(request: Request) -> Response:
    """Open an MCP session over server-sent events."""
    peer = request.client.host if request.client else None
    with structlog.contextvars.bound_contextvars(transport="sse", peer=peer):
        async with sse_transport.connect_sse(request.scope, request.receive, request._send) as (
            read_stream,
            write_stream,
        ):
            await mcp_server.run(
                read_stream, write_stream, mcp_server.create_initialization_options()
            )
    return Response()


app.mount(settings.MCP_MESSAGE_PATH, app=sse_transport.handle_post_message)


# ============================================================================
# HEALTH, METRICS, ROOT
# ============================================================================


@app.get("/", response_class=PlainTextResponse, tags=["root"])
async def root() -> str:
    return f"{settings.SERVER_NAME} v{settings.SERVER_VERSION} is running."


@app.get("/healthz", tags=["health"])
async def healthz(request: Request) -> dict:
    """Liveness check. Reports the catalog size once it has been built."""
    tools = None
    provider = getattr(request.app.state, "catalog_provider", None)
    if provider is not None and provider.cache_info().currsize:
        tools = len(provider())
    return {"status": "healthy", "tools": tools}


@app.get("/metrics", tags=["metrics"])
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def main() -> None:
    """Console entry point: validate config, then serve with uvicorn."""
    import uvicorn

    if not settings.SENDGRID_API_KEY:
        logger.error("missing_config", setting="SENDGRID_API_KEY")
        sys.exit(1)

    logger.info(
        "server_listening",
        port=settings.PORT,
        sse_endpoint=settings.MCP_SSE_PATH,
        message_endpoint=settings.MCP_MESSAGE_PATH,
    )
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
