"""
Structured Logging (structlog).

Output format: JSON (default) or console text for local development.
Context bound with ``structlog.contextvars`` (for example the MCP session
peer, bound by the SSE endpoint) is merged into every event logged while
that session's requests are handled.
"""

import logging
import sys

import structlog

from mailer_config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog for the MCP server.

    Each event carries: bound session context, logger name, level,
    ISO timestamp, and the formatted traceback when ``exc_info`` is set.
    """
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=settings.LOG_LEVEL.upper()
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.LOG_FORMAT == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger."""
    return structlog.get_logger(name)
