"""
Request observers for the MCP tool layer.

The session adapter reports each request at three points: received,
succeeded, failed. The default observer writes structlog events and
updates the Prometheus metrics in :mod:`mailer_obs.metrics`.
"""

from typing import Protocol

from mailer_obs import metrics
from mailer_obs.logging import get_logger

LIST_TOOLS = "list_tools"
CALL_TOOL = "call_tool"


class RequestObserver(Protocol):
    """Hooks invoked by the session adapter around each request."""

    def request_received(self, kind: str, tool_name: str | None) -> None: ...

    def request_succeeded(self, kind: str, tool_name: str | None, duration_seconds: float) -> None: ...

    def request_failed(
        self,
        kind: str,
        tool_name: str | None,
        duration_seconds: float,
        category: str,
        message: str,
        fault: object,
    ) -> None: ...


class NullRequestObserver:
    """Observer that records nothing."""

    def request_received(self, kind, tool_name):
        pass

    def request_succeeded(self, kind, tool_name, duration_seconds):
        pass

    def request_failed(self, kind, tool_name, duration_seconds, category, message, fault):
        pass


class LoggingRequestObserver:
    """Structured logging + Prometheus metrics for tool requests."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger("mailer.tools")

    def request_received(self, kind: str, tool_name: str | None) -> None:
        self.logger.info(f"{kind}_received", tool=tool_name)

    def request_succeeded(self, kind: str, tool_name: str | None, duration_seconds: float) -> None:
        duration_ms = int(duration_seconds * 1000)
        if kind == CALL_TOOL:
            metrics.tool_calls_total.labels(tool_name=tool_name, status="success").inc()
            metrics.tool_call_duration.labels(tool_name=tool_name).observe(duration_seconds)
        else:
            metrics.list_tools_total.labels(status="success").inc()
        self.logger.info(f"{kind}_succeeded", tool=tool_name, duration_ms=duration_ms)

    def request_failed(
        self,
        kind: str,
        tool_name: str | None,
        duration_seconds: float,
        category: str,
        message: str,
        fault: object,
    ) -> None:
        duration_ms = int(duration_seconds * 1000)
        metrics.tool_call_errors_total.labels(category=category).inc()
        if kind == CALL_TOOL:
            # Unknown names would otherwise create one series per typo
            label = "<unknown>" if category == "METHOD_NOT_FOUND" else tool_name
            metrics.tool_calls_total.labels(tool_name=label, status="failure").inc()
        else:
            metrics.list_tools_total.labels(status="failure").inc()

        # Tracebacks only for INTERNAL_ERROR
        if category == "INTERNAL_ERROR" and isinstance(fault, BaseException):
            self.logger.error(
                f"{kind}_failed",
                tool=tool_name,
                duration_ms=duration_ms,
                category=category,
                error=message,
                exc_info=fault,
            )
        else:
            self.logger.warning(
                f"{kind}_failed",
                tool=tool_name,
                duration_ms=duration_ms,
                category=category,
                error=message,
            )
