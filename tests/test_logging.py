"""Logging Setup Tests."""

import pytest
import structlog

from mailer_config.settings import Settings
from mailer_obs.logging import setup_logging


@pytest.fixture
def restore_logging():
    yield
    setup_logging(Settings(_env_file=None, LOG_FORMAT="json"))


def _processors():
    return structlog.get_config()["processors"]


def test_json_format_renders_json(restore_logging):
    setup_logging(Settings(_env_file=None, LOG_FORMAT="json"))

    processors = _processors()
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert structlog.processors.format_exc_info in processors


def test_text_format_renders_console(restore_logging):
    setup_logging(Settings(_env_file=None, LOG_FORMAT="text"))

    processors = _processors()
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert structlog.processors.format_exc_info not in processors


def test_session_context_merged_into_events(restore_logging):
    """Test context bound by the SSE endpoint reaches request events."""
    setup_logging(Settings(_env_file=None, LOG_FORMAT="json"))
    merge = _processors()[0]

    with structlog.contextvars.bound_contextvars(transport="sse", peer="10.0.0.7"):
        event = merge(None, "info", {"event": "call_tool_received", "tool": "send-email"})

    assert event == {
        "transport": "sse",
        "peer": "10.0.0.7",
        "event": "call_tool_received",
        "tool": "send-email",
    }
