"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from mcp import types
from unittest.mock import AsyncMock

from apps.mcp_server.main import app
from apps.mcp_server.session import ToolSessionAdapter
from mailer_tools.base import ToolDefinition, ToolMetadata
from mailer_tools.catalog import ToolCatalog


SEND_EMAIL_SCHEMA = {
    "type": "object",
    "properties": {
        "to": {"type": "string"},
        "from": {"type": "string"},
        "subject": {"type": "string"},
        "text": {"type": "string"},
    },
    "required": ["to", "from", "subject"],
}


@pytest.fixture
def client():
    """FastAPI test client (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def sent_result():
    """Result the stub send-email operation returns."""
    return types.CallToolResult(content=[types.TextContent(type="text", text='{"status": "sent"}')])


@pytest.fixture
def send_email_handler(sent_result):
    """Spy standing in for the underlying send-email operation."""
    return AsyncMock(return_value=sent_result)


@pytest.fixture
def list_templates_handler():
    return AsyncMock(return_value=types.CallToolResult(content=[]))


@pytest.fixture
def stub_catalog(send_email_handler, list_templates_handler):
    """Two-tool catalog backed by spies."""
    return ToolCatalog(
        [
            ToolDefinition(
                name="send-email",
                description="Send an email",
                input_schema=SEND_EMAIL_SCHEMA,
                handler=send_email_handler,
            ),
            ToolDefinition(
                name="list-templates",
                description="List templates",
                input_schema={"type": "object", "properties": {}},
                handler=list_templates_handler,
                metadata=ToolMetadata(read_only=True, idempotent=True),
            ),
        ]
    )


@pytest.fixture
def adapter(stub_catalog):
    """Session adapter over the stub catalog."""
    return ToolSessionAdapter(lambda: stub_catalog)


@pytest.fixture
def email_args():
    return {"to": "a@example.com", "from": "b@example.com", "subject": "hi", "text": "hello"}


@pytest.fixture
def api_key(monkeypatch):
    """Give the module-level settings an API key for the lifespan."""
    from apps.mcp_server import main

    monkeypatch.setattr(main.settings, "SENDGRID_API_KEY", "SG.test-key")
    return "SG.test-key"
