"""Session adapter tests: the list-tools and call-tool request paths."""

import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from prometheus_client import REGISTRY
from structlog.testing import capture_logs
from unittest.mock import AsyncMock, patch

from apps.mcp_server.session import ToolSessionAdapter
from mailer_obs.observer import LoggingRequestObserver
from mailer_tools.adapters.sendgrid import SendGridAPIError, SendGridClientWrapper, build_sendgrid_catalog
from mailer_tools.errors import UNEXPECTED_ERROR_MESSAGE


class RecordingObserver:
    def __init__(self):
        self.events = []

    def request_received(self, kind, tool_name):
        self.events.append(("received", kind, tool_name))

    def request_succeeded(self, kind, tool_name, duration_seconds):
        self.events.append(("succeeded", kind, tool_name))

    def request_failed(self, kind, tool_name, duration_seconds, category, message, fault):
        self.events.append(("failed", kind, tool_name, category))


class ExplodingObserver:
    def request_received(self, kind, tool_name):
        raise RuntimeError("log sink down")

    request_succeeded = request_received
    request_failed = request_received


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


# ============================================================================
# CALL TOOL
# ============================================================================


@pytest.mark.asyncio
async def test_send_email_result_passed_through(adapter, send_email_handler, sent_result, email_args):
    result = await adapter.call_tool("send-email", email_args)

    assert result is sent_result
    send_email_handler.assert_awaited_once_with(email_args)


@pytest.mark.asyncio
async def test_string_arguments_decoded_before_dispatch(adapter, send_email_handler, email_args):
    await adapter.call_tool(
        "send-email",
        '{"to": "a@example.com", "from": "b@example.com", "subject": "hi", "text": "hello"}',
    )

    send_email_handler.assert_awaited_once_with(email_args)


@pytest.mark.asyncio
async def test_bad_json_is_invalid_request(adapter, send_email_handler):
    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", "{bad json")

    assert exc_info.value.error.code == types.INVALID_REQUEST
    send_email_handler.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_utf8_arguments_are_invalid_request(adapter, send_email_handler):
    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", b'{"to": "\xff@example.com"}')

    assert exc_info.value.error.code == types.INVALID_REQUEST
    send_email_handler.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_tool_is_method_not_found(adapter, send_email_handler, list_templates_handler):
    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("nonexistent-tool", {})

    assert exc_info.value.error.code == types.METHOD_NOT_FOUND
    assert "nonexistent-tool" in exc_info.value.error.message
    send_email_handler.assert_not_called()
    list_templates_handler.assert_not_called()


@pytest.mark.asyncio
async def test_missing_arguments_dispatched_as_empty_object(adapter, list_templates_handler):
    await adapter.call_tool("list-templates", None)

    list_templates_handler.assert_awaited_once_with({})


@pytest.mark.asyncio
async def test_structured_service_rejection(adapter, send_email_handler, email_args):
    send_email_handler.side_effect = SendGridAPIError(
        "SendGrid API error (400)",
        400,
        [{"message": "first"}, {"message": "second"}, {"message": "third"}],
    )

    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", email_args)

    message = exc_info.value.error.message
    assert exc_info.value.error.code == types.INTERNAL_ERROR
    for sub in ("first", "second", "third"):
        assert message.count(sub) == 1
    assert message.index("first") < message.index("second") < message.index("third")
    send_email_handler.assert_awaited_once()


@pytest.mark.asyncio
async def test_plain_error_message_preserved(adapter, send_email_handler, email_args):
    send_email_handler.side_effect = RuntimeError("upstream closed the connection")

    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", email_args)

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    assert exc_info.value.error.message == "upstream closed the connection"


@pytest.mark.asyncio
async def test_empty_error_falls_back(adapter, send_email_handler, email_args):
    send_email_handler.side_effect = RuntimeError()

    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", email_args)

    assert exc_info.value.error.message == UNEXPECTED_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_catalog_failure_during_call_is_internal_error(send_email_handler):
    def broken_catalog():
        raise RuntimeError("SendGrid client is not configured")

    adapter = ToolSessionAdapter(broken_catalog)

    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", {})

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    send_email_handler.assert_not_called()


# ============================================================================
# LIST TOOLS
# ============================================================================


@pytest.mark.asyncio
async def test_list_tools_wraps_catalog(adapter):
    result = await adapter.list_tools()

    assert isinstance(result, types.ListToolsResult)
    assert [tool.name for tool in result.tools] == ["send-email", "list-templates"]
    assert result.tools[0].inputSchema["required"] == ["to", "from", "subject"]
    assert result.tools[1].annotations.readOnlyHint is True


@pytest.mark.asyncio
async def test_list_tools_twice_is_identical(adapter):
    first = await adapter.list_tools()
    second = await adapter.list_tools()

    assert first == second


@pytest.mark.asyncio
async def test_list_tools_build_failure_is_internal_error():
    def broken_catalog():
        raise RuntimeError("catalog unavailable")

    adapter = ToolSessionAdapter(broken_catalog)

    with pytest.raises(McpError) as exc_info:
        await adapter.list_tools()

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    assert exc_info.value.error.message == "catalog unavailable"


# ============================================================================
# OBSERVATION
# ============================================================================


@pytest.mark.asyncio
async def test_observer_sees_received_and_outcome(stub_catalog, email_args):
    observer = RecordingObserver()
    adapter = ToolSessionAdapter(lambda: stub_catalog, observer=observer)

    await adapter.call_tool("send-email", email_args)
    with pytest.raises(McpError):
        await adapter.call_tool("nonexistent-tool", {})

    assert observer.events == [
        ("received", "call_tool", "send-email"),
        ("succeeded", "call_tool", "send-email"),
        ("received", "call_tool", "nonexistent-tool"),
        ("failed", "call_tool", "nonexistent-tool", "METHOD_NOT_FOUND"),
    ]


@pytest.mark.asyncio
async def test_observer_failure_does_not_alter_response(stub_catalog, sent_result, email_args):
    adapter = ToolSessionAdapter(lambda: stub_catalog, observer=ExplodingObserver())

    assert await adapter.call_tool("send-email", email_args) is sent_result
    with pytest.raises(McpError) as exc_info:
        await adapter.call_tool("send-email", "{bad json")
    assert exc_info.value.error.code == types.INVALID_REQUEST


@pytest.mark.asyncio
async def test_logging_observer_emits_events_and_metrics(stub_catalog, send_email_handler, email_args):
    adapter = ToolSessionAdapter(lambda: stub_catalog, observer=LoggingRequestObserver())
    success_labels = {"tool_name": "send-email", "status": "success"}
    failure_labels = {"tool_name": "send-email", "status": "failure"}
    before_success = _sample("tool_calls_total", success_labels)
    before_failure = _sample("tool_calls_total", failure_labels)

    with capture_logs() as logs:
        await adapter.call_tool("send-email", email_args)
        send_email_handler.side_effect = RuntimeError("boom")
        with pytest.raises(McpError):
            await adapter.call_tool("send-email", email_args)

    events = [entry["event"] for entry in logs]
    assert events == [
        "call_tool_received",
        "call_tool_succeeded",
        "call_tool_received",
        "call_tool_failed",
    ]
    assert all(entry["tool"] == "send-email" for entry in logs)
    assert logs[-1]["category"] == "INTERNAL_ERROR"
    assert logs[-1]["error"] == "boom"
    assert _sample("tool_calls_total", success_labels) == before_success + 1
    assert _sample("tool_calls_total", failure_labels) == before_failure + 1


@pytest.mark.asyncio
async def test_logging_observer_traceback_only_for_internal_errors(
    stub_catalog, send_email_handler, email_args
):
    adapter = ToolSessionAdapter(lambda: stub_catalog, observer=LoggingRequestObserver())
    send_email_handler.side_effect = RuntimeError("boom")

    with capture_logs() as logs:
        with pytest.raises(McpError):
            await adapter.call_tool("sned-email", email_args)
        with pytest.raises(McpError):
            await adapter.call_tool("send-email", "{bad json")
        with pytest.raises(McpError):
            await adapter.call_tool("send-email", email_args)

    failures = [entry for entry in logs if entry["event"] == "call_tool_failed"]
    assert [entry["category"] for entry in failures] == [
        "METHOD_NOT_FOUND",
        "INVALID_REQUEST",
        "INTERNAL_ERROR",
    ]
    assert [entry["log_level"] for entry in failures] == ["warning", "warning", "error"]
    assert "exc_info" not in failures[0]
    assert "exc_info" not in failures[1]
    assert isinstance(failures[2]["exc_info"], RuntimeError)


# ============================================================================
# SENDGRID CATALOG
# ============================================================================


@pytest.fixture
def sendgrid_client():
    return SendGridClientWrapper(api_key="SG.mock-key")


@pytest.fixture
def sendgrid_adapter(sendgrid_client):
    catalog = build_sendgrid_catalog(sendgrid_client)
    return ToolSessionAdapter(lambda: catalog)


@pytest.mark.asyncio
async def test_schema_mismatch_never_reaches_sendgrid(sendgrid_adapter, sendgrid_client):
    send_mail = AsyncMock(return_value={"status_code": 202, "message_id": "m1"})

    with patch.object(sendgrid_client, "send_mail", send_mail):
        with pytest.raises(McpError) as exc_info:
            await sendgrid_adapter.call_tool("send-email", {"to": "x"})

    assert exc_info.value.error.code == types.INVALID_REQUEST
    assert "from" in exc_info.value.error.message
    send_mail.assert_not_called()


@pytest.mark.asyncio
async def test_sendgrid_tool_plain_error_message_preserved(
    sendgrid_adapter, sendgrid_client, email_args
):
    with patch.object(sendgrid_client, "send_mail", AsyncMock(side_effect=RuntimeError("M"))):
        with pytest.raises(McpError) as exc_info:
            await sendgrid_adapter.call_tool("send-email", email_args)

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    assert exc_info.value.error.message == "M"


@pytest.mark.asyncio
async def test_sendgrid_tool_rejection_lists_sub_errors(sendgrid_adapter, sendgrid_client, email_args):
    error = SendGridAPIError(
        "bad request", 400, [{"message": "invalid from"}, {"message": "subject too long"}]
    )

    with patch.object(sendgrid_client, "send_mail", AsyncMock(side_effect=error)):
        with pytest.raises(McpError) as exc_info:
            await sendgrid_adapter.call_tool("send-email", email_args)

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    assert exc_info.value.error.message == "SendGrid API Error: invalid from, subject too long"


@pytest.mark.asyncio
async def test_sendgrid_send_email_result(sendgrid_adapter, sendgrid_client, email_args):
    send_mail = AsyncMock(return_value={"status_code": 202, "message_id": "m1"})

    with patch.object(sendgrid_client, "send_mail", send_mail):
        result = await sendgrid_adapter.call_tool("send-email", email_args)

    assert isinstance(result, types.CallToolResult)
    assert '"message_id": "m1"' in result.content[0].text
    send_mail.assert_awaited_once()


# ============================================================================
# MCP SERVER WIRING
# ============================================================================


@pytest.mark.asyncio
async def test_install_registers_protocol_handlers(adapter, sent_result, email_args):
    from mcp.server import Server

    server = Server("test-server")
    adapter.install(server)

    list_handler = server.request_handlers[types.ListToolsRequest]
    call_handler = server.request_handlers[types.CallToolRequest]

    listed = await list_handler(types.ListToolsRequest(method="tools/list"))
    called = await call_handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="send-email", arguments=email_args),
        )
    )

    assert [tool.name for tool in listed.root.tools] == ["send-email", "list-templates"]
    assert called.root == sent_result
