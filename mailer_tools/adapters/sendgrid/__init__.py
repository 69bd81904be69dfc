"""SendGrid adapter.

Provides tools for the SendGrid v3 API:
- Send email (plain, HTML or dynamic template)
- Manage marketing contacts and contact lists
- Manage dynamic templates
- Send single sends to lists
- Validate addresses, read stats, list senders and suppression groups

Usage:
    from mailer_tools.adapters.sendgrid import SendGridClientWrapper, build_sendgrid_catalog

    client = SendGridClientWrapper(api_key="SG....")
    catalog = build_sendgrid_catalog(client)
"""

from mailer_tools.catalog import ToolCatalog

from .client import SendGridClientWrapper
from .exceptions import (
    SendGridAPIError,
    SendGridAuthError,
    SendGridNotFoundError,
    SendGridRateLimitError,
    SendGridValidationError,
)
from .tools import ALL_TOOLS, SendGridTool

__all__ = [
    # Client
    "SendGridClientWrapper",
    # Exceptions
    "SendGridAPIError",
    "SendGridAuthError",
    "SendGridNotFoundError",
    "SendGridRateLimitError",
    "SendGridValidationError",
    # Tools
    "SendGridTool",
    "build_sendgrid_tools",
    "build_sendgrid_catalog",
]


def build_sendgrid_tools(client: SendGridClientWrapper) -> list[SendGridTool]:
    """Instantiate every SendGrid tool against one shared client."""
    return [tool_cls(client) for tool_cls in ALL_TOOLS]


def build_sendgrid_catalog(client: SendGridClientWrapper) -> ToolCatalog:
    """Build the immutable tool catalog for a SendGrid client.

    Example:
        client = SendGridClientWrapper(api_key=settings.SENDGRID_API_KEY)
        catalog = build_sendgrid_catalog(client)
        catalog.names()  # ["send-email", "delete-contacts", ...]
    """
    if client is None:
        raise ValueError("SendGrid client is not configured")
    return ToolCatalog.from_tools(build_sendgrid_tools(client))
