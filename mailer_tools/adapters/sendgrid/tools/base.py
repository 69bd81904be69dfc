"""Shared behaviour for SendGrid tools."""

import json
from typing import Any, ClassVar

from mcp import types
from pydantic import BaseModel

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.client import SendGridClientWrapper
from mailer_tools.adapters.sendgrid.exceptions import SendGridAPIError


def text_result(payload: Any) -> types.CallToolResult:
    """Wrap a JSON-serializable payload as a single text content block."""
    if isinstance(payload, str):
        text = payload
    else:
        text = json.dumps(payload, indent=2, default=str)
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


class SendGridTool:
    """Base class for tools backed by one SendGrid client.

    Subclasses set ``name``, ``description``, ``input_model`` and implement
    :meth:`run`. :meth:`execute` validates the raw arguments against
    ``input_model`` first, so invalid arguments never reach SendGrid.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[BaseModel]]
    metadata: ClassVar[ToolMetadata] = ToolMetadata()

    def __init__(self, client: SendGridClientWrapper):
        self.client = client

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    async def execute(self, input_data: dict[str, Any]) -> types.CallToolResult:
        """Validate arguments, run the SendGrid operation and wrap its payload.

        Raises:
            pydantic.ValidationError: arguments do not match ``input_model``
            SendGridAPIError: SendGrid rejected the request or was unreachable
        """
        input_obj = self.input_model.model_validate(input_data)

        try:
            payload = await self.run(input_obj)
        except SendGridAPIError:
            raise
        except Exception as e:
            raise SendGridAPIError(str(e)) from e

        return text_result(payload)

    async def run(self, input_obj: Any) -> Any:
        raise NotImplementedError
