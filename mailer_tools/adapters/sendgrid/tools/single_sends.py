"""SendGrid single send (marketing campaign) tools."""

from typing import Any

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.schemas import (
    GetSingleSendInput,
    ListSingleSendsInput,
    SendToListInput,
)
from mailer_tools.adapters.sendgrid.tools.base import SendGridTool


class SendToListTool(SendGridTool):
    """Create a single send for one or more lists and schedule it immediately.

    Use Cases:
    - "Send the March newsletter to the subscribers list"
    """

    name = "send-to-list"
    description = (
        "Send an email to one or more contact lists as a SendGrid single send, scheduled immediately. "
        "Requires a verified sender_id and a suppression_group_id or custom_unsubscribe_url."
    )
    input_model = SendToListInput

    async def run(self, input_obj: SendToListInput) -> dict[str, Any]:
        email_config: dict[str, Any] = {
            "subject": input_obj.subject,
            "html_content": input_obj.html_content,
            "plain_content": input_obj.plain_content,
            "sender_id": input_obj.sender_id,
        }
        if input_obj.suppression_group_id is not None:
            email_config["suppression_group_id"] = input_obj.suppression_group_id
        if input_obj.custom_unsubscribe_url:
            email_config["custom_unsubscribe_url"] = input_obj.custom_unsubscribe_url

        single_send = await self.client.create_single_send(
            {
                "name": input_obj.name,
                "send_to": {"list_ids": input_obj.list_ids},
                "email_config": email_config,
            }
        )
        schedule = await self.client.schedule_single_send(single_send["id"], send_at="now")

        return {
            "id": single_send["id"],
            "name": input_obj.name,
            "status": schedule.get("status", "scheduled"),
            "send_at": schedule.get("send_at"),
        }


class GetSingleSendTool(SendGridTool):
    name = "get-single-send"
    description = "Get details of a single send, including its status and schedule"
    input_model = GetSingleSendInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: GetSingleSendInput) -> dict[str, Any]:
        return await self.client.get_single_send(input_obj.single_send_id)


class ListSingleSendsTool(SendGridTool):
    name = "list-single-sends"
    description = "List single sends (marketing campaigns) with their status"
    input_model = ListSingleSendsInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListSingleSendsInput) -> list[dict[str, Any]]:
        response = await self.client.list_single_sends(page_size=input_obj.page_size)
        return [
            {
                "id": item.get("id"),
                "name": item.get("name"),
                "status": item.get("status"),
                "send_at": item.get("send_at"),
            }
            for item in response.get("result", [])
        ]
