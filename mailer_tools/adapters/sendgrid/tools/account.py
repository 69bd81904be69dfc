"""SendGrid account tools: validation, stats, senders, suppression groups."""

from typing import Any

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.schemas import (
    GetStatsInput,
    ListSuppressionGroupsInput,
    ListVerifiedSendersInput,
    ValidateEmailInput,
)
from mailer_tools.adapters.sendgrid.tools.base import SendGridTool


class ValidateEmailTool(SendGridTool):
    name = "validate-email"
    description = "Validate an email address using SendGrid's Email Validation API"
    input_model = ValidateEmailInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ValidateEmailInput) -> dict[str, Any]:
        response = await self.client.validate_email(input_obj.email, source=input_obj.source)
        return response.get("result", response)


class GetStatsTool(SendGridTool):
    name = "get-stats"
    description = "Get global email statistics (requests, delivered, opens, clicks, bounces) for a date range"
    input_model = GetStatsInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: GetStatsInput) -> Any:
        return await self.client.get_stats(
            input_obj.start_date,
            end_date=input_obj.end_date,
            aggregated_by=input_obj.aggregated_by,
        )


class ListVerifiedSendersTool(SendGridTool):
    name = "list-verified-senders"
    description = "List all verified sender identities (usable as 'from' addresses and sender_id)"
    input_model = ListVerifiedSendersInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListVerifiedSendersInput) -> list[dict[str, Any]]:
        response = await self.client.list_verified_senders()
        return [
            {
                "id": sender.get("id"),
                "nickname": sender.get("nickname"),
                "from_email": sender.get("from_email"),
                "from_name": sender.get("from_name"),
                "verified": sender.get("verified"),
            }
            for sender in response.get("results", [])
        ]


class ListSuppressionGroupsTool(SendGridTool):
    name = "list-suppression-groups"
    description = "List all unsubscribe (suppression) groups"
    input_model = ListSuppressionGroupsInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListSuppressionGroupsInput) -> Any:
        return await self.client.list_suppression_groups()
