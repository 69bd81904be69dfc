"""SendGrid Send Email Tool.

Send a single email through /v3/mail/send.
"""

from typing import Any

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.schemas import SendEmailInput
from mailer_tools.adapters.sendgrid.tools.base import SendGridTool


def build_mail_payload(input_obj: SendEmailInput) -> dict[str, Any]:
    """Translate tool input into a SendGrid mail send body."""
    personalization: dict[str, Any] = {"to": [{"email": input_obj.to}]}
    if input_obj.cc:
        personalization["cc"] = [{"email": email} for email in input_obj.cc]
    if input_obj.bcc:
        personalization["bcc"] = [{"email": email} for email in input_obj.bcc]
    if input_obj.dynamic_template_data:
        personalization["dynamic_template_data"] = input_obj.dynamic_template_data

    message: dict[str, Any] = {
        "personalizations": [personalization],
        "from": {"email": input_obj.from_},
        "subject": input_obj.subject,
    }

    # text/plain must precede text/html
    content = []
    if input_obj.text:
        content.append({"type": "text/plain", "value": input_obj.text})
    if input_obj.html:
        content.append({"type": "text/html", "value": input_obj.html})
    if content:
        message["content"] = content
    if input_obj.template_id:
        message["template_id"] = input_obj.template_id

    return message


class SendEmailTool(SendGridTool):
    """Tool for sending a single email.

    Use Cases:
    - "Email a@example.com that the report is ready"
    - "Send the welcome template to a new user"
    """

    name = "send-email"
    description = (
        "Send an email using SendGrid. Provide text and/or html content, "
        "or a dynamic template_id with dynamic_template_data."
    )
    input_model = SendEmailInput
    metadata = ToolMetadata(read_only=False, destructive=False, idempotent=False)

    async def run(self, input_obj: SendEmailInput) -> dict[str, Any]:
        result = await self.client.send_mail(build_mail_payload(input_obj))
        return {
            "status": "sent",
            "to": input_obj.to,
            "subject": input_obj.subject,
            "message_id": result.get("message_id"),
        }
