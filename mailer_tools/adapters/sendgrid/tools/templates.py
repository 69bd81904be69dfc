"""SendGrid dynamic template tools."""

from typing import Any

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.schemas import (
    CreateTemplateInput,
    ListTemplatesInput,
    TemplateIdInput,
)
from mailer_tools.adapters.sendgrid.tools.base import SendGridTool


def _summarize_template(template: dict[str, Any]) -> dict[str, Any]:
    versions = template.get("versions") or []
    active = next((v for v in versions if v.get("active") == 1), None)
    return {
        "id": template.get("id"),
        "name": template.get("name"),
        "generation": template.get("generation"),
        "updated_at": template.get("updated_at"),
        "active_version": active.get("id") if active else None,
        "subject": active.get("subject") if active else None,
    }


class CreateTemplateTool(SendGridTool):
    """Create a dynamic template with one active version.

    Two SendGrid calls: create the template, then its first version.
    """

    name = "create-template"
    description = "Create a new dynamic email template with subject, HTML and plain text content"
    input_model = CreateTemplateInput

    async def run(self, input_obj: CreateTemplateInput) -> dict[str, Any]:
        template = await self.client.create_template(input_obj.name)
        version = await self.client.create_template_version(
            template["id"],
            {
                "name": f"{input_obj.name} v1",
                "subject": input_obj.subject,
                "html_content": input_obj.html_content,
                "plain_content": input_obj.plain_content,
                "active": 1,
            },
        )
        return {
            "id": template["id"],
            "name": template.get("name", input_obj.name),
            "version_id": version.get("id"),
            "subject": input_obj.subject,
        }


class ListTemplatesTool(SendGridTool):
    """List dynamic templates."""

    name = "list-templates"
    description = "List all dynamic email templates"
    input_model = ListTemplatesInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListTemplatesInput) -> list[dict[str, Any]]:
        response = await self.client.list_templates(page_size=input_obj.page_size)
        return [_summarize_template(t) for t in response.get("result", response.get("templates", []))]


class GetTemplateTool(SendGridTool):
    """Retrieve one template with its versions."""

    name = "get-template"
    description = "Retrieve a SendGrid template by ID, including its versions"
    input_model = TemplateIdInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: TemplateIdInput) -> dict[str, Any]:
        return await self.client.get_template(input_obj.template_id)


class DeleteTemplateTool(SendGridTool):
    """Delete a template."""

    name = "delete-template"
    description = "Delete a dynamic template"
    input_model = TemplateIdInput
    metadata = ToolMetadata(destructive=True, idempotent=True)

    async def run(self, input_obj: TemplateIdInput) -> dict[str, Any]:
        await self.client.delete_template(input_obj.template_id)
        return {"status": "deleted", "template_id": input_obj.template_id}
