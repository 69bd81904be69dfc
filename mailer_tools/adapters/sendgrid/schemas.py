"""SendGrid adapter Pydantic schemas.

Input schemas for all SendGrid tools. Each model's JSON Schema is what the
catalog advertises as the tool's ``inputSchema``.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ToolInput(BaseModel):
    """Base for tool inputs: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# ============================================================================
# MAIL SEND
# ============================================================================


class SendEmailInput(ToolInput):
    """Input schema for SendEmailTool."""

    to: str = Field(..., description="Recipient email address")
    from_: str = Field(..., alias="from", description="Sender email address (must be a verified sender)")
    subject: str = Field(..., description="Email subject line")
    text: str | None = Field(None, description="Plain text content")
    html: str | None = Field(None, description="HTML content")
    cc: list[str] = Field(default_factory=list, description="CC recipients")
    bcc: list[str] = Field(default_factory=list, description="BCC recipients")
    template_id: str | None = Field(None, description="Dynamic template ID to render instead of text/html")
    dynamic_template_data: dict[str, Any] | None = Field(
        None, description="Handlebars data for the dynamic template"
    )

    @model_validator(mode="after")
    def _require_content(self) -> "SendEmailInput":
        if not (self.text or self.html or self.template_id):
            raise ValueError("one of text, html or template_id is required")
        return self


# ============================================================================
# CONTACTS & LISTS
# ============================================================================


class ContactInput(ToolInput):
    """Single contact to add or update."""

    email: str = Field(..., description="Contact email address")
    first_name: str | None = Field(None, description="Contact first name")
    last_name: str | None = Field(None, description="Contact last name")


class DeleteContactsInput(ToolInput):
    """Input schema for DeleteContactsTool."""

    emails: list[str] = Field(..., min_length=1, description="Email addresses of the contacts to delete")


class ListContactsInput(ToolInput):
    """Input schema for ListContactsTool (no arguments)."""


class CreateContactListInput(ToolInput):
    """Input schema for CreateContactListTool."""

    name: str = Field(..., min_length=1, description="Name of the new contact list")


class ListContactListsInput(ToolInput):
    """Input schema for ListContactListsTool."""

    page_size: int = Field(100, ge=1, le=1000, description="Maximum lists to return")


class DeleteContactListInput(ToolInput):
    """Input schema for DeleteContactListTool."""

    list_id: str = Field(..., description="ID of the contact list to delete")
    delete_contacts: bool = Field(False, description="Also delete the contacts on the list")


class AddContactsToListInput(ToolInput):
    """Input schema for AddContactsToListTool."""

    list_id: str = Field(..., description="ID of the contact list")
    contacts: list[ContactInput] = Field(..., min_length=1, description="Contacts to add to the list")


class RemoveContactsFromListInput(ToolInput):
    """Input schema for RemoveContactsFromListTool."""

    list_id: str = Field(..., description="ID of the contact list")
    emails: list[str] = Field(..., min_length=1, description="Email addresses to remove from the list")


class GetContactsByListInput(ToolInput):
    """Input schema for GetContactsByListTool."""

    list_id: str = Field(..., description="ID of the contact list")


# ============================================================================
# TEMPLATES
# ============================================================================


class CreateTemplateInput(ToolInput):
    """Input schema for CreateTemplateTool."""

    name: str = Field(..., min_length=1, description="Template name")
    subject: str = Field(..., description="Subject line (may use handlebars)")
    html_content: str = Field(..., description="HTML body (may use handlebars)")
    plain_content: str = Field(..., description="Plain text body (may use handlebars)")


class ListTemplatesInput(ToolInput):
    """Input schema for ListTemplatesTool."""

    page_size: int = Field(20, ge=1, le=200, description="Maximum templates to return")


class TemplateIdInput(ToolInput):
    """Input schema for tools addressing one template."""

    template_id: str = Field(..., description="Template ID")


# ============================================================================
# VALIDATION & STATS
# ============================================================================


class ValidateEmailInput(ToolInput):
    """Input schema for ValidateEmailTool."""

    email: str = Field(..., description="Email address to validate")
    source: str | None = Field(None, description="Free-form label for where the address came from")


class GetStatsInput(ToolInput):
    """Input schema for GetStatsTool."""

    start_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Start date (YYYY-MM-DD)")
    end_date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="End date (YYYY-MM-DD)")
    aggregated_by: Literal["day", "week", "month"] | None = Field(
        None, description="How to group the statistics"
    )


# ============================================================================
# SENDERS & SUPPRESSIONS
# ============================================================================


class ListVerifiedSendersInput(ToolInput):
    """Input schema for ListVerifiedSendersTool (no arguments)."""


class ListSuppressionGroupsInput(ToolInput):
    """Input schema for ListSuppressionGroupsTool (no arguments)."""


# ============================================================================
# SINGLE SENDS
# ============================================================================


class SendToListInput(ToolInput):
    """Input schema for SendToListTool."""

    name: str = Field(..., description="Name of the single send")
    list_ids: list[str] = Field(..., min_length=1, description="Contact list IDs to send to")
    subject: str = Field(..., description="Email subject line")
    html_content: str = Field(..., description="HTML body")
    plain_content: str = Field(..., description="Plain text body")
    sender_id: int = Field(..., description="ID of a verified sender")
    suppression_group_id: int | None = Field(
        None, description="Unsubscribe group ID (required unless custom_unsubscribe_url is set)"
    )
    custom_unsubscribe_url: str | None = Field(None, description="Custom unsubscribe URL")

    @model_validator(mode="after")
    def _require_unsubscribe(self) -> "SendToListInput":
        if self.suppression_group_id is None and not self.custom_unsubscribe_url:
            raise ValueError("either suppression_group_id or custom_unsubscribe_url is required")
        return self


class GetSingleSendInput(ToolInput):
    """Input schema for GetSingleSendTool."""

    single_send_id: str = Field(..., description="Single send ID")


class ListSingleSendsInput(ToolInput):
    """Input schema for ListSingleSendsTool."""

    page_size: int = Field(50, ge=1, le=100, description="Maximum single sends to return")
