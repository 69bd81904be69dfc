"""SendGrid marketing contact and list tools."""

from typing import Any

from mailer_tools.base import ToolMetadata
from mailer_tools.adapters.sendgrid.schemas import (
    AddContactsToListInput,
    CreateContactListInput,
    DeleteContactListInput,
    DeleteContactsInput,
    GetContactsByListInput,
    ListContactListsInput,
    ListContactsInput,
    RemoveContactsFromListInput,
)
from mailer_tools.adapters.sendgrid.tools.base import SendGridTool


def _sgql_string(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def email_query(emails: list[str]) -> str:
    """SGQL query matching any of ``emails``."""
    return f"email IN ({', '.join(_sgql_string(email) for email in emails)})"


async def _contact_ids_for(client, emails: list[str]) -> list[str]:
    found = await client.search_contacts(email_query(emails))
    return [contact["id"] for contact in found.get("result", []) if "id" in contact]


class ListContactsTool(SendGridTool):
    """List a sample of the account's marketing contacts."""

    name = "list-contacts"
    description = "List the most recent marketing contacts (up to 50)"
    input_model = ListContactsInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListContactsInput) -> list[dict[str, Any]]:
        response = await self.client.list_contacts()
        return [
            {
                "id": contact.get("id"),
                "email": contact.get("email"),
                "first_name": contact.get("first_name"),
                "last_name": contact.get("last_name"),
            }
            for contact in response.get("result", [])
        ]


class DeleteContactsTool(SendGridTool):
    """Delete marketing contacts by email address."""

    name = "delete-contacts"
    description = "Delete contacts from your SendGrid account by email address"
    input_model = DeleteContactsInput
    metadata = ToolMetadata(destructive=True, idempotent=True)

    async def run(self, input_obj: DeleteContactsInput) -> dict[str, Any]:
        contact_ids = await _contact_ids_for(self.client, input_obj.emails)
        if not contact_ids:
            return {"status": "no_match", "deleted": 0, "emails": input_obj.emails}

        response = await self.client.delete_contacts(contact_ids)
        return {"status": "accepted", "deleted": len(contact_ids), "job_id": response.get("job_id")}


class ListContactListsTool(SendGridTool):
    """List all contact lists."""

    name = "list-contact-lists"
    description = "List all contact lists in your SendGrid account"
    input_model = ListContactListsInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: ListContactListsInput) -> list[dict[str, Any]]:
        response = await self.client.list_contact_lists(page_size=input_obj.page_size)
        return [
            {
                "id": item.get("id"),
                "name": item.get("name"),
                "contact_count": item.get("contact_count", 0),
            }
            for item in response.get("result", [])
        ]


class CreateContactListTool(SendGridTool):
    """Create a contact list."""

    name = "create-contact-list"
    description = "Create a new contact list in SendGrid"
    input_model = CreateContactListInput

    async def run(self, input_obj: CreateContactListInput) -> dict[str, Any]:
        return await self.client.create_contact_list(input_obj.name)


class DeleteContactListTool(SendGridTool):
    """Delete a contact list."""

    name = "delete-contact-list"
    description = "Delete a contact list from SendGrid, optionally deleting its contacts too"
    input_model = DeleteContactListInput
    metadata = ToolMetadata(destructive=True, idempotent=True)

    async def run(self, input_obj: DeleteContactListInput) -> dict[str, Any]:
        response = await self.client.delete_contact_list(
            input_obj.list_id, delete_contacts=input_obj.delete_contacts
        )
        return {"status": "deleted", "list_id": input_obj.list_id, "job_id": response.get("job_id")}


class AddContactsToListTool(SendGridTool):
    """Add (upsert) contacts and attach them to a list."""

    name = "add-contacts-to-list"
    description = "Add contacts to an existing SendGrid contact list, creating contacts that do not exist"
    input_model = AddContactsToListInput
    metadata = ToolMetadata(idempotent=True)

    async def run(self, input_obj: AddContactsToListInput) -> dict[str, Any]:
        contacts = [contact.model_dump(exclude_none=True) for contact in input_obj.contacts]
        response = await self.client.upsert_contacts(contacts, list_ids=[input_obj.list_id])
        return {"status": "accepted", "job_id": response.get("job_id"), "count": len(contacts)}


class RemoveContactsFromListTool(SendGridTool):
    """Remove contacts from a list without deleting them."""

    name = "remove-contacts-from-list"
    description = "Remove contacts (by email) from a SendGrid contact list without deleting the contacts"
    input_model = RemoveContactsFromListInput
    metadata = ToolMetadata(destructive=True, idempotent=True)

    async def run(self, input_obj: RemoveContactsFromListInput) -> dict[str, Any]:
        contact_ids = await _contact_ids_for(self.client, input_obj.emails)
        if not contact_ids:
            return {"status": "no_match", "removed": 0, "list_id": input_obj.list_id}

        response = await self.client.remove_contacts_from_list(input_obj.list_id, contact_ids)
        return {
            "status": "accepted",
            "removed": len(contact_ids),
            "list_id": input_obj.list_id,
            "job_id": response.get("job_id"),
        }


class GetContactsByListTool(SendGridTool):
    """List the contacts on one list."""

    name = "get-contacts-by-list"
    description = "Get all contacts belonging to a SendGrid contact list"
    input_model = GetContactsByListInput
    metadata = ToolMetadata(read_only=True, idempotent=True)

    async def run(self, input_obj: GetContactsByListInput) -> list[dict[str, Any]]:
        response = await self.client.search_contacts(
            f"CONTAINS(list_ids, {_sgql_string(input_obj.list_id)})"
        )
        return [
            {
                "id": contact.get("id"),
                "email": contact.get("email"),
                "first_name": contact.get("first_name"),
                "last_name": contact.get("last_name"),
            }
            for contact in response.get("result", [])
        ]
