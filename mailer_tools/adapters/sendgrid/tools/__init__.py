"""SendGrid tools package.

Exports all SendGrid tools for easy importing.
"""

from .account import (
    GetStatsTool,
    ListSuppressionGroupsTool,
    ListVerifiedSendersTool,
    ValidateEmailTool,
)
from .base import SendGridTool, text_result
from .contacts import (
    AddContactsToListTool,
    CreateContactListTool,
    DeleteContactListTool,
    DeleteContactsTool,
    GetContactsByListTool,
    ListContactListsTool,
    ListContactsTool,
    RemoveContactsFromListTool,
)
from .mail import SendEmailTool
from .single_sends import GetSingleSendTool, ListSingleSendsTool, SendToListTool
from .templates import CreateTemplateTool, DeleteTemplateTool, GetTemplateTool, ListTemplatesTool

# Catalog order
ALL_TOOLS = (
    SendEmailTool,
    DeleteContactsTool,
    ListContactsTool,
    CreateContactListTool,
    ListContactListsTool,
    DeleteContactListTool,
    AddContactsToListTool,
    RemoveContactsFromListTool,
    GetContactsByListTool,
    CreateTemplateTool,
    ListTemplatesTool,
    GetTemplateTool,
    DeleteTemplateTool,
    ValidateEmailTool,
    GetStatsTool,
    ListVerifiedSendersTool,
    ListSuppressionGroupsTool,
    SendToListTool,
    GetSingleSendTool,
    ListSingleSendsTool,
)

__all__ = [
    "ALL_TOOLS",
    "AddContactsToListTool",
    "CreateContactListTool",
    "CreateTemplateTool",
    "DeleteContactListTool",
    "DeleteContactsTool",
    "DeleteTemplateTool",
    "GetContactsByListTool",
    "GetSingleSendTool",
    "GetStatsTool",
    "GetTemplateTool",
    "ListContactListsTool",
    "ListContactsTool",
    "ListSingleSendsTool",
    "ListSuppressionGroupsTool",
    "ListTemplatesTool",
    "ListVerifiedSendersTool",
    "RemoveContactsFromListTool",
    "SendEmailTool",
    "SendGridTool",
    "SendToListTool",
    "ValidateEmailTool",
    "text_result",
]
