"""Mailer Tool System.

Catalog, argument normalization, dispatch and error translation for the
MCP tool layer.
"""

from mailer_tools.arguments import RawString, RawStructured, normalize_arguments
from mailer_tools.base import Tool, ToolDefinition, ToolMetadata
from mailer_tools.catalog import CatalogProvider, ToolCatalog
from mailer_tools.dispatcher import ToolDispatcher
from mailer_tools.errors import (
    ArgumentDecodeError,
    DuplicateToolError,
    ServiceError,
    ToolError,
    ToolErrorCategory,
    ToolNotFoundError,
    translate_fault,
)

__all__ = [
    "ArgumentDecodeError",
    "CatalogProvider",
    "DuplicateToolError",
    "RawString",
    "RawStructured",
    "ServiceError",
    "Tool",
    "ToolCatalog",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolError",
    "ToolErrorCategory",
    "ToolMetadata",
    "ToolNotFoundError",
    "normalize_arguments",
    "translate_fault",
]
