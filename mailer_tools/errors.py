"""Tool error contract and fault translation.

Every failure raised while building the catalog, normalizing arguments or
dispatching a call is funnelled through :func:`translate_fault`, which
resolves it to exactly one :class:`ToolError`. The session layer is the only
caller; nothing below it translates errors.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during tool call"
SERVICE_ERROR_PREFIX = "SendGrid API Error: "


class ToolErrorCategory(IntEnum):
    """Protocol-level error categories (JSON-RPC codes)."""

    INVALID_REQUEST = types.INVALID_REQUEST
    METHOD_NOT_FOUND = types.METHOD_NOT_FOUND
    INTERNAL_ERROR = types.INTERNAL_ERROR


@dataclass(frozen=True)
class ToolError:
    """The single error a failed request produces."""

    category: ToolErrorCategory
    message: str

    def to_error_data(self) -> types.ErrorData:
        return types.ErrorData(code=int(self.category), message=self.message)

    def to_mcp_error(self) -> McpError:
        return McpError(self.to_error_data())


# ============================================================================
# EXCEPTIONS RAISED BY THE TOOL LAYER
# ============================================================================


class ToolLayerError(Exception):
    """Base exception for the tool layer."""

    pass


class ArgumentDecodeError(ToolLayerError, ValueError):
    """Call arguments could not be decoded into an object."""

    pass


class ToolNotFoundError(ToolLayerError, LookupError):
    """No tool with the requested name exists in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class DuplicateToolError(ToolLayerError, ValueError):
    """Two tools were registered under the same name."""

    pass


class ServiceError(Exception):
    """Base for errors raised by downstream service clients.

    ``errors`` holds the sub-errors the service reported for the request,
    each a mapping with at least a ``message`` key. It is empty when the
    service failed without a structured error body.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: Sequence[Mapping[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = list(errors or [])


# ============================================================================
# FAULT VARIANTS
# ============================================================================


@dataclass(frozen=True)
class InvalidArgumentsFault:
    message: str


@dataclass(frozen=True)
class UnknownToolFault:
    name: str


@dataclass(frozen=True)
class StructuredServiceFault:
    """The service responded but rejected the request with sub-errors."""

    messages: tuple[str, ...]


@dataclass(frozen=True)
class GenericFault:
    message: str


@dataclass(frozen=True)
class UnknownFault:
    """Not a recognizable error shape."""

    pass


Fault = InvalidArgumentsFault | UnknownToolFault | StructuredServiceFault | GenericFault | UnknownFault


def _validation_message(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
        details.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(details)


def _sub_error_messages(errors: Sequence[Any]) -> tuple[str, ...]:
    messages = []
    for sub_error in errors:
        if isinstance(sub_error, Mapping):
            messages.append(str(sub_error.get("message", "")))
        else:
            messages.append(str(sub_error))
    return tuple(messages)


def classify_fault(fault: object) -> Fault:
    """Resolve an arbitrary fault into one of the closed set of variants."""
    if isinstance(fault, ArgumentDecodeError):
        return InvalidArgumentsFault(str(fault) or "Invalid arguments")
    if isinstance(fault, ValidationError):
        return InvalidArgumentsFault(_validation_message(fault))
    if isinstance(fault, ToolNotFoundError):
        return UnknownToolFault(fault.name)
    if isinstance(fault, ServiceError) and fault.errors:
        return StructuredServiceFault(_sub_error_messages(fault.errors))
    if isinstance(fault, Exception):
        message = str(fault)
        if message:
            return GenericFault(message)
    return UnknownFault()


def translate_fault(fault: object) -> ToolError:
    """Map any fault to exactly one ToolError. Never raises."""
    try:
        variant = classify_fault(fault)
    except Exception:
        # str() on a hostile exception object can itself fail
        variant = UnknownFault()

    if isinstance(variant, InvalidArgumentsFault):
        return ToolError(ToolErrorCategory.INVALID_REQUEST, variant.message)
    if isinstance(variant, UnknownToolFault):
        return ToolError(ToolErrorCategory.METHOD_NOT_FOUND, f"Unknown tool: {variant.name}")
    if isinstance(variant, StructuredServiceFault):
        return ToolError(
            ToolErrorCategory.INTERNAL_ERROR,
            SERVICE_ERROR_PREFIX + ", ".join(variant.messages),
        )
    if isinstance(variant, GenericFault):
        return ToolError(ToolErrorCategory.INTERNAL_ERROR, variant.message)
    return ToolError(ToolErrorCategory.INTERNAL_ERROR, UNEXPECTED_ERROR_MESSAGE)
