"""Argument normalization.

Tool-call arguments arrive either already structured or as a JSON string.
Both are resolved here into one canonical ``dict`` before dispatch.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mailer_tools.errors import ArgumentDecodeError


@dataclass(frozen=True)
class RawString:
    text: str


@dataclass(frozen=True)
class RawStructured:
    value: Any


RawArguments = RawString | RawStructured


def wrap_raw_arguments(raw: Any) -> RawArguments:
    """Tag wire-level arguments by their encoding.

    Raises:
        ArgumentDecodeError: byte arguments are not valid UTF-8.
    """
    if isinstance(raw, (RawString, RawStructured)):
        return raw
    if isinstance(raw, str):
        return RawString(raw)
    if isinstance(raw, (bytes, bytearray)):
        try:
            return RawString(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise ArgumentDecodeError(f"Arguments are not valid UTF-8 (position {e.start})") from e
    return RawStructured(raw)


def normalize_arguments(raw: Any) -> dict[str, Any]:
    """Return call arguments as a dict.

    Raises:
        ArgumentDecodeError: string arguments are not a JSON object, or
            structured arguments are not a mapping.
    """
    tagged = wrap_raw_arguments(raw)

    if isinstance(tagged, RawString):
        try:
            decoded = json.loads(tagged.text)
        except json.JSONDecodeError as e:
            raise ArgumentDecodeError(f"Invalid JSON arguments: {e.msg} (position {e.pos})") from e
        if not isinstance(decoded, dict):
            raise ArgumentDecodeError(
                f"Arguments must decode to a JSON object, got {type(decoded).__name__}"
            )
        return decoded

    if tagged.value is None:
        return {}
    if isinstance(tagged.value, dict):
        return tagged.value
    if isinstance(tagged.value, Mapping):
        return dict(tagged.value)
    raise ArgumentDecodeError(
        f"Arguments must be an object, got {type(tagged.value).__name__}"
    )
