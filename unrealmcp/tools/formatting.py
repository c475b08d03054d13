"""Shared argument parsing and result formatting for tools."""

import json
from typing import Any

from ..config.constants import MAX_INPUT_ECHO
from ..errors import MalformedInputError, RemotePayloadError


def to_text(data: Any) -> str:
    """Render a tool payload as text: strings as-is, everything else as JSON."""
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2)


def parse_json_object(raw: str, label: str = "parameters") -> dict:
    """
    Parse a JSON-encoded object argument.

    Raises:
        MalformedInputError: ``raw`` is not JSON or not an object
    """
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise MalformedInputError(f"Invalid JSON in {label}: {raw}") from e
    if not isinstance(parsed, dict):
        raise MalformedInputError(f"Invalid JSON in {label}: expected an object")
    return parsed


def parse_json_array(raw: str) -> list:
    """
    Parse a JSON-encoded array argument.

    Raises:
        MalformedInputError: ``raw`` is not JSON or not an array
    """
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise MalformedInputError(f"Invalid JSON array: {raw[:MAX_INPUT_ECHO]}") from e
    if not isinstance(parsed, list):
        raise MalformedInputError(f"Invalid JSON array: {raw[:MAX_INPUT_ECHO]}")
    return parsed


def parse_json_value(raw: str) -> Any:
    """Parse a JSON value, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def expect_object(payload: Any, what: str) -> dict:
    """Require a response payload to be a JSON object."""
    if not isinstance(payload, dict):
        raise RemotePayloadError(
            f"Unexpected {what} response: expected an object, "
            f"got {type(payload).__name__}"
        )
    return payload


def list_field(payload: dict, key: str, what: str) -> list:
    """Read a list field from a payload, treating a missing field as empty."""
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise RemotePayloadError(f"Unexpected {what} response: '{key}' is not a list")
    return [item for item in value if isinstance(item, dict)]
