"""Locate the JSON fragment a serializer should map."""

from __future__ import annotations

import json
from collections.abc import Mapping

DEFAULT_KEY_PATH_SEPARATOR = "."


def parse_json_fragment(data: bytes | None) -> object | None:
    """Parse ``data`` as JSON, top-level fragments included.

    Returns ``None`` when there is no body or it is not valid JSON.
    """

    if data is None:
        return None
    try:
        return json.loads(data)
    except (ValueError, RecursionError):
        return None


def resolve_key_path(
    value: object,
    key_path: str | None,
    *,
    separator: str = DEFAULT_KEY_PATH_SEPARATOR,
) -> object | None:
    if not key_path:
        return value

    current = value
    for segment in key_path.split(separator):
        if not isinstance(current, Mapping):
            return None
        if segment not in current:
            return None
        current = current[segment]
    return current


def process_response(
    data: bytes | None,
    key_path: str | None,
    *,
    separator: str = DEFAULT_KEY_PATH_SEPARATOR,
) -> object | None:
    parsed = parse_json_fragment(data)
    if parsed is None:
        return None
    return resolve_key_path(parsed, key_path, separator=separator)


__all__ = [
    "DEFAULT_KEY_PATH_SEPARATOR",
    "parse_json_fragment",
    "resolve_key_path",
    "process_response",
]
