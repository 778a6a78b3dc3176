# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_oidc_messages

"""
Lenient, typed accessors over a parsed JSON value.

Every accessor is total over JSON values: a missing key and a value of the wrong shape are
both reported as absence (``UNDEFINED``, ``None`` or an empty list), never as an exception.
Document models chain these calls without any error handling of their own.
"""

import re
from collections.abc import Mapping

from coreason_oidc_messages.json_value import UNDEFINED, JsonValue, Undefined, to_text

__all__ = [
    "has_value",
    "try_get_boolean",
    "try_get_int",
    "try_get_string",
    "try_get_string_array",
    "try_get_value",
]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def try_get_value(json: JsonValue | Undefined, name: str) -> JsonValue | Undefined:
    """
    Tries to get the value bound to ``name`` in a JSON object.

    Args:
        json: The JSON value, expected to be an object.
        name: The member name.

    Returns:
        The member value (``None`` for a JSON null), or ``UNDEFINED`` if ``json`` is not an
        object or has no such member.
    """
    if json is UNDEFINED:
        return UNDEFINED
    if isinstance(json, Mapping):
        return json.get(name, UNDEFINED)
    return UNDEFINED


def try_get_string(json: JsonValue | Undefined, name: str) -> str | None:
    """
    Tries to get a string from a JSON object.

    Non-string members are rendered in their textual form, so a present null yields ``"null"``.
    """
    value = try_get_value(json, name)
    if value is UNDEFINED:
        return None
    return to_text(value)


def try_get_int(json: JsonValue | Undefined, name: str) -> int | None:
    """
    Tries to get a 32-bit base-10 integer from a JSON object.

    Both numbers and numeric strings are accepted. Fractions, exponents and values outside the
    signed 32-bit range are rejected.
    """
    value = try_get_string(json, name)
    if value is None:
        return None

    text = value.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None

    number = int(text)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def try_get_boolean(json: JsonValue | Undefined, name: str) -> bool | None:
    """
    Tries to get a boolean from a JSON object.

    Accepts JSON booleans and the strings ``true``/``false`` in any letter case.
    """
    value = try_get_string(json, name)
    if value is None:
        return None

    match value.strip().lower():
        case "true":
            return True
        case "false":
            return False
    return None


def try_get_string_array(json: JsonValue | Undefined, name: str) -> list[str]:
    """
    Tries to get a string array from a JSON object.

    Returns:
        The textual form of every element, in order and including duplicates. An empty list if
        the member is missing or is not an array.
    """
    value = try_get_value(json, name)
    if isinstance(value, (list, tuple)):
        return [to_text(item) for item in value]
    return []


def has_value(json: JsonValue | Undefined) -> bool:
    """Returns True unless the value is absent or a JSON null."""
    return json is not UNDEFINED and json is not None
