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
JSON value model shared by the accessors, the claims builder and the document models.

A parsed JSON node is represented with plain Python values (``None``, ``bool``, ``int``,
``float``, ``str``, ``list``/``tuple``, and any string-keyed ``Mapping``, usually ``dict``).
The absence of a key is represented by the ``UNDEFINED`` singleton, which is never equal to ``None``.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Final, TypeAlias

from pydantic_core import from_json, to_json

from coreason_oidc_messages.exceptions import InvalidDocumentError, UnsupportedJsonValueError

__all__ = [
    "UNDEFINED",
    "JsonKind",
    "JsonValue",
    "Undefined",
    "compact_json",
    "kind_of",
    "parse_json",
    "to_text",
]


class Undefined:
    """
    Marker for a key that is not present in a JSON object.

    There is exactly one instance, ``UNDEFINED``. It is falsy and survives copying and pickling
    as the same object, so identity checks (``value is UNDEFINED``) are always safe.
    """

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "Undefined":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Undefined":
        return self


UNDEFINED: Final = Undefined()

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | tuple["JsonValue", ...] | Mapping[str, "JsonValue"]


class JsonKind(StrEnum):
    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """
    Classifies a parsed JSON value.

    Args:
        value: A JSON value or ``UNDEFINED``.

    Returns:
        The kind of the value.

    Raises:
        UnsupportedJsonValueError: If the value is not part of the JSON value union.
    """
    match value:
        case Undefined():
            return JsonKind.UNDEFINED
        case None:
            return JsonKind.NULL
        # bool is a subclass of int and must be matched first
        case bool():
            return JsonKind.BOOLEAN
        case int() | float():
            return JsonKind.NUMBER
        case str():
            return JsonKind.STRING
        case list() | tuple():
            return JsonKind.ARRAY
        case Mapping():
            return JsonKind.OBJECT
    raise UnsupportedJsonValueError(f"Unsupported JSON value of type {type(value).__name__}")


def parse_json(data: str | bytes) -> JsonValue:
    """
    Parses JSON text into the value model, preserving object key order.

    Args:
        data: The raw JSON document.

    Returns:
        The parsed value.

    Raises:
        InvalidDocumentError: If the text is not valid JSON.
    """
    try:
        return from_json(data, allow_inf_nan=False)  # type: ignore[no-any-return]
    except ValueError as e:
        raise InvalidDocumentError(f"Malformed JSON document: {e}") from e


def _plain_mapping(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    raise UnsupportedJsonValueError(f"Unsupported JSON value of type {type(value).__name__}")


def compact_json(value: JsonValue) -> str:
    """Serializes a value as JSON with no insignificant whitespace."""
    return to_json(value, fallback=_plain_mapping).decode("utf-8")


def to_text(value: JsonValue | Undefined) -> str:
    """
    Renders a value in its generic textual form.

    Strings are returned as-is, without quotes. Null renders as ``null`` and booleans as
    ``true``/``false``. A float with an integral value renders without a fractional part. Arrays
    and objects render as indented JSON.
    """
    if isinstance(value, str):
        return value
    if value is UNDEFINED:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return to_json(value, indent=2, fallback=_plain_mapping).decode("utf-8")
