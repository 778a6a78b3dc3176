# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_oidc_messages

import copy
import pickle
from types import MappingProxyType
from typing import Any

import pytest

from coreason_oidc_messages.exceptions import InvalidDocumentError, UnsupportedJsonValueError
from coreason_oidc_messages.json_value import (
    UNDEFINED,
    JsonKind,
    Undefined,
    compact_json,
    kind_of,
    parse_json,
    to_text,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (UNDEFINED, JsonKind.UNDEFINED),
        (None, JsonKind.NULL),
        (True, JsonKind.BOOLEAN),
        (False, JsonKind.BOOLEAN),
        (0, JsonKind.NUMBER),
        (1.5, JsonKind.NUMBER),
        ("", JsonKind.STRING),
        ([], JsonKind.ARRAY),
        ((1, 2), JsonKind.ARRAY),
        ({}, JsonKind.OBJECT),
    ],
)
def test_kind_of(value: Any, expected: JsonKind) -> None:
    """Test classification of every member of the JSON value union."""
    assert kind_of(value) == expected


def test_kind_of_bool_is_not_number() -> None:
    """bool subclasses int in Python but must classify as a boolean."""
    assert kind_of(True) is JsonKind.BOOLEAN
    assert kind_of(1) is JsonKind.NUMBER


def test_kind_of_rejects_non_json_values() -> None:
    """Test that values outside the union raise UnsupportedJsonValueError."""
    with pytest.raises(UnsupportedJsonValueError, match="set"):
        kind_of({1, 2})

    # Also usable as a plain TypeError
    with pytest.raises(TypeError):
        kind_of(object())


def test_undefined_is_distinct_from_null() -> None:
    """Test that UNDEFINED is a falsy singleton that is never None."""
    assert UNDEFINED is not None
    assert UNDEFINED != None  # noqa: E711
    assert not UNDEFINED
    assert Undefined() is UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_undefined_survives_copy_and_pickle() -> None:
    """Test that identity checks still hold after copying or pickling."""
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_parse_json_preserves_key_order() -> None:
    """Test that object members keep their document order."""
    value = parse_json('{"z": 1, "a": null, "m": [true, "x"]}')

    assert isinstance(value, dict)
    assert list(value) == ["z", "a", "m"]
    assert value["a"] is None
    assert value["m"] == [True, "x"]


def test_parse_json_accepts_bytes() -> None:
    assert parse_json(b'{"sub": "123"}') == {"sub": "123"}


@pytest.mark.parametrize("text", ["", "{", "{'a': 1}", "[1,]", "NaN"])
def test_parse_json_malformed(text: str) -> None:
    """Test that malformed text raises InvalidDocumentError."""
    with pytest.raises(InvalidDocumentError, match="Malformed JSON document"):
        parse_json(text)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello", "hello"),
        ('say "hi"', 'say "hi"'),
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (1.5, "1.5"),
        (42.0, "42"),
        ([], "[]"),
        ({}, "{}"),
    ],
)
def test_to_text_scalars(value: Any, expected: str) -> None:
    """Test the generic textual form of scalars and empty containers."""
    assert to_text(value) == expected


def test_to_text_structured_values_are_indented() -> None:
    """Test that arrays and objects render as indented JSON."""
    assert to_text([1, 2]) == "[\n  1,\n  2\n]"
    assert to_text({"a": 1}) == '{\n  "a": 1\n}'


def test_to_text_undefined_is_empty() -> None:
    assert to_text(UNDEFINED) == ""


def test_compact_json() -> None:
    """Test compact serialization without whitespace."""
    assert compact_json([1, 2]) == "[1,2]"
    assert compact_json({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'
    assert compact_json("hello") == '"hello"'


def test_non_dict_mappings_are_objects() -> None:
    """Any string-keyed mapping is a JSON object."""
    value = MappingProxyType({"a": MappingProxyType({"b": [1, 2]})})

    assert kind_of(value) is JsonKind.OBJECT
    assert compact_json(value) == '{"a":{"b":[1,2]}}'
    assert to_text(MappingProxyType({"a": 1})) == '{\n  "a": 1\n}'
