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
Conversion of a JSON claims object (ID token payload, userinfo response, introspection
response) into a flat list of claims.
"""

from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from coreason_oidc_messages.json_value import JsonValue, Undefined, compact_json
from coreason_oidc_messages.utils.logger import logger

__all__ = ["Claim", "ClaimValueTypes", "ClaimsIdentity", "stringify", "to_claims"]


class ClaimValueTypes(StrEnum):
    STRING = "string"


class Claim(BaseModel):
    """
    A single assertion about a subject.

    Attributes:
        type (str): The claim name (the JSON member name).
        value (str): The claim value as text.
        value_type (str): The type of ``value``. Always ``string`` for claims built from JSON.
        issuer (str | None): The issuer of the claim, if known.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    value: str
    value_type: str = ClaimValueTypes.STRING
    issuer: str | None = None


def stringify(value: JsonValue) -> str:
    """
    Renders a JSON value as a claim value.

    Strings are returned without quotes; every other value is rendered as compact JSON so that
    numbers, booleans, null and structured values stay machine-parseable.
    """
    if isinstance(value, str):
        return value
    return compact_json(value)


def to_claims(json: JsonValue | Undefined, issuer: str | None = None, *exclude_keys: str) -> list[Claim]:
    """
    Converts a JSON claims object to a list of claims.

    Array members produce one claim per element, so multi-valued claims (``amr``, ``roles``)
    are preserved. Member order is preserved.

    Args:
        json: The claims object.
        issuer: Optional issuer to stamp on every claim.
        *exclude_keys: Member names to skip (exact, case-sensitive).

    Returns:
        The claims. Empty if ``json`` is not an object.
    """
    claims: list[Claim] = []

    if not isinstance(json, Mapping):
        logger.debug(f"Ignoring non-object claims payload of type {type(json).__name__}")
        return claims

    excluded = set(exclude_keys)

    for key, value in json.items():
        if key in excluded:
            continue

        if isinstance(value, (list, tuple)):
            for item in value:
                claims.append(Claim(type=key, value=stringify(item), issuer=issuer))
        else:
            claims.append(Claim(type=key, value=stringify(value), issuer=issuer))

    return claims


class ClaimsIdentity(BaseModel):
    """
    An immutable set of claims describing one authenticated subject.

    Attributes:
        claims (tuple[Claim, ...]): The claims, in the order they were produced.
        authentication_type (str | None): How the subject was authenticated (e.g. "oidc").
        name_claim_type (str): The claim type that holds the display name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    claims: tuple[Claim, ...] = Field(default_factory=tuple)
    authentication_type: str | None = None
    name_claim_type: str = "name"

    @classmethod
    def from_json(
        cls,
        json: JsonValue | Undefined,
        issuer: str | None = None,
        *exclude_keys: str,
        authentication_type: str | None = None,
    ) -> "ClaimsIdentity":
        """Builds an identity from a JSON claims object. See `to_claims`."""
        return cls(claims=tuple(to_claims(json, issuer, *exclude_keys)), authentication_type=authentication_type)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.authentication_type)

    @property
    def name(self) -> str | None:
        claim = self.find_first(self.name_claim_type)
        return claim.value if claim else None

    def find_all(self, claim_type: str) -> list[Claim]:
        return [claim for claim in self.claims if claim.type == claim_type]

    def find_first(self, claim_type: str) -> Claim | None:
        return next((claim for claim in self.claims if claim.type == claim_type), None)

    def has_claim(self, claim_type: str, value: str | None = None) -> bool:
        """Returns True if a claim of ``claim_type`` exists, optionally with an exact ``value``."""
        return any(claim.type == claim_type and (value is None or claim.value == value) for claim in self.claims)
