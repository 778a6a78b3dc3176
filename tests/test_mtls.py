# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_oidc_messages

from typing import Any

import pytest

from coreason_oidc_messages.json_value import UNDEFINED
from coreason_oidc_messages.mtls import MtlsEndpointAliases


def test_aliases() -> None:
    """Test the four registered aliases."""
    json = {
        "token_endpoint": "https://mtls.example.com/token",
        "revocation_endpoint": "https://mtls.example.com/revoke",
        "device_authorization_endpoint": "https://mtls.example.com/device",
        "introspection_endpoint": "https://mtls.example.com/introspect",
    }
    aliases = MtlsEndpointAliases(json)

    assert aliases.json is json
    assert aliases.token_endpoint == "https://mtls.example.com/token"
    assert aliases.revocation_endpoint == "https://mtls.example.com/revoke"
    assert aliases.device_authorization_endpoint == "https://mtls.example.com/device"
    assert aliases.introspection_endpoint == "https://mtls.example.com/introspect"


def test_additional_aliases() -> None:
    aliases = MtlsEndpointAliases(
        {
            "pushed_authorization_request_endpoint": "https://mtls.example.com/par",
            "userinfo_endpoint": "https://mtls.example.com/userinfo",
            "registration_endpoint": "https://mtls.example.com/register",
            "custom_endpoint": "https://mtls.example.com/custom",
        }
    )
    assert aliases.pushed_authorization_request_endpoint == "https://mtls.example.com/par"
    assert aliases.userinfo_endpoint == "https://mtls.example.com/userinfo"
    assert aliases.registration_endpoint == "https://mtls.example.com/register"
    assert aliases.get("custom_endpoint") == "https://mtls.example.com/custom"


@pytest.mark.parametrize("json", [None, UNDEFINED, {}, [], "https://mtls.example.com", 42])
def test_missing_or_malformed_aliases(json: Any) -> None:
    """Every alias reads as None when the object is missing or malformed."""
    aliases = MtlsEndpointAliases(json)
    assert aliases.token_endpoint is None
    assert aliases.revocation_endpoint is None
    assert aliases.device_authorization_endpoint is None
    assert aliases.introspection_endpoint is None


def test_default_constructor() -> None:
    aliases = MtlsEndpointAliases()
    assert aliases.json is None
    assert aliases.token_endpoint is None


def test_null_alias_reads_as_literal_text() -> None:
    """A present null member follows the textual rendering rules."""
    assert MtlsEndpointAliases({"token_endpoint": None}).token_endpoint == "null"
