# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_oidc_messages

import os
from typing import Any

# Keep the test run from writing logs/app.log; must happen before the package is imported.
os.environ.setdefault("COREASON_LOG_FILE", "")

import pytest  # noqa: E402


@pytest.fixture
def discovery_json() -> dict[str, Any]:
    """A representative OpenID provider configuration."""
    return {
        "issuer": "https://auth.coreason.com",
        "jwks_uri": "https://auth.coreason.com/.well-known/jwks.json",
        "authorization_endpoint": "https://auth.coreason.com/authorize",
        "token_endpoint": "https://auth.coreason.com/oauth/token",
        "userinfo_endpoint": "https://auth.coreason.com/userinfo",
        "revocation_endpoint": "https://auth.coreason.com/oauth/revoke",
        "device_authorization_endpoint": "https://auth.coreason.com/oauth/device/code",
        "end_session_endpoint": "https://auth.coreason.com/logout",
        "registration_endpoint": "https://auth.coreason.com/oidc/register",
        "scopes_supported": ["openid", "profile", "email", "offline_access"],
        "response_types_supported": ["code", "code id_token"],
        "grant_types_supported": ["authorization_code", "refresh_token", "urn:ietf:params:oauth:grant-type:device_code"],
        "code_challenge_methods_supported": ["S256", "plain"],
        "id_token_signing_alg_values_supported": ["RS256"],
        "frontchannel_logout_supported": True,
        "backchannel_logout_supported": "false",
        "request_parameter_supported": False,
        "mtls_endpoint_aliases": {
            "token_endpoint": "https://mtls.auth.coreason.com/oauth/token",
            "revocation_endpoint": "https://mtls.auth.coreason.com/oauth/revoke",
            "introspection_endpoint": "https://mtls.auth.coreason.com/oauth/introspect",
        },
    }


@pytest.fixture
def registration_json() -> dict[str, Any]:
    """A dynamic client registration request with one custom member."""
    return {
        "client_name": "CoReason CLI",
        "redirect_uris": ["https://client.coreason.ai/callback", "https://client.coreason.ai/callback2"],
        "grant_types": ["authorization_code", "refresh_token"],
        "response_types": ["code"],
        "token_endpoint_auth_method": "private_key_jwt",
        "default_max_age": 3600,
        "require_auth_time": True,
        "jwks": {"keys": [{"kty": "RSA", "kid": "k1", "n": "AQAB", "e": "AQAB"}]},
        "software_id": "4NRB1-0XZABZI9E6-5SM3R",
        "https://coreason.com/tenant": "acme",
    }
