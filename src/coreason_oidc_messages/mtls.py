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
Mutual-TLS endpoint aliases (RFC 8705, section 5).
"""

from coreason_oidc_messages.accessors import try_get_string
from coreason_oidc_messages.constants import Discovery
from coreason_oidc_messages.json_value import JsonValue, Undefined


class MtlsEndpointAliases:
    """
    Alternate endpoint addresses to use when the client authenticates with mutual TLS.

    Attributes:
        json (JsonValue | Undefined): The raw ``mtls_endpoint_aliases`` object.
    """

    def __init__(self, json: JsonValue | Undefined = None) -> None:
        self._json = json

    @property
    def json(self) -> JsonValue | Undefined:
        return self._json

    @property
    def token_endpoint(self) -> str | None:
        return self.get(Discovery.TOKEN_ENDPOINT)

    @property
    def revocation_endpoint(self) -> str | None:
        return self.get(Discovery.REVOCATION_ENDPOINT)

    @property
    def device_authorization_endpoint(self) -> str | None:
        return self.get(Discovery.DEVICE_AUTHORIZATION_ENDPOINT)

    @property
    def introspection_endpoint(self) -> str | None:
        return self.get(Discovery.INTROSPECTION_ENDPOINT)

    @property
    def pushed_authorization_request_endpoint(self) -> str | None:
        return self.get(Discovery.PUSHED_AUTHORIZATION_REQUEST_ENDPOINT)

    @property
    def userinfo_endpoint(self) -> str | None:
        return self.get(Discovery.USERINFO_ENDPOINT)

    @property
    def registration_endpoint(self) -> str | None:
        return self.get(Discovery.REGISTRATION_ENDPOINT)

    def get(self, name: str) -> str | None:
        """Returns the alias for any endpoint metadata name, or None."""
        if self._json is None:
            return None
        return try_get_string(self._json, name)

    def __repr__(self) -> str:
        return f"MtlsEndpointAliases(json={self._json!r})"
