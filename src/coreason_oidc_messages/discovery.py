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
Typed view over a parsed .well-known/openid-configuration document.
"""

from coreason_oidc_messages import accessors
from coreason_oidc_messages.constants import Discovery
from coreason_oidc_messages.json_value import UNDEFINED, JsonValue, Undefined, parse_json
from coreason_oidc_messages.mtls import MtlsEndpointAliases


class DiscoveryDocument:
    """
    Exposes the metadata of an OpenID provider on top of its raw JSON.

    Missing or mistyped members read as None (scalars) or an empty list (arrays), so a
    partially valid document never fails to load.

    Attributes:
        json (JsonValue | Undefined): The raw discovery document.
    """

    def __init__(self, json: JsonValue | Undefined) -> None:
        self._json = json

    @classmethod
    def from_text(cls, text: str | bytes) -> "DiscoveryDocument":
        """
        Parses a discovery document.

        Raises:
            InvalidDocumentError: If the text is not valid JSON.
        """
        return cls(parse_json(text))

    @property
    def json(self) -> JsonValue | Undefined:
        return self._json

    # Generic access

    def try_get_value(self, name: str) -> JsonValue | Undefined:
        return accessors.try_get_value(self._json, name)

    def try_get_string(self, name: str) -> str | None:
        return accessors.try_get_string(self._json, name)

    def try_get_int(self, name: str) -> int | None:
        return accessors.try_get_int(self._json, name)

    def try_get_boolean(self, name: str) -> bool | None:
        return accessors.try_get_boolean(self._json, name)

    def try_get_string_array(self, name: str) -> list[str]:
        return accessors.try_get_string_array(self._json, name)

    # Endpoints

    @property
    def issuer(self) -> str | None:
        return self.try_get_string(Discovery.ISSUER)

    @property
    def jwks_uri(self) -> str | None:
        return self.try_get_string(Discovery.JWKS_URI)

    @property
    def authorization_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.AUTHORIZATION_ENDPOINT)

    @property
    def token_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.TOKEN_ENDPOINT)

    @property
    def userinfo_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.USERINFO_ENDPOINT)

    @property
    def introspection_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.INTROSPECTION_ENDPOINT)

    @property
    def revocation_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.REVOCATION_ENDPOINT)

    @property
    def device_authorization_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.DEVICE_AUTHORIZATION_ENDPOINT)

    @property
    def end_session_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.END_SESSION_ENDPOINT)

    @property
    def check_session_iframe(self) -> str | None:
        return self.try_get_string(Discovery.CHECK_SESSION_IFRAME)

    @property
    def registration_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.REGISTRATION_ENDPOINT)

    @property
    def pushed_authorization_request_endpoint(self) -> str | None:
        return self.try_get_string(Discovery.PUSHED_AUTHORIZATION_REQUEST_ENDPOINT)

    @property
    def mtls_endpoint_aliases(self) -> MtlsEndpointAliases:
        value = self.try_get_value(Discovery.MTLS_ENDPOINT_ALIASES)
        return MtlsEndpointAliases(None if value is UNDEFINED else value)

    # Capabilities

    @property
    def frontchannel_logout_supported(self) -> bool | None:
        return self.try_get_boolean(Discovery.FRONTCHANNEL_LOGOUT_SUPPORTED)

    @property
    def frontchannel_logout_session_supported(self) -> bool | None:
        return self.try_get_boolean(Discovery.FRONTCHANNEL_LOGOUT_SESSION_SUPPORTED)

    @property
    def backchannel_logout_supported(self) -> bool | None:
        return self.try_get_boolean(Discovery.BACKCHANNEL_LOGOUT_SUPPORTED)

    @property
    def backchannel_logout_session_supported(self) -> bool | None:
        return self.try_get_boolean(Discovery.BACKCHANNEL_LOGOUT_SESSION_SUPPORTED)

    @property
    def require_pushed_authorization_requests(self) -> bool | None:
        return self.try_get_boolean(Discovery.REQUIRE_PUSHED_AUTHORIZATION_REQUESTS)

    @property
    def grant_types_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.GRANT_TYPES_SUPPORTED)

    @property
    def code_challenge_methods_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.CODE_CHALLENGE_METHODS_SUPPORTED)

    @property
    def scopes_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.SCOPES_SUPPORTED)

    @property
    def subject_types_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.SUBJECT_TYPES_SUPPORTED)

    @property
    def response_modes_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.RESPONSE_MODES_SUPPORTED)

    @property
    def response_types_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.RESPONSE_TYPES_SUPPORTED)

    @property
    def claims_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.CLAIMS_SUPPORTED)

    @property
    def token_endpoint_auth_methods_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.TOKEN_ENDPOINT_AUTH_METHODS_SUPPORTED)

    @property
    def id_token_signing_alg_values_supported(self) -> list[str]:
        return self.try_get_string_array(Discovery.ID_TOKEN_SIGNING_ALG_VALUES_SUPPORTED)

    def __repr__(self) -> str:
        return f"DiscoveryDocument(issuer={self.issuer!r})"
