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
Registered OAuth 2.0 / OpenID Connect metadata names.
"""

from enum import StrEnum


class Discovery(StrEnum):
    """Authorization server metadata (OpenID Connect Discovery 1.0, RFC 8414, RFC 8705)."""

    ISSUER = "issuer"
    JWKS_URI = "jwks_uri"
    AUTHORIZATION_ENDPOINT = "authorization_endpoint"
    TOKEN_ENDPOINT = "token_endpoint"
    USERINFO_ENDPOINT = "userinfo_endpoint"
    END_SESSION_ENDPOINT = "end_session_endpoint"
    CHECK_SESSION_IFRAME = "check_session_iframe"
    REVOCATION_ENDPOINT = "revocation_endpoint"
    INTROSPECTION_ENDPOINT = "introspection_endpoint"
    DEVICE_AUTHORIZATION_ENDPOINT = "device_authorization_endpoint"
    REGISTRATION_ENDPOINT = "registration_endpoint"
    PUSHED_AUTHORIZATION_REQUEST_ENDPOINT = "pushed_authorization_request_endpoint"
    MTLS_ENDPOINT_ALIASES = "mtls_endpoint_aliases"

    FRONTCHANNEL_LOGOUT_SUPPORTED = "frontchannel_logout_supported"
    FRONTCHANNEL_LOGOUT_SESSION_SUPPORTED = "frontchannel_logout_session_supported"
    BACKCHANNEL_LOGOUT_SUPPORTED = "backchannel_logout_supported"
    BACKCHANNEL_LOGOUT_SESSION_SUPPORTED = "backchannel_logout_session_supported"
    REQUIRE_PUSHED_AUTHORIZATION_REQUESTS = "require_pushed_authorization_requests"

    GRANT_TYPES_SUPPORTED = "grant_types_supported"
    CODE_CHALLENGE_METHODS_SUPPORTED = "code_challenge_methods_supported"
    SCOPES_SUPPORTED = "scopes_supported"
    SUBJECT_TYPES_SUPPORTED = "subject_types_supported"
    RESPONSE_MODES_SUPPORTED = "response_modes_supported"
    RESPONSE_TYPES_SUPPORTED = "response_types_supported"
    CLAIMS_SUPPORTED = "claims_supported"
    TOKEN_ENDPOINT_AUTH_METHODS_SUPPORTED = "token_endpoint_auth_methods_supported"
    ID_TOKEN_SIGNING_ALG_VALUES_SUPPORTED = "id_token_signing_alg_values_supported"


class ClientMetadata(StrEnum):
    """Client metadata (RFC 7591, OpenID Connect Dynamic Client Registration 1.0)."""

    REDIRECT_URIS = "redirect_uris"
    RESPONSE_TYPES = "response_types"
    GRANT_TYPES = "grant_types"
    APPLICATION_TYPE = "application_type"
    CONTACTS = "contacts"
    CLIENT_NAME = "client_name"
    LOGO_URI = "logo_uri"
    CLIENT_URI = "client_uri"
    POLICY_URI = "policy_uri"
    TOS_URI = "tos_uri"
    JWKS_URI = "jwks_uri"
    JWKS = "jwks"
    SECTOR_IDENTIFIER_URI = "sector_identifier_uri"
    SUBJECT_TYPE = "subject_type"
    SCOPE = "scope"
    POST_LOGOUT_REDIRECT_URIS = "post_logout_redirect_uris"
    FRONTCHANNEL_LOGOUT_URI = "frontchannel_logout_uri"
    FRONTCHANNEL_LOGOUT_SESSION_REQUIRED = "frontchannel_logout_session_required"
    BACKCHANNEL_LOGOUT_URI = "backchannel_logout_uri"
    BACKCHANNEL_LOGOUT_SESSION_REQUIRED = "backchannel_logout_session_required"
    SOFTWARE_STATEMENT = "software_statement"
    SOFTWARE_ID = "software_id"
    SOFTWARE_VERSION = "software_version"
    ID_TOKEN_SIGNED_RESPONSE_ALG = "id_token_signed_response_alg"
    ID_TOKEN_ENCRYPTED_RESPONSE_ALG = "id_token_encrypted_response_alg"
    ID_TOKEN_ENCRYPTED_RESPONSE_ENC = "id_token_encrypted_response_enc"
    USERINFO_SIGNED_RESPONSE_ALG = "userinfo_signed_response_alg"
    USERINFO_ENCRYPTED_RESPONSE_ALG = "userinfo_encrypted_response_alg"
    USERINFO_ENCRYPTED_RESPONSE_ENC = "userinfo_encrypted_response_enc"
    REQUEST_OBJECT_SIGNING_ALG = "request_object_signing_alg"
    REQUEST_OBJECT_ENCRYPTION_ALG = "request_object_encryption_alg"
    REQUEST_OBJECT_ENCRYPTION_ENC = "request_object_encryption_enc"
    REQUIRE_SIGNED_REQUEST_OBJECT = "require_signed_request_object"
    TOKEN_ENDPOINT_AUTH_METHOD = "token_endpoint_auth_method"
    TOKEN_ENDPOINT_AUTH_SIGNING_ALG = "token_endpoint_auth_signing_alg"
    DEFAULT_MAX_AGE = "default_max_age"
    REQUIRE_AUTH_TIME = "require_auth_time"
    DEFAULT_ACR_VALUES = "default_acr_values"
    INITIATE_LOGIN_URI = "initiate_login_uri"
    REQUEST_URIS = "request_uris"
