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
OpenID Connect dynamic client registration request.

See RFC 7591 and https://openid.net/specs/openid-connect-registration-1_0.html.
"""

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_serializer,
)

from coreason_oidc_messages.constants import ClientMetadata
from coreason_oidc_messages.exceptions import InvalidDocumentError
from coreason_oidc_messages.json_value import parse_json
from coreason_oidc_messages.utils.logger import logger

_REGISTERED_NAMES = frozenset(ClientMetadata)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _validate_uri(value: str) -> str:
    # AnyUrl normalizes what it parses, so only the verdict is used
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"'{value}' is not an absolute URI") from e
    return value


Uri = Annotated[str, AfterValidator(_validate_uri)]


class DynamicClientRegistrationDocument(BaseModel):
    """
    Models a dynamic client registration request.

    Collections behave as sets (duplicates are dropped, first occurrence wins) and are left out
    of the serialized document when empty, as are unset scalar fields. Members that are not
    registered client metadata are kept verbatim in `extensions` and written back at the top
    level. Assignments are validated like construction.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    redirect_uris: list[Uri] = Field(
        default_factory=list,
        description="Redirection URIs for redirect-based flows such as the authorization code flow.",
    )
    response_types: list[str] = Field(
        default_factory=list,
        description="Response types the client can use at the authorization endpoint (e.g. 'code').",
    )
    grant_types: list[str] = Field(
        default_factory=list,
        description="Grant types the client can use at the token endpoint.",
        examples=[["authorization_code", "refresh_token"]],
    )
    application_type: str | None = Field(default=None, description="Kind of application: 'native' or 'web'.")
    contacts: list[str] = Field(
        default_factory=list,
        description="Ways to contact people responsible for this client, typically email addresses.",
    )
    client_name: str | None = Field(default=None, description="Human-readable client name shown to the end-user.")
    logo_uri: Uri | None = Field(default=None, description="Logo displayed to the end-user during approval.")
    client_uri: Uri | None = Field(default=None, description="Web page providing information about the client.")
    policy_uri: Uri | None = Field(default=None, description="Privacy policy of the client.")
    tos_uri: Uri | None = Field(default=None, description="Terms of service of the client.")
    jwks_uri: Uri | None = Field(
        default=None,
        description="JWK Set document holding the client's public keys. Must not be combined with 'jwks'.",
    )
    jwks: dict[str, Any] | None = Field(default=None, description="The client's JSON Web Key Set, by value.")
    sector_identifier_uri: Uri | None = Field(
        default=None,
        description="HTTPS URL used by the provider to compute pairwise subject identifiers.",
    )
    subject_type: str | None = Field(default=None, description="Subject type: 'pairwise' or 'public'.")
    scope: str | None = Field(default=None, description="Space-separated scopes the client can request.")
    post_logout_redirect_uris: list[Uri] = Field(
        default_factory=list,
        description="Redirection URIs for the end session endpoint.",
    )
    frontchannel_logout_uri: str | None = None
    frontchannel_logout_session_required: bool | None = None
    backchannel_logout_uri: str | None = None
    backchannel_logout_session_required: bool | None = None
    software_statement: str | None = Field(
        default=None,
        description="Signed JWT carrying client metadata values as claims.",
    )
    software_id: str | None = Field(
        default=None,
        description="Identifier of the client software, assigned by its developer or publisher.",
    )
    software_version: str | None = Field(default=None, description="Version of the software named by 'software_id'.")
    id_token_signed_response_alg: str | None = None
    id_token_encrypted_response_alg: str | None = None
    id_token_encrypted_response_enc: str | None = None
    userinfo_signed_response_alg: str | None = None
    userinfo_encrypted_response_alg: str | None = None
    userinfo_encrypted_response_enc: str | None = None
    request_object_signing_alg: str | None = None
    request_object_encryption_alg: str | None = None
    request_object_encryption_enc: str | None = None
    require_signed_request_object: bool | None = None
    token_endpoint_auth_method: str | None = None
    token_endpoint_auth_signing_alg: str | None = None
    default_max_age: int | None = Field(default=None, description="Default maximum authentication age in seconds.")
    require_auth_time: bool | None = Field(default=None, description="Whether the auth_time claim is required.")
    default_acr_values: list[str] = Field(
        default_factory=list,
        description="Default requested Authentication Context Class Reference values.",
    )
    initiate_login_uri: Uri | None = Field(
        default=None,
        description="HTTPS URI a third party can use to initiate a login by the client.",
    )
    request_uris: list[Uri] = Field(
        default_factory=list,
        description="request_uri values pre-registered for use at the provider.",
    )

    @property
    def extensions(self) -> dict[str, Any]:
        """
        Custom client metadata, keyed by member name.

        This is the live mapping: adding or removing an entry changes the serialized document.
        """
        extra = self.__pydantic_extra__
        return extra if extra is not None else {}

    @field_validator(
        "redirect_uris",
        "response_types",
        "grant_types",
        "contacts",
        "post_logout_redirect_uris",
        "default_acr_values",
        "request_uris",
        mode="after",
    )
    @classmethod
    def drop_duplicates(cls, v: list[Any]) -> list[Any]:
        return list(dict.fromkeys(v))

    @field_validator("jwks", mode="after")
    @classmethod
    def validate_jwks(cls, v: dict[str, Any] | None) -> dict[str, Any] | None:
        """Ensures the key set has a 'keys' array. Key material is not inspected."""
        if v is not None and not isinstance(v.get("keys"), list):
            raise ValueError("A JSON Web Key Set must contain a 'keys' array")
        return v

    @model_serializer(mode="wrap")
    def serialize_document(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        extensions = self.extensions

        document: dict[str, Any] = {}
        for key, value in data.items():
            if key not in _REGISTERED_NAMES:
                # Custom metadata is sent as given, null included
                document[key] = value
                continue
            if key in extensions:
                logger.warning(f"Dropping extension '{key}': it collides with registered client metadata")
                value = getattr(self, key)
            # Unset members and empty collections are not sent
            if value is not None and value != []:
                document[key] = value
        return document

    @classmethod
    def from_dict(cls, data: Any) -> "DynamicClientRegistrationDocument":
        """
        Validates a parsed registration document.

        Raises:
            InvalidDocumentError: If the document is not an object or a member has the wrong type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidDocumentError(f"Invalid client registration document: {e}") from e

    @classmethod
    def from_json(cls, text: str | bytes) -> "DynamicClientRegistrationDocument":
        """
        Parses and validates a registration document.

        Raises:
            InvalidDocumentError: If the text is not valid JSON or the document is invalid.
        """
        return cls.from_dict(parse_json(text))

    def to_dict(self) -> dict[str, Any]:
        """Returns the wire representation as plain JSON values."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()
