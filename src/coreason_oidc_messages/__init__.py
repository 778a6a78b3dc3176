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
Typed models and lenient JSON accessors for OpenID Connect / OAuth2 protocol documents.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .accessors import (
    has_value,
    try_get_boolean,
    try_get_int,
    try_get_string,
    try_get_string_array,
    try_get_value,
)
from .claims import Claim, ClaimsIdentity, ClaimValueTypes, stringify, to_claims
from .config import LoggingSettings
from .constants import ClientMetadata, Discovery
from .discovery import DiscoveryDocument
from .exceptions import CoreasonOidcMessagesError, InvalidDocumentError, UnsupportedJsonValueError
from .json_value import UNDEFINED, JsonKind, JsonValue, Undefined, kind_of, parse_json
from .mtls import MtlsEndpointAliases
from .registration import DynamicClientRegistrationDocument

__all__ = [
    "UNDEFINED",
    "Claim",
    "ClaimValueTypes",
    "ClaimsIdentity",
    "ClientMetadata",
    "CoreasonOidcMessagesError",
    "Discovery",
    "DiscoveryDocument",
    "DynamicClientRegistrationDocument",
    "InvalidDocumentError",
    "JsonKind",
    "JsonValue",
    "LoggingSettings",
    "MtlsEndpointAliases",
    "Undefined",
    "UnsupportedJsonValueError",
    "has_value",
    "kind_of",
    "parse_json",
    "stringify",
    "to_claims",
    "try_get_boolean",
    "try_get_int",
    "try_get_string",
    "try_get_string_array",
    "try_get_value",
]
