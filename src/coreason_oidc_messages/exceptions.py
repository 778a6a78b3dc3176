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
Custom exceptions for the coreason-oidc-messages package.
"""


class CoreasonOidcMessagesError(Exception):
    """Base exception for all coreason-oidc-messages errors."""


class InvalidDocumentError(CoreasonOidcMessagesError):
    """
    Raised when a protocol document cannot be parsed or fails validation.
    The accessor functions never raise this; only the parsing entry points do.
    """


class UnsupportedJsonValueError(CoreasonOidcMessagesError, TypeError):
    """Raised when a Python value outside the JSON value union is passed as a JSON value."""
