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
Configuration for the coreason-oidc-messages package.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """
    Logging settings, read from ``COREASON_LOG_*`` environment variables.

    Attributes:
        level (str): Minimum level name (e.g. DEBUG, INFO). Unknown names fall back to INFO.
        json_format (bool): Emit JSON records to stdout instead of text to stderr.
        file (str | None): Path of the rotating JSON log file. Empty disables the file sink.
        rotation (str): Loguru rotation condition for the file sink.
        retention (str): Loguru retention policy for the file sink.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_LOG_",
        case_sensitive=False,
        populate_by_name=True,
    )

    level: str = "INFO"
    json_format: bool = Field(default=False, validation_alias=AliasChoices("COREASON_LOG_JSON", "json_format"))
    file: str | None = "logs/app.log"
    rotation: str = "500 MB"
    retention: str = "10 days"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("file")
    @classmethod
    def empty_file_disables_sink(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()
