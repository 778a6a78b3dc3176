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
from unittest.mock import patch

from coreason_oidc_messages.config import LoggingSettings


def test_defaults() -> None:
    """Test defaults when no COREASON_LOG_* variables are set."""
    with patch.dict(os.environ, {}, clear=True):
        settings = LoggingSettings()

    assert settings.level == "INFO"
    assert settings.json_format is False
    assert settings.file == "logs/app.log"
    assert settings.rotation == "500 MB"
    assert settings.retention == "10 days"


def test_env_loading() -> None:
    """Test loading settings from environment variables."""
    with patch.dict(
        os.environ,
        {
            "COREASON_LOG_LEVEL": "debug",
            "COREASON_LOG_JSON": "true",
            "COREASON_LOG_FILE": "/tmp/coreason/oidc.log",
            "COREASON_LOG_RETENTION": "1 day",
        },
    ):
        settings = LoggingSettings()

    assert settings.level == "DEBUG"
    assert settings.json_format is True
    assert settings.file == "/tmp/coreason/oidc.log"
    assert settings.retention == "1 day"


def test_env_case_insensitive() -> None:
    with patch.dict(os.environ, {"coreason_log_level": "warning"}):
        assert LoggingSettings().level == "WARNING"


def test_empty_file_disables_sink() -> None:
    with patch.dict(os.environ, {"COREASON_LOG_FILE": "  "}):
        assert LoggingSettings().file is None
    assert LoggingSettings(file="").file is None


def test_explicit_arguments() -> None:
    settings = LoggingSettings(level=" error ", json_format=True, file=None)
    assert settings.level == "ERROR"
    assert settings.json_format is True
    assert settings.file is None


def test_blank_level_defaults_to_info() -> None:
    assert LoggingSettings(level="").level == "INFO"
