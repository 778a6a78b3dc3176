# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_oidc_messages

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger
from opentelemetry import trace

from coreason_oidc_messages.config import LoggingSettings

__all__ = ["logger", "configure_logging"]

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """
    Redirects standard logging messages to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # type: ignore[assignment]

        # Find the caller the message originated from
        frame = logging.currentframe()
        depth = 2
        while frame and (frame.f_code.co_filename == logging.__file__ or frame.f_code.co_filename == __file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def trace_id_injector(record: dict[str, Any]) -> None:
    """
    Injects the OpenTelemetry trace_id and span_id into the log record.
    Used as a patcher for Loguru.
    """
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        record["extra"]["trace_id"] = format(ctx.trace_id, "032x")
        record["extra"]["span_id"] = format(ctx.span_id, "016x")


def _add_file_sink(path: str, settings: LoggingSettings, level: str) -> None:
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            rotation=settings.rotation,
            retention=settings.retention,
            serialize=True,
            enqueue=True,
            level=level,
        )
    except (PermissionError, OSError):
        # Read-only filesystems run with console logging only
        pass


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Configures the logger.

    Call this again to reload the configuration if the environment changes. Previously added
    sinks are removed first, so repeated calls never duplicate output.

    Args:
        settings: Explicit settings. Read from the environment when omitted.
    """
    settings = settings or LoggingSettings()

    log_level = settings.level
    try:
        logger.level(log_level)
    except ValueError:
        log_level = "INFO"

    logger.configure(handlers=[], patcher=trace_id_injector)

    if settings.json_format:
        logger.add(sys.stdout, level=log_level, serialize=True)
    else:
        logger.add(sys.stderr, level=log_level, format=TEXT_FORMAT)

    if settings.file:
        _add_file_sink(settings.file, settings, log_level)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    numeric_level = logging.getLevelName(log_level)
    if isinstance(numeric_level, int):
        logging.getLogger().setLevel(numeric_level)
    else:
        # Loguru-only levels such as SUCCESS and TRACE
        logging.getLogger().setLevel(logging.INFO)


# Initialize on import
configure_logging()
