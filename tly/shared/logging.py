"""
Structured logging for the T.LY client.

Library loggers are structlog BoundLoggers wrapping stdlib loggers under the
``tly`` namespace, so nothing is printed unless the application enables them:

- get_logger(): logger for a module (typically ``__name__``)
- setup_logging(): attach a console/JSON handler to the ``tly`` logger
- redact_sensitive_fields(): processor masking credentials in event dicts
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor

from tly.config import LoggingSettings

ROOT_LOGGER_NAME = "tly"

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "authorization",
    "api_key",
    "token",
    "password",
    "secret",
}

_PROTECTED_KEYS = {"level", "event", "timestamp", "logger"}


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PROTECTED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in ("password", "token", "key", "secret")
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


_SHARED_PROCESSORS: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    redact_sensitive_fields,
]


def get_logger(name: str) -> BoundLogger:
    """
    Get a logger bound to the stdlib logger ``name``.

    Events below the stdlib logger's effective level are dropped before any
    processor runs. The level is read on every call, so setup_logging() takes
    effect for loggers created earlier.

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("tly_request_completed", method="GET", status_code=200)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=BoundLogger,
    ).bind()


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False, pad_event=15, sort_keys=False)


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Handler:
    """
    Route ``tly`` log events to stdout.

    JSON output for log aggregation, plain console output otherwise. Calling it
    again replaces the handler installed by the previous call.
    """
    settings = settings or LoggingSettings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(fmt="iso"),
                _renderer(settings.log_format),
            ],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_tly_handler", False):
            logger.removeHandler(existing)
    handler._tly_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    return handler
