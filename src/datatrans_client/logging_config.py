"""Structured logging for the Datatrans client.

Card aliases are masked where they are logged (see mask_alias), so output is
safe under structlog's default setup too. configure_logging() adds a second
redaction pass for applications that route the client's events through
their own logging.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor

if TYPE_CHECKING:
    from datatrans_client.config import DatatransSettings

# Never rendered, whatever a caller binds
_DROPPED_KEYS = ("password", "authorization")


def mask_alias(alias: str | None) -> str | None:
    """Keep only the last four characters of a card alias."""
    if alias is None or len(alias) <= 4:
        return alias
    return f"...{alias[-4:]}"


def redact_sensitive(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask card aliases and drop credential fields."""
    alias = event_dict.get("card_alias")
    if isinstance(alias, str) and not alias.startswith("..."):
        event_dict["card_alias"] = mask_alias(alias)
    for key in _DROPPED_KEYS:
        event_dict.pop(key, None)
    return event_dict


def drop_empty_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Omit correlation_id instead of rendering it as null."""
    if not event_dict.get("correlation_id"):
        event_dict.pop("correlation_id", None)
    return event_dict


def configure_logging(log_level: str = "INFO", format_as_json: bool = True) -> None:
    """
    Route client events through stdlib logging on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, render JSON lines; otherwise console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_sensitive,
        drop_empty_correlation_id,
        structlog.processors.JSONRenderer() if format_as_json else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: "DatatransSettings") -> None:
    """Configure logging from DATATRANS_LOG_LEVEL / DATATRANS_LOG_JSON."""
    configure_logging(log_level=settings.log_level, format_as_json=settings.log_json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a client module."""
    return structlog.get_logger(name)
