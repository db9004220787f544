"""Logging configuration using structlog."""

import logging
import sys

import structlog
from pydantic import ValidationError

from appconfig.config import Settings, get_settings


def _processors(debug: bool) -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer(),
    ]


def configure_default_logging() -> None:
    """Quiet fallback used until configure_logging() runs: WARNING and up, to stderr.

    Leaves an existing structlog configuration alone.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=_processors(debug=False),
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def configure_logging() -> None:
    """Configure structlog for the application.

    Everything goes to stderr; stdout belongs to the demo program.
    Invalid settings fall back to the defaults and are reported as a warning.
    """
    error = None
    try:
        settings = get_settings()
    except ValidationError as e:
        settings = Settings.model_construct()
        error = e

    log_level = getattr(logging, settings.log_level)

    structlog.configure(
        processors=_processors(settings.app_debug),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    if error is not None:
        get_logger(__name__).warning(
            "invalid_logging_settings",
            errors=[err["msg"] for err in error.errors()],
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


configure_default_logging()
