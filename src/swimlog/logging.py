"""Structured logging for swimlog.

Usage:
    from swimlog.logging import configure_logging, get_logger

    configure_logging()            # once, at API or CLI startup
    logger = get_logger(__name__)
    logger.info("bulk_import_completed", count=3, skipped=1)

Level and format come from the environment (see ``swimlog.config``):
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    LOG_FORMAT: console or json (default: json in production, console elsewhere)
    ENVIRONMENT: local, development, production
"""

import logging
import os
import sys
from typing import Any

import structlog

_configured = False


def _environment() -> str:
    return os.getenv("ENVIRONMENT", "local").lower()


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def _resolve_format(log_format: str | None) -> str:
    if log_format:
        return log_format.lower()
    explicit = os.getenv("LOG_FORMAT")
    if explicit:
        return explicit.lower()
    return "json" if _environment() == "production" else "console"


def _add_environment(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp every entry with the running environment."""
    event_dict["environment"] = _environment()
    return event_dict


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Falls back to LOG_LEVEL.
        log_format: "console" or "json". Falls back to LOG_FORMAT / ENVIRONMENT.
    """
    global _configured

    shared: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_environment,
    ]

    if _resolve_format(log_format) == "json":
        renderer: list[structlog.typing.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]

    structlog.configure(
        processors=[*shared, *renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_resolve_level(level),
        force=_configured,
    )

    # Supabase client libraries are chatty at INFO
    for noisy in ("httpx", "httpcore", "supabase", "postgrest"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind key/values (request_id, swimmer_id, ...) to all following log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything bound with ``bind_context``."""
    structlog.contextvars.clear_contextvars()
