"""
Structured logging for uiforge.

Library modules only call ``get_logger``; the embedding application (or the
test suite) calls ``configure_logging`` once with its ``Settings``.
"""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from .config import Settings, get_settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _handler(json_logs: bool) -> logging.Handler:
    if json_logs:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _processors(json_logs: bool) -> list[Any]:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        # Bound fields (e.g. framework, design) from LogContext
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure stdlib logging and structlog from settings.

    Reads ``log_level`` and ``json_logs``; an unknown level falls back to
    INFO. Calling again replaces the previous configuration.
    """
    settings = settings or get_settings()
    json_logs = settings.json_logs
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, handlers=[_handler(json_logs)], force=True)

    structlog.configure(
        processors=_processors(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger for a uiforge module (pass ``__name__``)."""
    return structlog.get_logger(name)


class LogContext:
    """Bind fields to every log event in scope; nested scopes restore the outer values."""

    def __init__(self, **kwargs: Any):
        self.context = kwargs
        self.tokens: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self.tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self.tokens)
