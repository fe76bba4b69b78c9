"""
core/logging.py
---------------
structlog setup.

DEBUG=true renders coloured console lines, otherwise one JSON object per
line. Every event carries the request context bound by the HTTP middleware
(request_id, path, method, and user_id once the caller is known) plus the
name of the emitting module under "logger_name". Access decisions use the
"jobboard.access" name, which makes denials and super-admin tenant actions
easy to filter out of the stream.
"""

import logging
import sys

import structlog

from jobboard.core.config import settings


def _log_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL)
    return logging.DEBUG if settings.DEBUG else logging.INFO


def configure_logging() -> None:
    level = _log_level()

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    if level > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.DEBUG:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__):
    # Initial values stay on the lazy proxy, so configure_logging() still
    # applies to loggers created at import time.
    return structlog.get_logger(name, logger_name=name)


def bind_request_context(**values) -> None:
    """Attach key/values to every log line emitted for the current request."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
