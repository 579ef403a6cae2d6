"""structlog setup for the marketplace contexts.

Every ``domain.py`` calls ``configure_logging()`` at import time; only the
first call has an effect. Output goes through the standard library root
logger so protean's and uvicorn's own records share the same handlers.

    LOG_LEVEL    explicit level, wins over everything else
    PROTEAN_ENV  picks a default level and the renderer (JSON in production)
    LOG_DIR      when set, also write a rotating file there
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

_DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVIRONMENTS = {"production", "staging"}

_QUIET_LOGGERS = ("urllib3", "asyncio", "redis")

_configured = False


def _environment() -> str:
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def log_level() -> str:
    return os.getenv("LOG_LEVEL", _DEFAULT_LEVELS.get(_environment(), "INFO")).upper()


def _handlers(level: str) -> list[logging.Handler]:
    handlers = [logging.StreamHandler(sys.stdout)]

    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                filename=path / "marketplace.log",
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
    return handlers


def _renderer():
    if _environment() in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging() -> None:
    global _configured
    if _configured:
        return

    level = log_level()
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = _handlers(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(**values) -> None:
    """Attach values (request path, caller id) to every log line of this request."""
    structlog.contextvars.bind_contextvars(**{k: v for k, v in values.items() if v is not None})


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
