"""Structured logging for the catalog API and views.

Every event carries the service name, version and environment. Requests
handled by the API additionally carry a request id, method and path bound
through structlog's contextvars, so repository and client logs emitted
while serving a request can be correlated.
"""

import logging
import sys
import uuid
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from catalog import __version__
from catalog.config import Settings, settings

REQUEST_ID_HEADER = "X-Request-ID"


def add_service_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Stamp each event with the service identity."""
    event_dict.setdefault("service", settings.service_name)
    event_dict.setdefault("version", __version__)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def library_levels(config: Settings) -> dict[str, int]:
    """Resolve third-party logger levels; SQL echo is kept visible in debug."""
    levels = {name: logging.getLevelName(level.upper()) for name, level in config.log_library_levels.items()}
    if config.debug:
        levels["sqlalchemy.engine"] = logging.INFO
    return levels


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger.

    JSON lines outside dev (unless LOG_JSON is off), colored console output
    in dev. Third-party loggers get the levels from LOG_LIBRARY_LEVELS.
    """
    use_json = settings.log_json and settings.environment != "dev"
    level = logging.getLevelName(settings.log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        renderer: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    for name, library_level in library_levels(settings).items():
        logging.getLogger(name).setLevel(library_level)


def bind_request_context(method: str, path: str, request_id: str | None = None) -> str:
    """Bind per-request fields for every log emitted while serving it.

    Returns:
        The request id (the caller's, or a freshly generated one)
    """
    request_id = request_id or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=method, path=path)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        **initial_context: Initial context to bind to the logger

    Returns:
        Bound structlog logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
