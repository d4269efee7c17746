"""Structured build logging.

structlog is configured once on import from the settings: a console renderer
when debugging, JSON lines otherwise. Values bound with
``structlog.contextvars.bind_contextvars`` (the build id, for one) are merged
into every event.
"""

import sys
import logging
from typing import Optional
from functools import wraps
from time import perf_counter

import structlog

from nordum.config import get_settings


def configure_logging() -> None:
    settings = get_settings()
    level = settings.log_level.upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO)
    )

    if settings.debug or level == "DEBUG":
        renderers = [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *renderers,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def _elapsed_ms(start: float) -> float:
    return round((perf_counter() - start) * 1000, 2)


class timer:
    """Log the duration of a build stage as ``<stage>_completed`` or ``<stage>_failed``.

    Exceptions are logged and re-raised.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        level: str = "info",
        **context
    ):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.context = context
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = perf_counter()
        self.logger.debug(f"{self.operation}_started", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = _elapsed_ms(self.start_time)
        if exc_type is None:
            log = getattr(self.logger, self.level)
            log(f"{self.operation}_completed", duration_ms=duration_ms, **self.context)
        else:
            self.logger.error(
                f"{self.operation}_failed",
                duration_ms=duration_ms,
                error=str(exc_val),
                error_type=exc_type.__name__,
                **self.context
            )
        return False


def timed(logger: Optional[structlog.stdlib.BoundLogger] = None):
    """Decorator form of ``timer``, named after the function; logs at debug."""
    def decorator(func):
        log = logger or get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            with timer(log, func.__name__, level="debug"):
                return func(*args, **kwargs)

        return wrapper

    return decorator
