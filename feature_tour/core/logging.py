"""structlog setup for the feature tour.

Events are snake_case names with keyword fields, e.g.
``logger.info("paginator_moved", current_index=2)``. Development renders
them for the console; production emits one JSON object per line so the
paginator's moves can be followed per WebSocket connection.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import cast

import structlog
from structlog.types import Processor

# Loggers that are too chatty at INFO for normal operation
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "asyncio")


def _processors(development: bool) -> list[Processor]:
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if development:
        return [*shared, structlog.dev.ConsoleRenderer(colors=True)]
    return [*shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def configure_logging(development: bool = True, log_level: str = "INFO") -> None:
    """Route structlog through the stdlib root logger on stdout.

    Takes its inputs from ``Settings``; an unknown level name falls back to
    INFO rather than failing startup.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by uvicorn or earlier calls
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


@contextmanager
def connection_context(connection_id: str, **fields: str) -> Iterator[None]:
    """Tag every event logged inside the block with a WebSocket connection id.

    The binding lives in a contextvar, so each connection handler task sees
    only its own id.
    """
    with structlog.contextvars.bound_contextvars(connection_id=connection_id, **fields):
        yield
