"""Observability – structlog loggers backed by stdlib logging.

Library loggers hand their events to :mod:`logging`, so nothing is written
until the host (or :func:`configure_logging`) installs a handler.
"""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

PACKAGE_LOGGER = "envgauges"

_HANDLER_NAME = "envgauges.json"


def configure_logging(level: int | str = logging.INFO, *, stream: IO[str] | None = None) -> logging.Handler:
    """Render ``envgauges.*`` events as JSON lines on *stream* (stderr by default).

    The handler is attached to the ``envgauges`` package logger only and
    replaces one installed by an earlier call; the root logger is left alone.
    Returns the installed handler.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package.removeHandler(existing)
    package.addHandler(handler)
    package.setLevel(level)
    package.propagate = False
    return handler


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger wrapping ``logging.getLogger(name)``.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]
