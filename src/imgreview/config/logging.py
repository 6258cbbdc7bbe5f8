"""Logging configuration: structlog routed through the stdlib logging module."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import TimeStamper, add_log_level, format_exc_info
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

_HANDLER_NAME = "imgreview"
_configured = False


def _configure_structlog() -> None:
    """Route structlog through stdlib so unconfigured use never hits stdout."""
    global _configured
    structlog.configure(
        processors=[
            merge_contextvars,
            filter_by_level,
            add_logger_name,
            add_log_level,
            TimeStamper(fmt="iso"),
            format_exc_info,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    _configured = True


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Install a single stderr handler for the ``imgreview`` logger tree.

    Raises:
        ValueError: If *level* is not a stdlib logging level name.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level '{level}'")

    if fmt == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = ProcessorFormatter(
        processors=[ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=[TimeStamper(fmt="iso"), add_log_level, add_logger_name],
    )

    root = logging.getLogger("imgreview")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    root.addHandler(handler)
    root.setLevel(log_level)
    root.propagate = False

    _configure_structlog()


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*."""
    if not _configured:
        _configure_structlog()
    return structlog.get_logger(name)
