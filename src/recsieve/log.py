"""Structured logging on top of the standard library's logging tree.

Library code gets its logger with ``get_logger(__name__)``. Nothing is
written unless the embedding program (or the CLI, via ``configure_logging``)
enables the ``recsieve`` logger.

Usage:
    logger = get_logger(__name__)
    logger.debug("filter_skipped", field="name", reason="invalid_regex")
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

ROOT_LOGGER = "recsieve"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.KeyValueRenderer(key_order=["event", "level"]),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``.

    The wrapper is independent of ``structlog.configure`` so an application's
    own structlog setup is left alone.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=_PROCESSORS,
    )


def configure_logging(verbose: bool, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send ``recsieve`` events to stderr at WARNING, or DEBUG when verbose.

    Replaces any handler a previous call installed.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Undo ``configure_logging``."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = ["configure_logging", "get_logger", "reset_logging"]
