"""Logging for graphbuilder.

Every module logs through a child of the ``graphbuilder`` logger obtained with
`get_logger(__name__)`. Messages are DEBUG-level progress notes from the
algorithms (relaxation rounds, mixed-reduction passes, negative cycles) and
from the container (rejected edges), so an application embedding the graph core
stays quiet unless it asks for them.

The initial level is INFO, or the level named by the ``GRAPHBUILDER_LOG_LEVEL``
environment variable (``DEBUG``, ``WARNING``, ...). Use `debug_logging()` to
trace a single algorithm call:

    with debug_logging():
        bellman_ford.execute(graph, start, destination)
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "graphbuilder"
LOG_LEVEL_ENV = "GRAPHBUILDER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``GRAPHBUILDER_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default``.
    """
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``graphbuilder`` logger.

    Only the first call has an effect until `reset_logging()`.

    Args:
        level: Initial level; defaults to `level_from_env()`.
        format_string: Record format; defaults to `DEFAULT_FORMAT`.
        handler: Destination; defaults to a stdout ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level_from_env() if level is None else level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    # pytest's caplog listens on the Python root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under ``graphbuilder``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphbuilder`` logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


@contextmanager
def debug_logging() -> Iterator[logging.Logger]:
    """Log at DEBUG inside the block, then restore the previous level."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root.level
    set_global_log_level(logging.DEBUG)
    try:
        yield root
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures afresh."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
