"""
Logging configuration for is-test.

Nothing is logged by default. ``configure_logging`` attaches a single
stderr handler to the ``istest`` logger, once per process:

    --verbose                -> DEBUG
    ISTEST_LOG_LEVEL=<level> -> that level (DEBUG, INFO, WARNING, ...)
    otherwise                -> WARNING

Standard output is never used for logs.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "istest"
LOG_LEVEL_ENV = "ISTEST_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_INITIALIZED = False


class StderrHandler(logging.StreamHandler):
    """
    Stream handler that always writes to the current ``sys.stderr``.

    The handler is attached once per process, but ``sys.stderr`` may be
    replaced afterwards (pytest's capsys, callers redirecting output), so
    the stream is looked up on every emit rather than bound at creation.
    """

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        # Bound by StreamHandler.__init__/setStream; the lookup above wins
        pass


def resolve_level(verbose: bool = False) -> int:
    """Pick the log level from the flag, then the environment."""
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    global _INITIALIZED
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(verbose))
    if _INITIALIZED:
        return
    handler = StderrHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _INITIALIZED = True
