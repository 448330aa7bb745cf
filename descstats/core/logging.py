"""Structured logging configuration (structlog).

Loggers returned by `get_logger` are structlog loggers wrapping stdlib
loggers under the ``descstats`` hierarchy, so nothing is printed unless the
application opts in: the package installs a ``NullHandler`` on import and
only `configure_structlog` attaches a console handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

ROOT_LOGGER = "descstats"


def configure_structlog(level: int = logging.INFO) -> None:
    """Configure structlog for human-readable console output.

    Call once at process startup.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    stdlib_logger = logging.getLogger(ROOT_LOGGER)
    stdlib_logger.handlers = [handler]
    stdlib_logger.setLevel(level)
    stdlib_logger.propagate = False


LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


class LevelCheckedLogger(structlog.stdlib.BoundLogger):
    """Stdlib-backed bound logger that drops disabled events before any processor runs."""

    def _proxy_to_logger(self, method_name, event=None, *event_args, **event_kw):
        level = LEVELS.get(method_name)
        if level is not None and not self._logger.isEnabledFor(level):
            return None
        return super()._proxy_to_logger(method_name, event, *event_args, **event_kw)


def get_logger(name: str) -> LevelCheckedLogger:
    """Return a structlog logger backed by ``logging.getLogger("descstats.<name>")``."""
    return structlog.wrap_logger(
        logging.getLogger(f"{ROOT_LOGGER}.{name}"),
        wrapper_class=LevelCheckedLogger,
        component=name,
    )
