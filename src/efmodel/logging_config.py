"""structlog configuration for efmodel.

Logs go to stderr so CLI output on stdout stays machine-readable. Debug
output is enabled by setting EFMODEL_DEBUG=1 or passing ``debug=True``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from efmodel.config import debug_enabled

_configured = False


def _stderr_logger(*_args: Any) -> structlog.PrintLogger:
    # resolve sys.stderr per logger so redirected streams are honored
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(debug: bool | None = None, force: bool = False) -> None:
    """Configure structlog once per process (``force`` to reconfigure)."""
    global _configured
    if _configured and not force:
        return

    if debug is None:
        debug = debug_enabled()
    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
    _configured = True
