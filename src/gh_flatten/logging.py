from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pathlib import Path

_LOGGING_CONFIGURED = False
_HANDLER: logging.Handler | None = None


def _install_handler(handler: logging.Handler) -> None:
    global _HANDLER  # noqa: PLW0603
    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
        _HANDLER.close()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    _HANDLER = handler


def setup_logging(filename: str | Path | None = None) -> structlog.BoundLogger:
    """Set up structured logging for the gh_flatten module.

    The structlog pipeline is configured once. A later call with a filename
    swaps the stderr handler for a file handler.

    Args:
        filename: Optional path to a log file. If None, logs are written to stderr.

    Returns:
        A structlog logger instance configured for the gh_flatten module.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if filename:
        _install_handler(logging.FileHandler(str(filename), encoding="utf-8"))
    elif _HANDLER is None:
        _install_handler(logging.StreamHandler(sys.stderr))

    if not _LOGGING_CONFIGURED:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _LOGGING_CONFIGURED = True

    return structlog.get_logger("gh_flatten")


logger = setup_logging()
