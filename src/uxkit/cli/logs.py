"""Logging setup for the ``uxkit`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where records go.  Rich renders console records when it is
installed, a plain stderr stream handler otherwise.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "uxkit"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_MARK = "_uxkit_handler"


def _console_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler

    # RichHandler has its own formatting
    return RichHandler(
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Install console (and optional file) handlers on the ``uxkit`` logger.

    Calling it again replaces the handlers installed by a previous call
    instead of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    handlers = [_console_handler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)

    return logger
