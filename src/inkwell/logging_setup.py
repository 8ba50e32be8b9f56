"""Centralized logging configuration for Inkwell."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final, cast

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "INKWELL_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"

console = Console(stderr=True)

if TYPE_CHECKING:

    class _ManagedRichHandler(RichHandler):
        _inkwell_managed: bool

else:
    _ManagedRichHandler = RichHandler


def _resolve_level() -> int:
    """Return the logging level defined via environment variable."""
    level_name = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging() -> None:
    """Configure logging once with a Rich handler.

    Calling this repeatedly is safe: the handler installed by a previous call is
    reused instead of stacking a second one on the root logger.
    """
    root_logger = logging.getLogger()
    level = _resolve_level()

    managed_handler: _ManagedRichHandler | None = None
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_inkwell_managed", False):
            managed_handler = cast(_ManagedRichHandler, handler)
            break

    if managed_handler is None:
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._inkwell_managed = True
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logging.captureWarnings(True)
