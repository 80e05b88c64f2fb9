"""
Structured logging with DEBUG/INFO levels via LOG_LEVEL env var.
Uses RichHandler on stderr so log lines never mix with table or JSON output on stdout.
"""

import os
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def _resolve_level(verbose: bool) -> int:
    """Pick the effective level from LOG_LEVEL / VERBOSE and the verbose flag."""
    log_level_str = os.getenv("LOG_LEVEL", "info").lower()
    verbose_mode = verbose or os.getenv("VERBOSE", "").lower() in ("1", "true", "yes")

    # Default mode only surfaces warnings and errors
    if not verbose_mode and log_level_str != "debug":
        return logging.WARNING
    return logging.DEBUG if log_level_str == "debug" else logging.INFO


def setup_logger(
    name: str = __name__, console: Optional[Console] = None, verbose: bool = False
) -> logging.Logger:
    """
    Set up structured logging with LOG_LEVEL env var support.

    Args:
        name: Logger name (typically __name__)
        console: Optional Rich Console instance (creates a stderr one if not provided)
        verbose: If True, show INFO logs even without LOG_LEVEL=debug

    Returns:
        Configured logger instance
    """
    log_level = _resolve_level(verbose)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Avoid adding multiple handlers if logger already configured
    if not logger.handlers:
        handler = RichHandler(
            console=console if console is not None else Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
            show_path=False,
            markup=False,
        )
        handler.setLevel(log_level)
        logger.addHandler(handler)
        logger.propagate = False
    else:
        for handler in logger.handlers:
            handler.setLevel(log_level)

    return logger


def refresh_levels() -> None:
    """
    Re-apply LOG_LEVEL / VERBOSE to every logger set up by this package.

    Module loggers are created at import time; the CLI calls this after
    --debug has updated the environment.
    """
    for name, existing in list(logging.root.manager.loggerDict.items()):
        if not isinstance(existing, logging.Logger):
            continue
        if name == "triples" or name.startswith("triples."):
            setup_logger(name)
