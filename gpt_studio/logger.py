"""
gpt-studio - Logging System
Diagnostics go to stderr through rich; user-facing output stays on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics console, kept apart from the interactive one
stderr_console = Console(stderr=True)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Initialize logging for an entry point.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR). Defaults to
            config.LOG_LEVEL.

    Returns:
        The package logger
    """
    from . import config

    level_name = (level or config.LOG_LEVEL or "WARNING").upper()
    logger = logging.getLogger("gpt_studio")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=stderr_console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging
    if logger.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger
