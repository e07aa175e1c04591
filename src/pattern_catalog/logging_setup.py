"""
Logging configuration for the CLI.

Pattern modules only create module loggers; handlers are installed here,
once, by the entry point. Log records go to stderr through Rich so that
demo narration on stdout stays uncluttered.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "pattern_catalog"


def configure_logging(level: str | int = "WARNING") -> None:
    """
    Install a Rich handler on the package logger.

    Calling this again only updates the level; it never stacks handlers.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("pattern_catalog")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
