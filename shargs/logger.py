"""
Package logger.

Library code logs through `logger` at debug level; a NullHandler keeps it silent
until the host opts in, either with its own logging configuration or with
setup_logging(), which routes records through rich.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("shargs")
logger.addHandler(logging.NullHandler())


def setup_logging(level=logging.WARNING, /, *, console=None):
    """
    Attach a RichHandler to the "shargs" logger.

    Calling it again replaces the previously attached rich handler instead of
    stacking a second one.
    """
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        log_time_format="[%X]",
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = (
    "logger",
    "setup_logging",
)
