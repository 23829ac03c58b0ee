"""Logging helpers for Wildmark.

Library modules get namespaced standard-library loggers; only the CLI
installs a handler, via ``setup_logging``.

Example:
    >>> from wildmark.log import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classified 12 lines")
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "wildmark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``wildmark`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling this again replaces the handler instead of stacking another.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
