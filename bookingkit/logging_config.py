"""
Logging setup for the command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, never at import time.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "bookingkit"


def configure_logging(*, verbose: bool = False) -> None:
    """
    Route package logs to stderr through Rich.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        )
