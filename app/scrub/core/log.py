"""Logging bootstrap for the scrub CLI.

Core modules only create module loggers; the CLI attaches a single
Rich handler on the ``scrub`` logger that writes to stderr.
"""

import logging

from rich.logging import RichHandler

from scrub.utils.formatting import err_console

LOGGER_NAME = "scrub"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the application logger.

    Args:
        verbose: If True, show progress and skip notices (INFO),
            otherwise only warnings and errors.

    Returns:
        The configured ``scrub`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
