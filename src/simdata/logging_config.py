"""Console logging for the simdata CLI.

Only the `simdata` logger is configured; records still propagate, so the
root logger (and pytest's capture) keeps seeing them.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "simdata"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """ERROR when quiet, DEBUG when verbose, INFO otherwise; quiet wins."""
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach one stderr `RichHandler` to the package logger and set its level.

    Calling it again replaces the handler from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(old)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=verbose,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(log_level(verbose, quiet))
    return logger
