"""Logging configuration helpers."""

import logging
import sys

LOGGER_NAME = "nutrition_calculator"


def configure_logging(debug: bool = False) -> None:
    """Attach a single stderr handler to the package logger.

    Diagnostics stay quiet unless debug is enabled so they never mix with
    the prompts and error messages the user sees.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if debug else logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
