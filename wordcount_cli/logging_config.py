"""Logging setup for the word count CLI."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger to write to stderr.

    The level comes from the LOG_LEVEL environment variable (default WARNING)
    unless verbose is set, which forces DEBUG.

    Args:
        verbose: Whether to enable debug logging

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("wordcount_cli")
    logger.setLevel(level)

    # Replace handlers so repeated calls don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
