"""Logger configuration for wotd."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru to write to stderr.

    Replaces loguru's default handler with a single stderr sink. Warnings
    and errors are always shown; ``verbose`` adds INFO and ``debug`` adds
    DEBUG along with level and location information.

    Args:
        verbose: Show informational messages
        debug: Show debug messages (implies verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        fmt = "<level>{level: <8}</level> <cyan>{name}</cyan>:<cyan>{line}</cyan> - {message}"
    elif verbose:
        level = "INFO"
        fmt = "<level>{message}</level>"
    else:
        level = "WARNING"
        fmt = "<level>{message}</level>"

    logger.add(sys.stderr, level=level, format=fmt, colorize=sys.stderr.isatty())
