"""
Logging utilities for the command line entry point.
"""

import logging
import sys


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Configure the root logger to write to stderr.

    Stdout is reserved for the maze itself, so log records never interleave
    with the rendered picture.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured root logger
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
