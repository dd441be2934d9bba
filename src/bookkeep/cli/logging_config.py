"""Logging setup for the command line."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name, one of LOG_LEVELS (case-insensitive)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        force=True,
    )
