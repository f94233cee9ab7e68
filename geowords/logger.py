# geowords/logger.py
import logging
import sys
from typing import Optional


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    Args:
        name: Name of the logger, usually ``__name__``.
        level: Optional level name; defaults to ``GEOWORDS_LOG_LEVEL``.

    Returns:
        Configured logger instance
    """
    if level is None:
        # imported here so settings can use the logger without a cycle
        from .settings import LOG_LEVEL
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    # Avoid adding handlers if already added
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_level(level: str):
    """Change the level of every geowords logger created so far."""
    for name, logger in logging.root.manager.loggerDict.items():
        if name.split('.')[0] == 'geowords' and isinstance(logger, logging.Logger):
            logger.setLevel(level.upper())
