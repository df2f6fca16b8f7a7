"""Logging configuration"""
import logging
import os
import sys
from typing import Optional


def _default_level() -> int:
    """Resolve LOG_LEVEL from the environment, falling back to WARNING"""
    level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Set up and return a logger instance

    Logs go to stderr so that tables printed on stdout stay clean.
    """
    logger = logging.getLogger(name)

    if level is None:
        level = _default_level()

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger
