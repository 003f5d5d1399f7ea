"""Logging setup shared by every pipeline stage."""

import logging
import sys
from typing import Optional

from resume_signal_ai.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configured_level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.
    The level defaults to RESUME_LOG_LEVEL; an explicit level always wins.
    Records still propagate to the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_configured_level())
    if level is not None:
        logger.setLevel(level)
    return logger
