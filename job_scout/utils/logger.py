"""Logging configuration for the Job Scout app."""

import logging
import sys
from typing import Optional

from job_scout.config import LOG_LEVEL

_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _default_level() -> int:
    level = logging.getLevelName(LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a stdout logger for a module. The handler is attached once per name,
    and records do not propagate, so Streamlit reruns do not duplicate lines.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_default_level())
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger
