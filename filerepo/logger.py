"""
Logging setup for filerepo.

Call `setup_logging()` once from an entry point; every module obtains its
logger through `get_logger(__name__)`.
"""

import logging
import sys
from typing import Optional

from filerepo import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single stdout handler.

    Args:
        level: Level name (DEBUG, INFO, ...). Falls back to
               FILEREPO_LOG_LEVEL, then INFO.

    Returns:
        The root logger.
    """
    name = (level or config.LOG_LEVEL).upper()
    log_level = getattr(logging, name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    # replace previous handlers so repeated calls don't duplicate output
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
