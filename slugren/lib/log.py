"""
log.py - Logger setup

All modules log below the "slugren" logger; setup_logging() attaches one
stderr handler to it. Level comes from the argument, else LOG_LEVEL, else
WARNING.
"""
import os
import sys
import logging
from typing import Optional

LOGGER_NAME = "slugren"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the "slugren" logger.

    Safe to call repeatedly: any handler from an earlier call is replaced by
    one writing to the current sys.stderr.

    Args:
        level: Level name (e.g. "INFO"); overrides LOG_LEVEL env

    Returns:
        logging.Logger: The package logger
    """
    log = get_logger()
    log.setLevel((level or os.getenv("LOG_LEVEL", "WARNING")).upper())

    # the old stream may already be closed, so never flush it
    for handler in [h for h in log.handlers if h.get_name() == LOGGER_NAME]:
        log.removeHandler(handler)

    sh = logging.StreamHandler(sys.stderr)
    sh.set_name(LOGGER_NAME)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(sh)

    return log
