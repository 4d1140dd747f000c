"""Centralized logger configuration.

Usage:
    from bizconsole.utils.logger import get_logger
    logger = get_logger(__name__)

The first call configures the root logger from BIZ_LOG_LEVEL, so entry
points and tests never need their own basicConfig.
"""
import logging
from typing import Optional

from bizconsole.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty libraries we only want to hear from on problems
NOISY_LOGGERS = ("urllib3", "requests")


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
