"""Logging configuration for redditfeed."""

from __future__ import annotations

import sys
from enum import Enum

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def setup_logging(level: LogLevel = LogLevel.INFO) -> None:
    """Replace loguru's default sink with a stderr sink at level."""

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=LogLevel(level).value)
