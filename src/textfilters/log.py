"""
Logging setup for the command-line tool and scripts.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from textfilters.config import Settings, get_settings

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Replace loguru's default sink with a stderr sink and an optional file sink.

    Arguments left as None fall back to ``log_level`` and ``log_file`` from settings.
    The file sink always records DEBUG.
    """
    settings = settings or get_settings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level="DEBUG")
