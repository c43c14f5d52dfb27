"""
Logging setup.

All modules log through loguru's global ``logger``.  ``setup_logger`` runs
once when the application is imported and replaces loguru's default sink
with a stderr sink and, when ``LOG_FILE`` is set, a rotating file sink.
Anything not passed explicitly is read from settings.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from sprintlab.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the loguru sinks.

    Args:
        level: Minimum level; defaults to ``settings.LOG_LEVEL``.
        log_file: Log file path; defaults to ``settings.LOG_FILE``.  No file
            sink is added when both are empty.
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            backtrace=True,
            # Variable values in tracebacks only while debugging
            diagnose=settings.DEBUG,
        )

    logger.debug(f"Logging at {level}" + (f", file sink {log_file}" if log_file else ""))
