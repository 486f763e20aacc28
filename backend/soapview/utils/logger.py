import sys
from typing import Optional
from loguru import logger
from ..config import get_settings, Settings

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Replace the default loguru sink with the application sinks.

    Args:
        settings: Settings to read the log level and file from, defaults to get_settings()
    """
    settings = settings or get_settings()

    # Remove default logger
    logger.remove()

    # Add console logger
    logger.add(sys.stderr, level=settings.LOG_LEVEL, format=CONSOLE_FORMAT)

    # Add file logger with rotation
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation=settings.LOG_ROTATION,
            level=settings.LOG_LEVEL,
            format=FILE_FORMAT
        )
