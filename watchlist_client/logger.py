"""Logging configuration for the watchlist client."""

import sys
from loguru import logger

from watchlist_client.config import config


def setup_logger(log_file=None, level=None):
    """Configure the logger for the client.

    Call once from the embedding application; the library itself only logs.
    """
    # Remove default handler
    logger.remove()

    # Console handler with color
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level or config.log_level,
        colorize=True
    )

    # File handler for all logs
    log_file = log_file or config.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        retention="30 days",
        compression="zip"
    )

    logger.info("Logger initialized")
    return logger
