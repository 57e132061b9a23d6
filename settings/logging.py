"""Logging configuration (loguru sinks for CLI and ETL runs)."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION_DAYS


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Install a console sink and, optionally, a daily rotating file sink.

    The file sink always records DEBUG so repository-level traces are kept
    even when the console is quieter.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "visibility_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention=f"{LOG_RETENTION_DAYS} days",
            compression="gz",
        )
        logger.info("Logging to {} (retention {} days)", log_dir, LOG_RETENTION_DAYS)

    return logger
