"""
Logging utilities
"""

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger

from maze_walker.common.constants import LOG_FORMAT_CONSOLE, LOG_FORMAT_FILE


def SetupLogger(log_dir: Optional[Union[str, Path]] = None, level: str = "INFO"):
    """
    Setup logger with console output and an optional daily log file

    Args:
        log_dir: Directory to save log files, None for console only
        level: Logging level
    """
    # Remove default handler
    logger.remove()

    # Console handler with colors
    logger.add(
        sys.stderr,
        format=LOG_FORMAT_CONSOLE,
        level=level,
        colorize=True
    )

    if log_dir is None:
        return logger

    # File handler
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path / "maze_walker_{time:YYYY-MM-DD}.log",
        rotation="00:00",  # Rotate at midnight
        retention="7 days",  # Keep logs for 7 days
        level=level,
        encoding="utf-8",
        format=LOG_FORMAT_FILE
    )

    logger.info(f"Log initialized, saving to: {log_path}")
    return logger
