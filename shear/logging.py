"""Centralized logging configuration for shear"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config import LOG_DIR, LOG_LEVEL

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def get_timestamp() -> str:
    """Get current timestamp in YYYYMMDD_HHMMSS format"""
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def configure_logging(log_level: Optional[str] = None, file_logging: bool = False,
                      log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Configure the shear logger with rich console output.

    Args:
        log_level: Level name; falls back to LOG_LEVEL from config.
        file_logging: Also write a timestamped log file.
        log_dir: Directory for the log file; defaults to LOG_DIR.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    level = (log_level or LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger("shear")
    logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    log_file = None
    if file_logging:
        log_dir = Path(log_dir or LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"shear_{get_timestamp()}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    # Capture warnings
    logging.captureWarnings(True)

    if log_file is not None:
        logger.info("Log file: %s", log_file)
    return log_file
