"""
Centralised logging setup for the scheduling service.

Usage:
    from utils.logger_config import get_logger
    logger = get_logger(__name__)
    logger.info("Lesson added")
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_initialized = False


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """
    Configure the root logger once: a console handler and, when a log
    directory is configured, a rotating file handler.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL
        log_dir: Directory for schedule.log. Defaults to settings.LOG_DIR
    """
    global _initialized
    if _initialized:
        return

    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_dir = log_dir or settings.LOG_DIR

    root = logging.getLogger()
    root.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "schedule.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Return the module logger; handlers live on the root logger."""
    return logging.getLogger(name)
