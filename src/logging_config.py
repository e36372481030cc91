import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.draft_engine.config import (
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
    LOGS_DIR,
)


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the draft engine."""
    log_dir = log_dir or LOGS_DIR

    # Root logger
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", log_level)
