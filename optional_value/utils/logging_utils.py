"""
Logging utilities for the optional-value package.

Library modules only call ``logging.getLogger(__name__)``; applications
that want the package's log output call ``setup_logger`` to attach
handlers configured from ``optional_value.utils.config_manager``.
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from optional_value.utils.config_manager import config, get_debug_mode

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
)

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def setup_logger(
    logger_name: str,
    log_file_name: Optional[str] = None,
    debug_mode: Optional[bool] = None,
) -> logging.Logger:
    """
    Set up a logger with console and file handlers from the configuration.

    Existing handlers on the logger are replaced, so calling this twice
    for the same name does not duplicate output.

    Args:
        logger_name: Name of the logger
        log_file_name: Name of the log file (without directory path)
        debug_mode: Whether to enable debug mode (overrides config if provided)

    Returns:
        logging.Logger: Configured logger instance
    """
    # Get debug mode from config if not explicitly provided
    if debug_mode is None:
        debug_mode = get_debug_mode(logger_name.rsplit(".", 1)[-1])

    logger = logging.getLogger(logger_name)
    level = logging.DEBUG if debug_mode else getattr(logging, config.logging.log_level)
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate logs
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.logging.console_logging:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if config.logging.enable_file_logging:
        if log_file_name is None:
            log_file_name = f"{logger_name.replace('.', '_')}.log"

        log_path = Path(config.logging.log_dir) / log_file_name
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.debug(f"{logger_name} initialized with debug_mode={debug_mode}")
    return logger
