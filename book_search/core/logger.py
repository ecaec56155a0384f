"""
Centralized logging setup for Book Search.

Provides console and rotating file output with configuration from config.json.
Library modules only ask for named loggers; the entry points (CLI and GUI)
install the handlers once, with a guard against repeated initialization.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

from .config_loader import get_config
from .exceptions import ConfigurationError


LOG_FILENAME = "book_search.log"

_logger_initialized = False


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    stream: TextIO = None
) -> None:
    """
    Initialize the root logger with console and optional file handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        logs_directory: Directory for log files. If None, file logging disabled.
        max_file_size_mb: Maximum size of each log file in MB.
        backup_count: Number of backup files to keep.
        stream: Console stream, stdout when not given.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / LOG_FILENAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logger_initialized = True


def setup_logging_from_config(stream: TextIO = None) -> None:
    """
    Initialize logging from the loaded config.

    Falls back to console-only defaults when no config file can be found.

    Args:
        stream: Console stream, stdout when not given.
    """
    try:
        config = get_config()
    except ConfigurationError:
        setup_logging(stream=stream)
        return

    setup_logging(
        log_level=config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        stream=stream
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Has no side effects: records propagate to whatever handlers the entry
    point installed through setup_logging_from_config().

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
