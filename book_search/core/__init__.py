"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, reload_config, Config
from .logger import get_logger, setup_logging, setup_logging_from_config
from .exceptions import (
    BookSearchError,
    ConfigurationError,
    CorpusError,
    ExtractionError,
    ExportError,
    SearchError,
    InvalidInputError
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "BookSearchError",
    "ConfigurationError",
    "CorpusError",
    "ExtractionError",
    "ExportError",
    "SearchError",
    "InvalidInputError"
]
