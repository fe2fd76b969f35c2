"""Logging Module for the YouTube clip watcher.

This module configures console logging and optional rotating JSON log files.

Main Components:
    - setup_logging: Install handlers on the root logger
    - JsonFormatter: Structured JSON formatter that keeps ``extra`` fields
    - LoggingConfig: Configuration management

Example:
    >>> from logging_module import LoggingConfig, setup_logging
    >>> setup_logging(LoggingConfig.from_env())
"""

from logging_module.config import LoggingConfig
from logging_module.logger import JsonFormatter, setup_logging

__version__ = "1.0.0"
__all__ = ["setup_logging", "LoggingConfig", "JsonFormatter"]
