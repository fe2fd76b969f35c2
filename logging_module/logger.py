"""Logger setup with console output and optional structured JSON files.

Every module logs through ``logging.getLogger(__name__)``; this module only
installs handlers on the root logger.
"""

import json
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from logging_module.config import LoggingConfig

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED_ATTRS = frozenset(
    [
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    ]
)


def setup_logging(
    config: Optional[LoggingConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Configure the root logger (or ``logger`` if given).

    Installs a stdout handler and, when ``config.log_path`` is set, a
    rotating file handler writing one JSON object per line.

    Args:
        config: Logging configuration. Loaded from the environment if omitted.
        logger: Logger to configure instead of the root logger.

    Returns:
        The configured logger

    Raises:
        ValueError: If configuration is invalid
    """
    config = config or LoggingConfig.from_env()
    config.validate()

    level = getattr(logging, config.log_level)
    root = logger or logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()  # Remove any existing handlers

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)

    # Rotating file handler (JSON format)
    if config.log_path:
        try:
            os.makedirs(config.log_path, exist_ok=True)
            log_file = os.path.join(config.log_path, config.log_file_name)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=config.log_file_max_bytes,
                backupCount=config.log_file_backup_count,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)
        except OSError as e:
            root.warning(f"Could not create log file: {e}. Logging to console only.")

    return root


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Formats log records as JSON with timestamp, level, message, and extra fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted string
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add all custom extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
