"""
Logging Configuration

Centralized diagnostics logging for calclog.
These logs describe what the program does; the calculation
log files written by the menu are a separate thing.
"""

import logging
import sys
import json
from typing import Optional, Dict, Any

_logging_configured = False

# Attributes every LogRecord carries; anything else came in through `extra`
_STANDARD_ATTRS = frozenset([
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
])


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
        json_format: Whether to use JSON formatting
    """
    global _logging_configured

    # Avoid duplicate configuration
    if _logging_configured:
        return

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger("calclog")
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    # Console handler goes to stderr so it never mixes with results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def reset_logging() -> None:
    """Close and drop handlers so setup_logging() can run again."""
    global _logging_configured
    root_logger = logging.getLogger("calclog")
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []
    _logging_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (will be prefixed with 'calclog.')

    Returns:
        Configured logger instance
    """
    return logging.getLogger(f"calclog.{name}")
