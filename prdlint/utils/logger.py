"""
Logging utilities for the PRD linter.

Provides consistent logging configuration across all modules.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# Default format
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "prdlint"

# Module-level logger cache
_loggers: dict = {}
_configured = False


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Configure logging for the application.

    Should be called once at application startup. Console output goes to
    stderr so that reports written to stdout stay machine-readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)
        log_file: Optional path to log file
        console: Whether to log to console (default True)
    """
    global _configured

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    root_logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the ``prdlint`` namespace
    """
    if not _configured:
        setup_logging()

    logger_name = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"

    if logger_name not in _loggers:
        _loggers[logger_name] = logging.getLogger(logger_name)

    return _loggers[logger_name]


class LogContext:
    """
    Context manager for structured logging with context.

    Example:
        with LogContext(logger, "Linting document", path="prd.md"):
            logger.info("Starting...")
    """

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.info(f"Starting: {self.operation} ({context_str})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation} ({duration:.2f}s)")
        else:
            self.logger.error(
                f"Failed: {self.operation} ({duration:.2f}s) - {exc_type.__name__}: {exc_val}"
            )

        return False  # Don't suppress exceptions


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """
    Log an exception with full traceback at ERROR level.

    Args:
        logger: Logger instance
        message: Context message
        exc: Exception to log
    """
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=True)


def log_json(logger: logging.Logger, message: str, data: dict, level: int = logging.DEBUG) -> None:
    """
    Log JSON data in a readable format.

    Args:
        logger: Logger instance
        message: Context message
        data: JSON-serializable data
        level: Log level (default DEBUG)
    """
    formatted = json.dumps(data, indent=2, default=str)
    logger.log(level, f"{message}:\n{formatted}")
