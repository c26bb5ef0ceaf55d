"""Logging Configuration Module

This module provides a unified logging setup for the CV Optimizer.
It supports environment-aware configuration to switch between simple text-based
logging for development and structured JSON logging for production.

The configuration is controlled by the `APP_ENV` environment variable.
- `APP_ENV=development` (default): Simple, human-readable console output.
- `APP_ENV=production`: Structured JSON logging for robust monitoring.
- `APP_ENV=testing`: Console output only, no log files.
"""

import logging
import os
from pathlib import Path

from pythonjsonlogger import jsonlogger

from cv_optimizer.constants.config_constants import ConfigConstants

from .settings import get_config

# Global flag to ensure setup_logging is only called once
_logging_initialized = False


def setup_logging(log_level=None):
    """Configures logging based on the APP_ENV environment variable."""
    global _logging_initialized

    if _logging_initialized:
        return

    if log_level is None:
        log_level = logging.getLevelName(get_config().logging.log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    app_env = os.environ.get("APP_ENV", "development").lower()
    if app_env == "production":
        _setup_production_logging(log_level)
    elif app_env == "testing":
        _setup_testing_logging(log_level)
    else:
        _setup_development_logging(log_level)

    _logging_initialized = True


def _reset_root_logger(log_level) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    return root_logger


def _add_file_handlers(root_logger: logging.Logger, formatter: logging.Formatter):
    """Attach the main and error log files under the configured directory."""
    config = get_config()
    logs_dir = Path(config.logging.log_directory)
    error_logs_dir = logs_dir / "error"
    logs_dir.mkdir(exist_ok=True, parents=True)
    error_logs_dir.mkdir(exist_ok=True, parents=True)

    main_file_handler = logging.FileHandler(logs_dir / config.logging.main_log_file)
    main_file_handler.setFormatter(formatter)
    root_logger.addHandler(main_file_handler)

    error_file_handler = logging.FileHandler(
        error_logs_dir / config.logging.error_log_file
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(formatter)
    root_logger.addHandler(error_file_handler)


def _setup_development_logging(log_level=logging.INFO):
    """Sets up simple, text-based logging for development."""
    root_logger = _reset_root_logger(log_level)
    formatter = logging.Formatter(get_config().logging.log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    try:
        _add_file_handlers(root_logger, formatter)
    except (IOError, PermissionError) as e:
        root_logger.warning(
            "Failed to setup file logging: %s. Falling back to console-only logging.",
            str(e),
        )

    root_logger.info(
        "Development logging initialized (log_level=%s)",
        logging.getLevelName(log_level),
    )


def _setup_production_logging(log_level=logging.INFO):
    """Sets up structured JSON logging for production with persistent file handlers."""
    root_logger = _reset_root_logger(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        jsonlogger.JsonFormatter(ConfigConstants.DEFAULT_JSON_LOG_FORMAT)
    )
    root_logger.addHandler(console_handler)

    try:
        _add_file_handlers(
            root_logger, logging.Formatter(get_config().logging.log_format)
        )
        logging.info("Production logging initialized with file persistence.")
    except (IOError, PermissionError) as e:
        logging.warning(
            "Failed to setup file logging (permissions or IO error): %s. "
            "Falling back to console-only logging.",
            str(e),
        )


def _setup_testing_logging(log_level=logging.INFO):
    root_logger = _reset_root_logger(log_level)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(get_config().logging.log_format))
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Returns a logger instance."""
    return logging.getLogger(name)


class StructuredLogger:
    """Wraps a standard logger so keyword arguments become record extras.

    ``logger.info("Model failed", model=name, category="rate_limit")`` is
    rendered as separate JSON keys by the production formatter.
    """

    # Names reserved by logging.LogRecord; passing them in extra raises KeyError
    _RESERVED = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
    }

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def info(self, message, **kwargs):
        self._logger.info(message, extra=self._filter_logging_kwargs(kwargs))

    def warning(self, message, **kwargs):
        self._logger.warning(message, extra=self._filter_logging_kwargs(kwargs))

    def error(self, message, *args, **kwargs):
        exc_info = kwargs.pop("exc_info", None)
        if args:
            message = message % args
        self._logger.error(
            message, extra=self._filter_logging_kwargs(kwargs), exc_info=exc_info
        )

    def debug(self, message, **kwargs):
        self._logger.debug(message, extra=self._filter_logging_kwargs(kwargs))

    def _filter_logging_kwargs(self, kwargs):
        """Rename keys that would collide with LogRecord attributes."""
        return {
            (f"ctx_{key}" if key in self._RESERVED else key): value
            for key, value in kwargs.items()
        }


def get_structured_logger(name: str) -> StructuredLogger:
    """Returns a structured logger instance."""
    return StructuredLogger(name)


def log_error_with_context(logger, message, error=None):
    """Logs an error with additional context, including exception info."""
    if error:
        logger.error(f"{message}: {str(error)}", exc_info=error)
    else:
        logger.error(message, exc_info=True)
