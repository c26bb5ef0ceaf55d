"""Configuration package for the CV Optimizer."""

from .logging_config import get_logger, get_structured_logger, setup_logging
from .settings import AppConfig, get_config, reload_config

__all__ = [
    "AppConfig",
    "get_config",
    "get_logger",
    "get_structured_logger",
    "reload_config",
    "setup_logging",
]
