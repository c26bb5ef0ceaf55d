"""Configuration-related constants for centralized configuration.

This module contains constants used for application configuration
to eliminate hardcoded values and improve maintainability.
"""

from typing import Final, Tuple


class ConfigConstants:
    """Constants for application configuration settings."""

    # Credential lookup, in precedence order
    TOKEN_ENV_VARS: Final[Tuple[str, ...]] = (
        "HUGGINGFACE_API_TOKEN",
        "NEXT_PUBLIC_HUGGINGFACE_API_TOKEN",
        "HF_TOKEN",
        "HF_API_TOKEN",
    )
    PRIMARY_TOKEN_ENV_VAR: Final[str] = "HUGGINGFACE_API_TOKEN"

    # Model overrides
    PRIMARY_MODEL_ENV_VAR: Final[str] = "HF_PRIMARY_MODEL"
    FALLBACK_MODELS_ENV_VAR: Final[str] = "HF_FALLBACK_MODELS"

    # Request handling
    DEFAULT_REQUEST_TIMEOUT: Final[int] = 60

    # API server
    DEFAULT_API_HOST: Final[str] = "0.0.0.0"
    DEFAULT_API_PORT: Final[int] = 8000
    DEFAULT_API_TITLE: Final[str] = "CV Optimizer API"

    # Application metadata
    DEFAULT_APP_NAME: Final[str] = "cv-optimizer"
    DEFAULT_APP_VERSION: Final[str] = "0.1.0"
    DEFAULT_ENVIRONMENT: Final[str] = "development"

    # Logging
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    DEFAULT_LOG_DIRECTORY: Final[str] = "instance/logs"
    DEFAULT_MAIN_LOG_FILE: Final[str] = "app.log"
    DEFAULT_ERROR_LOG_FILE: Final[str] = "error.log"
    DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_JSON_LOG_FORMAT: Final[str] = (
        "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
    )
