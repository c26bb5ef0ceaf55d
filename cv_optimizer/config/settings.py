"""Configuration management for the CV Optimizer.

This module provides centralized configuration management for the application,
including the inference credential lookup, model chain, generation limits,
and other configuration parameters.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from cv_optimizer.constants.config_constants import ConfigConstants
from cv_optimizer.constants.file_constants import FileConstants
from cv_optimizer.constants.llm_constants import LLMConstants

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT = PACKAGE_ROOT.parent


def _load_environment_variables():
    """Load variables from a project-level .env file, if present."""
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path)


# Load environment variables at module level
_load_environment_variables()


def _split_models(raw: str) -> List[str]:
    return [model.strip() for model in raw.split(",") if model.strip()]


@dataclass
class HuggingFaceConfig:
    """Configuration for the Hugging Face inference API."""

    token_env_vars: tuple = ConfigConstants.TOKEN_ENV_VARS
    primary_model: str = field(
        default_factory=lambda: os.getenv(
            ConfigConstants.PRIMARY_MODEL_ENV_VAR, LLMConstants.CV_GENERATION_MODEL
        )
    )
    cover_letter_model: str = LLMConstants.COVER_LETTER_MODEL
    fallback_models: List[str] = field(
        default_factory=lambda: _split_models(
            os.getenv(
                ConfigConstants.FALLBACK_MODELS_ENV_VAR,
                ",".join(LLMConstants.DEFAULT_FALLBACK_MODELS),
            )
        )
    )
    temperature: float = LLMConstants.DEFAULT_TEMPERATURE
    top_p: float = LLMConstants.DEFAULT_TOP_P
    request_timeout: int = field(
        default_factory=lambda: int(
            os.getenv(
                "REQUEST_TIMEOUT_SECONDS", str(ConfigConstants.DEFAULT_REQUEST_TIMEOUT)
            )
        )
    )


@dataclass
class GenerationLimits:
    """Maximum output tokens per operation."""

    default: int = LLMConstants.DEFAULT_MAX_TOKENS
    cv_generation: int = LLMConstants.MAX_TOKENS_CV_GENERATION
    cover_letter: int = LLMConstants.MAX_TOKENS_COVER_LETTER
    analysis: int = LLMConstants.MAX_TOKENS_ANALYSIS
    questions: int = LLMConstants.MAX_TOKENS_QUESTIONS


@dataclass
class FileUploadConfig:
    """Configuration for CV file uploads."""

    max_file_size_bytes: int = field(
        default_factory=lambda: int(
            os.getenv("MAX_UPLOAD_BYTES", str(FileConstants.MAX_FILE_SIZE_BYTES))
        )
    )
    allowed_mime_types: tuple = FileConstants.ALLOWED_MIME_TYPES


@dataclass
class LoggingConfig:
    """Configuration for logging settings."""

    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", ConfigConstants.DEFAULT_LOG_LEVEL)
    )
    log_directory: str = field(
        default_factory=lambda: os.getenv(
            "LOG_DIRECTORY", ConfigConstants.DEFAULT_LOG_DIRECTORY
        )
    )
    main_log_file: str = field(
        default_factory=lambda: os.getenv(
            "LOG_MAIN_FILE", ConfigConstants.DEFAULT_MAIN_LOG_FILE
        )
    )
    error_log_file: str = field(
        default_factory=lambda: os.getenv(
            "LOG_ERROR_FILE", ConfigConstants.DEFAULT_ERROR_LOG_FILE
        )
    )
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", ConfigConstants.DEFAULT_LOG_FORMAT
        )
    )


@dataclass
class ApiConfig:
    """HTTP server settings."""

    host: str = field(
        default_factory=lambda: os.getenv("API_HOST", ConfigConstants.DEFAULT_API_HOST)
    )
    port: int = field(
        default_factory=lambda: int(
            os.getenv("API_PORT", str(ConfigConstants.DEFAULT_API_PORT))
        )
    )
    title: str = ConfigConstants.DEFAULT_API_TITLE
    version: str = field(
        default_factory=lambda: os.getenv(
            "APP_VERSION", ConfigConstants.DEFAULT_APP_VERSION
        )
    )


@dataclass
class EnvironmentConfig:
    """Environment-specific settings."""

    environment: str = field(
        default_factory=lambda: os.getenv(
            "APP_ENV", ConfigConstants.DEFAULT_ENVIRONMENT
        ).lower()
    )
    debug: bool = field(
        default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true"
    )


@dataclass
class PathsConfig:
    """Configuration for application paths."""

    project_root: Path = field(default_factory=lambda: PROJECT_ROOT)
    prompts_directory: str = field(
        default_factory=lambda: os.getenv(
            "PATHS_PROMPTS_DIRECTORY", str(PACKAGE_ROOT / "templates" / "prompts")
        )
    )


@dataclass
class AppConfig:
    """Main application configuration."""

    huggingface: HuggingFaceConfig = field(default_factory=HuggingFaceConfig)
    limits: GenerationLimits = field(default_factory=GenerationLimits)
    uploads: FileUploadConfig = field(default_factory=FileUploadConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    env: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    def __post_init__(self):
        """Apply environment-specific adjustments."""
        if self.env.environment == "production":
            self.env.debug = False
            self.logging.log_level = "WARNING"
        elif self.env.debug:
            self.logging.log_level = "DEBUG"

    def get_prompt_path(self, prompt_name: str) -> Path:
        """Get the full path to a prompt file."""
        return Path(self.paths.prompts_directory) / f"{prompt_name}.md"


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reload_config() -> AppConfig:
    """Reload the configuration from environment variables."""
    global _config
    _config = AppConfig()
    return _config
