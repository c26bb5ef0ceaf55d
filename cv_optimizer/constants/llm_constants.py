"""LLM-related constants for centralized configuration.

This module contains constants used for inference operations to eliminate
hardcoded values and improve maintainability.
"""

from typing import Final, Tuple


class LLMConstants:
    """Constants for LLM operations and configuration."""

    # Model identifiers
    CV_GENERATION_MODEL: Final[str] = "meta-llama/Meta-Llama-3.1-8B-Instruct"
    COVER_LETTER_MODEL: Final[str] = "meta-llama/Meta-Llama-3.1-8B-Instruct"
    FALLBACK_MODEL: Final[str] = "mistralai/Mistral-7B-Instruct-v0.2"
    ALTERNATIVE_FALLBACK_MODEL: Final[str] = "HuggingFaceH4/zephyr-7b-beta"
    LAST_RESORT_MODEL: Final[str] = "google/flan-t5-large"
    DEFAULT_FALLBACK_MODELS: Final[Tuple[str, ...]] = (
        FALLBACK_MODEL,
        ALTERNATIVE_FALLBACK_MODEL,
        LAST_RESORT_MODEL,
    )

    # Substrings that mark a model as chat-completion only
    CONVERSATIONAL_MARKERS: Final[Tuple[str, ...]] = (
        "mistralai",
        "mistral",
        "meta-llama",
        "llama",
        "chat",
        "instruct",
    )

    # Sampling parameters
    DEFAULT_TEMPERATURE: Final[float] = 0.7
    DEFAULT_TOP_P: Final[float] = 0.9

    # Token limits for different operations
    DEFAULT_MAX_TOKENS: Final[int] = 2000
    MAX_TOKENS_CV_GENERATION: Final[int] = 3000
    MAX_TOKENS_COVER_LETTER: Final[int] = 2000
    MAX_TOKENS_ANALYSIS: Final[int] = 2000
    MAX_TOKENS_QUESTIONS: Final[int] = 3000
    MAX_TOKENS_PROBE: Final[int] = 16

    # Request timeouts (seconds)
    DEFAULT_TIMEOUT: Final[float] = 60.0
    WHOAMI_TIMEOUT: Final[float] = 10.0

    # Diagnostics
    TOKEN_PREFIX_LENGTH: Final[int] = 10
    PROBE_PROMPT: Final[str] = "Hello"
    PROBE_DELAY_SECONDS: Final[float] = 1.0
    LOG_PREVIEW_LENGTH: Final[int] = 500
