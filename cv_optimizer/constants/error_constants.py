"""Error handling constants for centralized error management.

This module contains constants used across error handling operations
to eliminate hardcoded values and improve consistency.
"""

from typing import Final


class ErrorConstants:
    """Constants for error handling and exception management."""

    # Rate limit error patterns
    RATE_LIMIT_PATTERNS: Final[list] = [
        r"rate.?limit",
        r"too.?many.?requests",
        r"quota.?exceeded",
        r"throttled",
        r"\b429\b",
    ]

    # Network error patterns
    NETWORK_ERROR_PATTERNS: Final[list] = [
        r"connection.?error",
        r"network.?error",
        r"timed?.?out",
        r"connection.?refused",
        r"connection.?reset",
        r"dns.?resolution",
        r"ssl.?error",
    ]

    # Authentication error patterns
    AUTH_ERROR_PATTERNS: Final[list] = [
        r"unauthorized",
        r"authentication.?failed",
        r"invalid.?credentials",
        r"invalid.?token",
        r"access.?denied",
        r"forbidden",
        r"\b401\b",
        r"\b403\b",
    ]

    # Provider or model availability patterns
    PROVIDER_UNAVAILABLE_PATTERNS: Final[list] = [
        r"no inference provider",
        r"not supported for task",
        r"http error",
        r"providerapierror",
        r"model .* (is )?(currently )?(loading|unavailable)",
        r"service unavailable",
        r"not found",
        r"\b404\b",
        r"\b503\b",
    ]

    # Remediation hints appended when every model failed
    TROUBLESHOOTING_STEPS: Final[list] = [
        "Check your Hugging Face inference providers: https://hf.co/settings/inference-providers",
        "Enable at least one provider (Novita, Together, etc.)",
        "Verify your API token at: https://hf.co/settings/tokens",
        "Check if models require accepting terms: visit the model pages and accept if needed",
        "If you are being rate limited, wait a moment before retrying",
    ]

    # User-facing messages per provider error category
    MSG_AUTH_FAILED: Final[str] = (
        "Hugging Face API authentication failed. Please check your API token."
    )
    MSG_RATE_LIMITED: Final[str] = (
        "Hugging Face API rate limit exceeded. Please try again in a moment."
    )
    MSG_MODEL_UNAVAILABLE: Final[str] = (
        "Model {model} is not available through any enabled inference provider."
    )
    MSG_PROVIDER_ERROR: Final[str] = (
        "Hugging Face API error: the model may be unavailable or rate-limited. {details}"
    )
    MSG_TOKEN_MISSING: Final[str] = (
        "HUGGINGFACE_API_TOKEN is not set. Please configure your environment "
        "variables in a .env file."
    )
    MSG_EMPTY_RESPONSE: Final[str] = "Model returned empty response"
    MSG_ALL_MODELS_FAILED: Final[str] = "All models (including fallbacks) failed"

    # Error logging configuration
    MAX_ERROR_MESSAGE_LENGTH: Final[int] = 1000
    MAX_ERROR_DETAILS_LENGTH: Final[int] = 500
