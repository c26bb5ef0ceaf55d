"""Error handling module for the CV Optimizer."""

from .exceptions import (
    CATCHABLE_EXCEPTIONS,
    AuthenticationError,
    ConfigurationError,
    CvOptimizerError,
    EmptyFileContentError,
    EmptyModelResponseError,
    FileParsingError,
    FileTooLargeError,
    InferenceProviderError,
    LegacyDocFormatError,
    LLMResponseParsingError,
    ModelFallbackExhaustedError,
    ModelUnavailableError,
    NetworkError,
    OperationTimeoutError,
    RateLimitError,
    TemplateError,
    TemplateFormattingError,
    UnsupportedFileTypeError,
    ValidationError,
)
from .models import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    StructuredError,
)

__all__ = [
    # Exceptions
    "CATCHABLE_EXCEPTIONS",
    "AuthenticationError",
    "ConfigurationError",
    "CvOptimizerError",
    "EmptyFileContentError",
    "EmptyModelResponseError",
    "FileParsingError",
    "FileTooLargeError",
    "InferenceProviderError",
    "LegacyDocFormatError",
    "LLMResponseParsingError",
    "ModelFallbackExhaustedError",
    "ModelUnavailableError",
    "NetworkError",
    "OperationTimeoutError",
    "RateLimitError",
    "TemplateError",
    "TemplateFormattingError",
    "UnsupportedFileTypeError",
    "ValidationError",
    # Models
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "StructuredError",
]
