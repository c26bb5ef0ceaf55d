"""Custom exception classes for the CV Optimizer.

This module defines a hierarchy of custom exceptions so that callers can
branch on error types instead of on message text. Provider failures are
classified once, when they cross the inference client boundary.
"""

import traceback
from typing import List, Optional, Sequence, Tuple

from cv_optimizer.constants.error_constants import ErrorConstants
from cv_optimizer.constants.file_constants import FileConstants

from .models import ErrorCategory, ErrorContext, ErrorSeverity, StructuredError


class CvOptimizerError(Exception):
    """Base class for all application-specific errors with enhanced context preservation."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        **kwargs,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.original_exception = original_exception
        self.additional_data = kwargs
        # Only capture stack trace if we're actually in an exception context
        current_trace = traceback.format_exc()
        self.stack_trace = (
            current_trace
            if current_trace != "NoneType: None\n" and "Traceback" in current_trace
            else None
        )

    def to_structured_error(self) -> StructuredError:
        """Convert to structured error format."""
        return StructuredError(
            message=self.message,
            category=self.category,
            severity=self.severity,
            context=self.context,
            original_exception=self.original_exception,
            stack_trace=self.stack_trace,
        )

    def with_context(self, **context_updates) -> "CvOptimizerError":
        """Update the error context in place and return self."""
        for key, value in context_updates.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.additional_data[key] = value
        return self


class ConfigurationError(CvOptimizerError):
    """Raised for configuration-related issues, such as a missing API token."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.CRITICAL,
            **kwargs,
        )
        self.config_key = config_key
        if config_key:
            self.context.additional_data["config_key"] = config_key


class ValidationError(ValueError, CvOptimizerError):
    """Raised for request data validation errors."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        ValueError.__init__(self, message)
        CvOptimizerError.__init__(
            self,
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        if field_name:
            self.context.additional_data["field_name"] = field_name


class LLMResponseParsingError(ValueError, CvOptimizerError):
    """Raised when the response from an LLM cannot be parsed into the expected format."""

    def __init__(self, message: str, raw_response: str = "", **kwargs):
        full_message = f"{message}"
        if raw_response:
            full_message += f". Raw response snippet: {raw_response[:200]}..."

        ValueError.__init__(self, full_message)
        CvOptimizerError.__init__(
            self,
            message=full_message,
            category=ErrorCategory.PARSING,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.context.additional_data.update(
            {
                "raw_response": raw_response,
                "response_length": len(raw_response) if raw_response else 0,
            }
        )


class TemplateError(CvOptimizerError):
    """Raised for prompt template errors."""

    def __init__(self, message: str, template_name: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.GENERATION,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        if template_name:
            self.context.additional_data["template_name"] = template_name


class TemplateFormattingError(TemplateError):
    """Raised when formatting a template fails, e.g., due to missing keys."""

    def __init__(self, message: str, missing_keys: Optional[list] = None, **kwargs):
        super().__init__(message=message, **kwargs)
        if missing_keys:
            self.context.additional_data["missing_keys"] = missing_keys


class InferenceProviderError(CvOptimizerError):
    """Raised when a call to the inference provider fails for one model."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
        category: ErrorCategory = ErrorCategory.API_ERROR,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        **kwargs,
    ):
        super().__init__(
            message=message, category=category, severity=severity, **kwargs
        )
        self.model = model
        self.status_code = status_code
        self.context.model = model
        if status_code:
            self.context.additional_data["status_code"] = status_code


class AuthenticationError(InferenceProviderError):
    """Raised when the provider rejects the API token."""

    def __init__(self, message: str = ErrorConstants.MSG_AUTH_FAILED, **kwargs):
        super().__init__(
            message, category=ErrorCategory.AUTHENTICATION, **kwargs
        )


class RateLimitError(InferenceProviderError):
    """Raised when rate limits are exceeded."""

    def __init__(
        self,
        message: str = ErrorConstants.MSG_RATE_LIMITED,
        retry_after: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(
            message,
            category=ErrorCategory.RATE_LIMIT,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        if retry_after:
            self.context.additional_data["retry_after"] = retry_after


class ModelUnavailableError(InferenceProviderError):
    """Raised when no enabled provider serves the model or the task."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message, category=ErrorCategory.PROVIDER_UNAVAILABLE, **kwargs
        )


class NetworkError(InferenceProviderError):
    """Raised for network-related errors."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, category=ErrorCategory.NETWORK, **kwargs)


class OperationTimeoutError(InferenceProviderError):
    """Raised when an inference request times out."""

    def __init__(
        self, message: str, timeout_duration: Optional[float] = None, **kwargs
    ):
        super().__init__(
            message,
            category=ErrorCategory.TIMEOUT,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        if timeout_duration:
            self.context.additional_data["timeout_duration"] = timeout_duration


class EmptyModelResponseError(InferenceProviderError):
    """Raised when a model answers with no text."""

    def __init__(self, message: str = ErrorConstants.MSG_EMPTY_RESPONSE, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.GENERATION,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )


class ModelFallbackExhaustedError(CvOptimizerError):
    """Raised when the primary model and every fallback model failed."""

    def __init__(
        self,
        failures: Sequence[Tuple[str, Exception]],
        troubleshooting_steps: Sequence[str] = tuple(
            ErrorConstants.TROUBLESHOOTING_STEPS
        ),
        **kwargs,
    ):
        self.failures: List[Tuple[str, Exception]] = list(failures)
        self.attempted_models: List[str] = [model for model, _ in self.failures]
        self.troubleshooting_steps = list(troubleshooting_steps)
        last_error = self.failures[-1][1] if self.failures else None
        super().__init__(
            message=self._compose_message(),
            category=getattr(last_error, "category", ErrorCategory.API_ERROR),
            severity=ErrorSeverity.HIGH,
            original_exception=last_error,
            **kwargs,
        )
        self.context.additional_data["attempted_models"] = self.attempted_models

    def _compose_message(self) -> str:
        lines = [ErrorConstants.MSG_ALL_MODELS_FAILED + ":"]
        for model, error in self.failures:
            category = getattr(error, "category", ErrorCategory.UNKNOWN)
            lines.append(f"- {model} [{getattr(category, 'value', category)}]: {error}")
        lines.append("")
        lines.append("Troubleshooting steps:")
        for index, step in enumerate(self.troubleshooting_steps, start=1):
            lines.append(f"{index}. {step}")
        return "\n".join(lines)


class FileParsingError(CvOptimizerError):
    """Raised when an uploaded file cannot be turned into text."""

    status_code = 500
    default_hint = FileConstants.MSG_PARSE_HINT

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        hint: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(
            message=message,
            category=ErrorCategory.FILE_IO,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.hint = hint or self.default_hint
        if filename:
            self.context.additional_data["filename"] = filename


class UnsupportedFileTypeError(FileParsingError):
    """Raised for upload formats the parser does not handle."""

    status_code = 400
    default_hint = FileConstants.HINT_UNSUPPORTED


class LegacyDocFormatError(UnsupportedFileTypeError):
    """Raised for legacy binary Word documents, regardless of content."""

    default_hint = FileConstants.HINT_LEGACY_DOC


class EmptyFileContentError(FileParsingError):
    """Raised when a file yields no text."""

    status_code = 400
    default_hint = FileConstants.HINT_EMPTY


class FileTooLargeError(FileParsingError):
    """Raised when an upload exceeds the configured size limit."""

    status_code = 400
    default_hint = FileConstants.HINT_TOO_LARGE


# Exceptions that analyzers recover from with heuristics. ConfigurationError
# is excluded and always propagates.
CATCHABLE_EXCEPTIONS = (
    InferenceProviderError,
    ModelFallbackExhaustedError,
    LLMResponseParsingError,
    TemplateError,
    ValueError,
    TypeError,
    KeyError,
    IndexError,
    AttributeError,
    ConnectionError,
)
