"""Centralized error classification utilities.

Provider SDK exceptions are turned into the typed ``InferenceProviderError``
hierarchy here. The classification reads the exception message plus, when
present, the HTTP status and response body attached to the exception.
"""

import re
from typing import Optional

from cv_optimizer.constants.error_constants import ErrorConstants
from cv_optimizer.error_handling.exceptions import (
    AuthenticationError,
    InferenceProviderError,
    ModelUnavailableError,
    NetworkError,
    OperationTimeoutError,
    RateLimitError,
)
from cv_optimizer.error_handling.models import ErrorCategory


def _matches_any(text: str, patterns) -> bool:
    return any(re.search(pattern, text, re.IGNORECASE) for pattern in patterns)


def extract_status_code(exception: Exception) -> Optional[int]:
    """Return the HTTP status attached to an SDK exception, if any."""
    response = getattr(exception, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    status_code = getattr(exception, "status_code", None)
    return status_code if isinstance(status_code, int) else None


def extract_error_details(exception: Exception) -> str:
    """Collect the message, server message and response body of an exception."""
    parts = [str(exception)]
    server_message = getattr(exception, "server_message", None)
    if server_message:
        parts.append(str(server_message))
    response = getattr(exception, "response", None)
    if response is not None:
        try:
            body = response.text
        except (AttributeError, RuntimeError, UnicodeDecodeError):
            body = None
        if body:
            parts.append(str(body))
    details = " | ".join(part for part in parts if part)
    return details[: ErrorConstants.MAX_ERROR_MESSAGE_LENGTH]


def is_auth_error(exception: Exception) -> bool:
    """Checks if an exception is an authentication failure."""
    if isinstance(exception, AuthenticationError):
        return True
    if extract_status_code(exception) in (401, 403):
        return True
    return _matches_any(
        extract_error_details(exception), ErrorConstants.AUTH_ERROR_PATTERNS
    )


def is_rate_limit_error(exception: Exception) -> bool:
    """
    Checks if an exception is a rate-limit error.

    Args:
        exception: The exception to classify

    Returns:
        bool: True if this is a rate limit error, False otherwise
    """
    if isinstance(exception, RateLimitError):
        return True
    if extract_status_code(exception) == 429:
        return True
    return _matches_any(
        extract_error_details(exception), ErrorConstants.RATE_LIMIT_PATTERNS
    )


def is_provider_unavailable_error(exception: Exception) -> bool:
    """Checks if no enabled inference provider serves the model."""
    if isinstance(exception, ModelUnavailableError):
        return True
    if extract_status_code(exception) in (404, 503):
        return True
    return _matches_any(
        extract_error_details(exception),
        ErrorConstants.PROVIDER_UNAVAILABLE_PATTERNS,
    )


def is_timeout_error(exception: Exception) -> bool:
    """Checks if an exception is a timeout error."""
    if isinstance(exception, (OperationTimeoutError, TimeoutError)):
        return True
    return "timeout" in str(exception).lower() or "timed out" in str(exception).lower()


def is_network_error(exception: Exception) -> bool:
    """
    Checks if an exception is a network-related error.

    Args:
        exception: The exception to classify

    Returns:
        bool: True if this is a network error, False otherwise
    """
    if isinstance(exception, (NetworkError, ConnectionError)):
        return True
    return _matches_any(str(exception), ErrorConstants.NETWORK_ERROR_PATTERNS)


def classify_error_category(exception: Exception) -> ErrorCategory:
    """Map any exception to an ``ErrorCategory``.

    Order matters: a 401 body often also mentions the HTTP error wrapper, so
    authentication and rate limiting are checked before availability.
    """
    category = getattr(exception, "category", None)
    if isinstance(category, ErrorCategory) and category != ErrorCategory.UNKNOWN:
        return category
    if is_auth_error(exception):
        return ErrorCategory.AUTHENTICATION
    if is_rate_limit_error(exception):
        return ErrorCategory.RATE_LIMIT
    if is_timeout_error(exception):
        return ErrorCategory.TIMEOUT
    if is_provider_unavailable_error(exception):
        return ErrorCategory.PROVIDER_UNAVAILABLE
    if is_network_error(exception):
        return ErrorCategory.NETWORK
    return ErrorCategory.API_ERROR


def classify_provider_error(
    exception: Exception, model: Optional[str] = None
) -> InferenceProviderError:
    """Wrap a provider SDK exception into the matching typed error.

    Already-typed errors are returned unchanged.
    """
    if isinstance(exception, InferenceProviderError):
        return exception

    details = extract_error_details(exception)
    status_code = extract_status_code(exception)
    category = classify_error_category(exception)
    kwargs = {
        "model": model,
        "status_code": status_code,
        "original_exception": exception,
    }

    if category == ErrorCategory.AUTHENTICATION:
        return AuthenticationError(**kwargs)
    if category == ErrorCategory.RATE_LIMIT:
        return RateLimitError(**kwargs)
    if category == ErrorCategory.TIMEOUT:
        return OperationTimeoutError(details, **kwargs)
    if category == ErrorCategory.PROVIDER_UNAVAILABLE:
        return ModelUnavailableError(
            f"{ErrorConstants.MSG_MODEL_UNAVAILABLE.format(model=model)} {details}",
            **kwargs,
        )
    if category == ErrorCategory.NETWORK:
        return NetworkError(details, **kwargs)
    return InferenceProviderError(
        ErrorConstants.MSG_PROVIDER_ERROR.format(details=details), **kwargs
    )
