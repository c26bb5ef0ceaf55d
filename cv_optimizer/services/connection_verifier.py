"""Credential and connectivity check against the Hugging Face Hub.

The result is returned by value; nothing about the last check is cached.
"""

import asyncio
import time
from typing import Any, Callable, Dict

from huggingface_hub import whoami as hub_whoami

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.error_handling.classification import classify_provider_error
from cv_optimizer.error_handling.exceptions import ConfigurationError
from cv_optimizer.models.diagnostics_models import ConnectionDiagnostics
from cv_optimizer.services.token_resolver import mask_token, resolve_api_token

logger = get_structured_logger(__name__)


async def verify_connection(
    token_resolver: Callable[[], str] = resolve_api_token,
    whoami: Callable[..., Dict[str, Any]] = hub_whoami,
) -> ConnectionDiagnostics:
    """Check that a token is configured and accepted by the Hub.

    Never raises; every failure is reported in the returned diagnostics.
    """
    try:
        token = token_resolver()
    except ConfigurationError as e:
        return ConnectionDiagnostics(token_found=False, error=e.message)

    token_prefix = mask_token(token)
    start_time = time.monotonic()
    try:
        user_info = await asyncio.to_thread(whoami, token=token)
    except Exception as e:  # pylint: disable=broad-exception-caught
        # Reported to the caller through the diagnostics object
        error = classify_provider_error(e)
        logger.warning(
            "Hugging Face connection check failed",
            token_prefix=token_prefix,
            category=error.category.value,
            error=str(e),
        )
        return ConnectionDiagnostics(
            token_found=True,
            token_prefix=token_prefix,
            error=error.message,
            response_time_ms=round((time.monotonic() - start_time) * 1000, 1),
        )

    response_time_ms = round((time.monotonic() - start_time) * 1000, 1)
    user = (user_info or {}).get("name")
    logger.info(
        "Hugging Face connection verified",
        token_prefix=token_prefix,
        user=user,
        response_time_ms=response_time_ms,
    )
    return ConnectionDiagnostics(
        connected=True,
        token_found=True,
        token_prefix=token_prefix,
        user=user,
        response_time_ms=response_time_ms,
    )
