"""Sequential model fallback for inference requests.

A request is tried against an ordered list of candidate models, each exactly
once, until one of them returns text. There is no backoff between attempts.
"""

from typing import Awaitable, Callable, Iterable, List, Optional, Tuple

from tenacity import (
    AsyncRetrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_none,
)

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.error_handling.classification import classify_error_category
from cv_optimizer.error_handling.exceptions import (
    ConfigurationError,
    ModelFallbackExhaustedError,
)
from cv_optimizer.models.llm_data_models import LLMRequest

logger = get_structured_logger(__name__)

GenerateFn = Callable[[str, LLMRequest], Awaitable[str]]


def build_candidate_chain(
    primary: str, fallbacks: Optional[Iterable[str]] = None
) -> List[str]:
    """Primary model first, then fallbacks, without duplicates."""
    chain: List[str] = []
    for model in [primary, *(fallbacks or [])]:
        if model and model not in chain:
            chain.append(model)
    return chain


async def attempt(
    candidates: List[str], request: LLMRequest, generate: GenerateFn
) -> str:
    """Run ``request`` against each candidate in order until one succeeds.

    Args:
        candidates: Ordered model ids; each is tried at most once.
        request: The prompt and sampling parameters.
        generate: Coroutine performing one call against one model.

    Returns:
        Text from the first model that succeeded.

    Raises:
        ConfigurationError: Immediately, without trying further models.
        ModelFallbackExhaustedError: After every candidate failed.
    """
    if not candidates:
        raise ValueError("At least one candidate model is required")
    if not request.prompt:
        raise ValueError("Prompt cannot be empty")

    failures: List[Tuple[str, Exception]] = []
    retrying = AsyncRetrying(
        stop=stop_after_attempt(len(candidates)),
        wait=wait_none(),
        retry=retry_if_not_exception_type(ConfigurationError),
        reraise=True,
    )

    try:
        async for attempt_state in retrying:
            with attempt_state:
                index = attempt_state.retry_state.attempt_number - 1
                model = candidates[index]
                if index:
                    logger.info(
                        "Trying fallback model",
                        model=model,
                        attempt=index + 1,
                        total=len(candidates),
                    )
                try:
                    return await generate(model, request)
                except ConfigurationError:
                    raise
                except Exception as e:
                    failures.append((model, e))
                    logger.warning(
                        "Model attempt failed",
                        model=model,
                        attempt=index + 1,
                        category=classify_error_category(e).value,
                        error=str(e),
                    )
                    raise
    except ConfigurationError:
        raise
    except Exception as e:
        logger.error(
            "All candidate models failed",
            attempted_models=[model for model, _ in failures],
        )
        raise ModelFallbackExhaustedError(failures) from e

    # AsyncRetrying either returns from inside the loop or raises
    raise ModelFallbackExhaustedError(failures)
