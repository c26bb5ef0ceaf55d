"""Probe which configured models the enabled inference providers serve."""

import asyncio
import time
from typing import List, Optional, Sequence

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.constants.llm_constants import LLMConstants
from cv_optimizer.error_handling.classification import classify_provider_error
from cv_optimizer.models.diagnostics_models import ModelProbeResult
from cv_optimizer.services.llm.huggingface_client import HuggingFaceClient

logger = get_structured_logger(__name__)


class ModelProbeService:
    """Sends a tiny prompt to each model directly, bypassing the fallback chain.

    A fixed delay separates requests so the probe does not trip rate limits.
    """

    def __init__(self, llm_client: HuggingFaceClient):
        self.llm_client = llm_client

    async def probe_model(self, model: str) -> ModelProbeResult:
        conversational = self.llm_client.capabilities.is_conversational(model)
        start_time = time.monotonic()
        try:
            await self.llm_client.generate_content(
                LLMConstants.PROBE_PROMPT,
                model=model,
                max_tokens=LLMConstants.MAX_TOKENS_PROBE,
            )
        except ValueError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            # A failing model is a probe result, not an error
            error = classify_provider_error(e, model=model)
            return ModelProbeResult(
                model=model,
                available=False,
                conversational=conversational,
                latency_ms=round((time.monotonic() - start_time) * 1000, 1),
                error_category=error.category.value,
                error=str(error),
            )
        return ModelProbeResult(
            model=model,
            available=True,
            conversational=conversational,
            latency_ms=round((time.monotonic() - start_time) * 1000, 1),
        )

    async def check_models(
        self,
        models: Sequence[str],
        delay_seconds: Optional[float] = None,
    ) -> List[ModelProbeResult]:
        if delay_seconds is None:
            delay_seconds = LLMConstants.PROBE_DELAY_SECONDS
        results: List[ModelProbeResult] = []
        for index, model in enumerate(models):
            if index and delay_seconds > 0:
                await asyncio.sleep(delay_seconds)
            result = await self.probe_model(model)
            logger.info(
                "Model probed",
                model=model,
                available=result.available,
                error_category=result.error_category,
            )
            results.append(result)
        return results
