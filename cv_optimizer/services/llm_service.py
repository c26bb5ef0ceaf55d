"""Application-facing LLM service.

Agents call ``generate_text`` with a prompt and an output budget. The service
builds the model candidate chain from configuration and runs the request
through it.
"""

import time
from typing import List, Optional

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.constants.llm_constants import LLMConstants
from cv_optimizer.models.diagnostics_models import ConnectionDiagnostics
from cv_optimizer.models.llm_data_models import LLMRequest
from cv_optimizer.services.connection_verifier import verify_connection
from cv_optimizer.services.llm.llm_client_interface import LLMClientInterface
from cv_optimizer.services.llm_fallback_chain import attempt, build_candidate_chain

logger = get_structured_logger("llm_service")


class LLMService:
    """Generates text with model fallback."""

    def __init__(self, settings: AppConfig, llm_client: LLMClientInterface):
        """
        Args:
            settings: Injected application configuration
            llm_client: Injected client performing single-model calls
        """
        self.settings = settings
        self.llm_client = llm_client
        self.primary_model = settings.huggingface.primary_model
        self.fallback_models = list(settings.huggingface.fallback_models)

        logger.info(
            "LLM service initialized",
            primary_model=self.primary_model,
            fallback_models=self.fallback_models,
        )

    def candidate_models(self, model: Optional[str] = None) -> List[str]:
        return build_candidate_chain(model or self.primary_model, self.fallback_models)

    async def _generate_with_model(self, model: str, request: LLMRequest) -> str:
        response = await self.llm_client.generate_content(
            request.prompt, model=model, max_tokens=request.max_tokens
        )
        return response.content

    async def generate_text(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = LLMConstants.DEFAULT_MAX_TOKENS,
    ) -> str:
        """Generate text, falling back through the configured models.

        Args:
            prompt: Text prompt to send to the model
            model: Preferred model; defaults to the configured primary model
            max_tokens: Maximum number of tokens to generate

        Returns:
            The generated text

        Raises:
            ConfigurationError: If the API token is missing
            ModelFallbackExhaustedError: If every candidate model failed
        """
        request = LLMRequest(prompt=prompt, max_tokens=max_tokens)
        candidates = self.candidate_models(model)

        start_time = time.monotonic()
        text = await attempt(candidates, request, self._generate_with_model)
        elapsed = time.monotonic() - start_time

        logger.info(
            "Text generation completed",
            candidates=len(candidates),
            processing_time=round(elapsed, 3),
            length=len(text),
        )
        return text

    async def verify_connection(self) -> ConnectionDiagnostics:
        return await verify_connection()
