"""Hugging Face implementation of LLMClientInterface."""

import asyncio
import time
from typing import Any, Optional

from huggingface_hub import InferenceClient

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.constants.llm_constants import LLMConstants
from cv_optimizer.error_handling.classification import classify_provider_error
from cv_optimizer.error_handling.exceptions import (
    EmptyModelResponseError,
    InferenceProviderError,
)
from cv_optimizer.models.llm_data_models import LLMResponse

from .llm_client_interface import LLMClientInterface
from .model_capabilities import ModelCapabilityRegistry

logger = get_structured_logger(__name__)


class HuggingFaceClient(LLMClientInterface):
    """Calls Hugging Face Inference Providers through ``InferenceClient``.

    Chat-tuned models are sent a single user turn through ``chat_completion``;
    other models go through ``text_generation``. The SDK is synchronous, so
    each call runs in a worker thread.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = LLMConstants.CV_GENERATION_MODEL,
        capabilities: Optional[ModelCapabilityRegistry] = None,
        timeout: float = LLMConstants.DEFAULT_TIMEOUT,
        temperature: float = LLMConstants.DEFAULT_TEMPERATURE,
        top_p: float = LLMConstants.DEFAULT_TOP_P,
    ):
        """Initialize the client.

        Args:
            api_key: Hugging Face access token
            model_name: Default model used when a call names none
            capabilities: Registry deciding chat vs. text mode per model
            timeout: Per-request timeout in seconds
            temperature: Sampling temperature
            top_p: Nucleus sampling threshold

        Raises:
            ValueError: If api_key or model_name is empty
        """
        if not api_key:
            raise ValueError("API key cannot be empty")
        if not model_name:
            raise ValueError("Model name cannot be empty")

        self._api_key = api_key
        self._model_name = model_name
        self._timeout = timeout
        self._temperature = temperature
        self._top_p = top_p
        self.capabilities = capabilities or ModelCapabilityRegistry()
        self._client = InferenceClient(token=api_key, timeout=timeout)

    async def generate_content(
        self, prompt: str, model: Optional[str] = None, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        if not prompt:
            raise ValueError("Prompt cannot be empty")

        model = model or self._model_name
        max_tokens = max_tokens or LLMConstants.DEFAULT_MAX_TOKENS
        conversational = self.capabilities.is_conversational(model)
        logger.info(
            "Generating text",
            model=model,
            conversational=conversational,
            max_tokens=max_tokens,
        )

        start_time = time.monotonic()
        try:
            if conversational:
                text = await asyncio.to_thread(
                    self._chat_completion, prompt, model, max_tokens
                )
            else:
                text = await asyncio.to_thread(
                    self._text_generation, prompt, model, max_tokens
                )
        except InferenceProviderError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Provider SDK errors have no common base; classify and re-raise typed
            error = classify_provider_error(e, model=model)
            logger.warning(
                "Inference call failed",
                model=model,
                category=error.category.value,
                error=str(error)[: LLMConstants.LOG_PREVIEW_LENGTH],
            )
            raise error from e

        if not text or not text.strip():
            raise EmptyModelResponseError(model=model)

        processing_time = time.monotonic() - start_time
        logger.info(
            "Generated text",
            model=model,
            length=len(text),
            processing_time=round(processing_time, 3),
        )
        return LLMResponse(
            content=text,
            model_used=model,
            conversational=conversational,
            processing_time=processing_time,
        )

    def _chat_completion(self, prompt: str, model: str, max_tokens: int) -> str:
        response = self._client.chat_completion(
            messages=[{"role": "user", "content": prompt}],
            model=model,
            max_tokens=max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
        )
        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None) or ""

    def _text_generation(self, prompt: str, model: str, max_tokens: int) -> str:
        response: Any = self._client.text_generation(
            prompt,
            model=model,
            max_new_tokens=max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
            do_sample=True,
            return_full_text=False,
        )
        if isinstance(response, str):
            return response
        return getattr(response, "generated_text", None) or ""

    def get_model_name(self) -> str:
        return self._model_name

    def is_initialized(self) -> bool:
        return bool(self._api_key) and bool(self._model_name)

    def reconfigure(self, api_key: str) -> None:
        """Replace the token and rebuild the underlying SDK client.

        Raises:
            ValueError: If api_key is empty
        """
        if not api_key:
            raise ValueError("API key cannot be empty")
        self._api_key = api_key
        self._client = InferenceClient(token=api_key, timeout=self._timeout)
