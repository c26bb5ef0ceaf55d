"""Abstract interface for LLM clients."""

from abc import ABC, abstractmethod
from typing import Optional

from cv_optimizer.models.llm_data_models import LLMResponse


class LLMClientInterface(ABC):
    """Abstract interface for LLM clients that hides provider-specific implementation details.

    This interface ensures that the application can work with different LLM providers
    without being tightly coupled to any specific provider's library.
    """

    @abstractmethod
    async def generate_content(
        self, prompt: str, model: Optional[str] = None, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """Generate text with one model, without any fallback.

        Args:
            prompt: Text prompt to send to the model
            model: Model identifier; the client's default model when omitted
            max_tokens: Maximum number of tokens to generate

        Returns:
            LLMResponse holding the generated text

        Raises:
            ValueError: If the prompt is empty
            InferenceProviderError: If the provider call fails or returns no text
        """
        raise NotImplementedError

    @abstractmethod
    def get_model_name(self) -> str:
        """Get the name of the default model.

        Returns:
            String identifier of the model
        """
        raise NotImplementedError

    @abstractmethod
    def is_initialized(self) -> bool:
        """Check if the client is properly initialized.

        Returns:
            True if the client is ready to use, False otherwise
        """
        raise NotImplementedError

    @abstractmethod
    def reconfigure(self, api_key: str) -> None:
        """Reconfigure the client with a new API key.

        Args:
            api_key: New API key to use

        Raises:
            ValueError: If api_key is empty
        """
        raise NotImplementedError
