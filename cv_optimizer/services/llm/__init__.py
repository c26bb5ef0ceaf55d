"""LLM client implementations."""

from .huggingface_client import HuggingFaceClient
from .llm_client_interface import LLMClientInterface
from .model_capabilities import ModelCapabilities, ModelCapabilityRegistry

__all__ = [
    "HuggingFaceClient",
    "LLMClientInterface",
    "ModelCapabilities",
    "ModelCapabilityRegistry",
]
