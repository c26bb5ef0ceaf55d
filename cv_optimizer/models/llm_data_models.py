"""Data models for LLM requests and responses."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from cv_optimizer.constants.llm_constants import LLMConstants


class LLMRequest(BaseModel):
    """A generation request that can be replayed against several models."""

    prompt: str
    max_tokens: int = LLMConstants.DEFAULT_MAX_TOKENS


class LLMResponse(BaseModel):
    """Structured response from LLM calls."""

    model_config = ConfigDict(protected_namespaces=())

    content: str
    model_used: str = ""
    conversational: bool = False
    processing_time: float = 0.0
    metadata: Dict[str, Any] = Field(default_factory=dict)
