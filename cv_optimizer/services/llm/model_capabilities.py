"""Which request mode each model needs.

Models listed in the capability table are looked up directly. Unlisted model
ids fall back to a substring heuristic on the id.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from cv_optimizer.constants.llm_constants import LLMConstants


@dataclass(frozen=True)
class ModelCapabilities:
    conversational: bool


DEFAULT_CAPABILITIES: Dict[str, ModelCapabilities] = {
    LLMConstants.CV_GENERATION_MODEL: ModelCapabilities(conversational=True),
    LLMConstants.FALLBACK_MODEL: ModelCapabilities(conversational=True),
    LLMConstants.ALTERNATIVE_FALLBACK_MODEL: ModelCapabilities(conversational=True),
    LLMConstants.LAST_RESORT_MODEL: ModelCapabilities(conversational=False),
}


def looks_conversational(
    model: str, markers: Iterable[str] = LLMConstants.CONVERSATIONAL_MARKERS
) -> bool:
    """Heuristic: chat-tuned model families carry a recognizable name."""
    lowered = model.lower()
    return any(marker in lowered for marker in markers)


class ModelCapabilityRegistry:
    """Capability table keyed by model id."""

    def __init__(self, table: Optional[Mapping[str, ModelCapabilities]] = None):
        self._table: Dict[str, ModelCapabilities] = dict(
            DEFAULT_CAPABILITIES if table is None else table
        )

    def register(self, model: str, conversational: bool) -> None:
        self._table[model] = ModelCapabilities(conversational=conversational)

    def get(self, model: str) -> ModelCapabilities:
        capabilities = self._table.get(model)
        if capabilities is None:
            capabilities = ModelCapabilities(conversational=looks_conversational(model))
        return capabilities

    def is_conversational(self, model: str) -> bool:
        return self.get(model).conversational
