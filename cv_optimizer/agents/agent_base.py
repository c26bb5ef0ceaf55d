"""Base classes for agents."""

from abc import ABC
from typing import Any, Optional

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager


class AgentBase(ABC):
    """Abstract base class for all agents.

    Agents render a named prompt, send it through the LLM service and turn the
    reply into a domain model. They hold no per-request state, so one instance
    serves every request.
    """

    def __init__(
        self,
        name: str,
        description: str,
        llm_service: LLMService,
        template_manager: ContentTemplateManager,
        settings: Optional[AppConfig] = None,
    ):
        """Initializes the agent."""
        self.name = name
        self.description = description
        self.llm_service = llm_service
        self.template_manager = template_manager
        self.settings = settings or llm_service.settings
        self.logger = get_structured_logger(name)
        self.logger.info(f"Agent '{self.name}' initialized.")

    def _render_prompt(self, template_name: str, **variables: Any) -> str:
        return self.template_manager.format_prompt(template_name, **variables)

    async def _generate(self, prompt: str, max_tokens: int) -> str:
        """Send a rendered prompt through the model fallback chain."""
        return await self.llm_service.generate_text(prompt, max_tokens=max_tokens)
