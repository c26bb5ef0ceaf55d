"""Module for the dependency injection container."""

import threading
from typing import Optional

from dependency_injector import containers, providers

from cv_optimizer.agents.cv_analyzer_agent import CVAnalyzerAgent
from cv_optimizer.agents.cv_info_extractor_agent import CVInfoExtractorAgent
from cv_optimizer.agents.cv_writer_agent import CVWriterAgent
from cv_optimizer.agents.job_analyzer_agent import JobAnalyzerAgent
from cv_optimizer.agents.question_generator_agent import QuestionGeneratorAgent
from cv_optimizer.config.logging_config import get_logger
from cv_optimizer.config.settings import get_config
from cv_optimizer.services.file_parser_service import FileParserService
from cv_optimizer.services.llm.huggingface_client import HuggingFaceClient
from cv_optimizer.services.llm.model_capabilities import ModelCapabilityRegistry
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.services.model_probe_service import ModelProbeService
from cv_optimizer.services.token_resolver import resolve_api_token
from cv_optimizer.templates.content_templates import ContentTemplateManager

logger = get_logger(__name__)


class Container(
    containers.DeclarativeContainer
):  # pylint: disable=c-extension-no-member
    """Dependency injection container for the application.

    Use get_container() instead of instantiating it directly. Every provider
    here yields immutable configuration or a stateless service.
    """

    config = providers.Singleton(get_config)  # pylint: disable=c-extension-no-member

    template_manager = providers.Singleton(  # pylint: disable=c-extension-no-member
        ContentTemplateManager,
        prompt_directory=config.provided.paths.prompts_directory,
    )

    model_capabilities = providers.Singleton(  # pylint: disable=c-extension-no-member
        ModelCapabilityRegistry,
    )

    # Resolved when the client is first built, so routes that never reach
    # the model work without a token
    api_key = providers.Callable(resolve_api_token)  # pylint: disable=c-extension-no-member

    llm_client = providers.Singleton(  # pylint: disable=c-extension-no-member
        HuggingFaceClient,
        api_key=api_key,
        model_name=config.provided.huggingface.primary_model,
        capabilities=model_capabilities,
        timeout=config.provided.huggingface.request_timeout,
        temperature=config.provided.huggingface.temperature,
        top_p=config.provided.huggingface.top_p,
    )

    llm_service = providers.Singleton(  # pylint: disable=c-extension-no-member
        LLMService,
        settings=config,
        llm_client=llm_client,
    )

    file_parser = providers.Singleton(  # pylint: disable=c-extension-no-member
        FileParserService,
        max_file_size_bytes=config.provided.uploads.max_file_size_bytes,
    )

    model_probe = providers.Factory(  # pylint: disable=c-extension-no-member
        ModelProbeService,
        llm_client=llm_client,
    )

    # Agent providers
    job_analyzer_agent = providers.Singleton(  # pylint: disable=c-extension-no-member
        JobAnalyzerAgent,
        llm_service=llm_service,
        template_manager=template_manager,
        settings=config,
    )

    cv_analyzer_agent = providers.Singleton(  # pylint: disable=c-extension-no-member
        CVAnalyzerAgent,
        llm_service=llm_service,
        template_manager=template_manager,
        settings=config,
    )

    cv_info_extractor_agent = providers.Singleton(  # pylint: disable=c-extension-no-member
        CVInfoExtractorAgent,
        llm_service=llm_service,
        template_manager=template_manager,
        settings=config,
    )

    question_generator_agent = providers.Singleton(  # pylint: disable=c-extension-no-member
        QuestionGeneratorAgent,
        llm_service=llm_service,
        template_manager=template_manager,
        settings=config,
    )

    cv_writer_agent = providers.Singleton(  # pylint: disable=c-extension-no-member
        CVWriterAgent,
        llm_service=llm_service,
        template_manager=template_manager,
        settings=config,
    )


class ContainerSingleton:
    """Thread-safe singleton for the DI container."""

    _instance: Optional[Container] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> Container:
        """Get the singleton instance of the container."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = Container()
                    logger.debug("Dependency container created")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        with cls._lock:
            cls._instance = None


def get_container() -> Container:
    """Returns the singleton instance of the DI container."""
    return ContainerSingleton.get_instance()
