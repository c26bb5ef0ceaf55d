# tests/conftest.py
import os

# Must be set before the package configures logging
os.environ["APP_ENV"] = "testing"

import pytest
from unittest.mock import AsyncMock, Mock

from cv_optimizer.config.logging_config import setup_logging
from cv_optimizer.config.settings import AppConfig
from cv_optimizer.core.container import ContainerSingleton
from cv_optimizer.services.llm_service import LLMService
from cv_optimizer.templates.content_templates import ContentTemplateManager

# Ensure logging is initialized before any tests run
setup_logging()


@pytest.fixture(autouse=True)
def reset_container():
    """Give every test a fresh dependency container."""
    ContainerSingleton.reset_instance()
    yield
    ContainerSingleton.reset_instance()


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def template_manager(app_config):
    return ContentTemplateManager(prompt_directory=app_config.paths.prompts_directory)


@pytest.fixture
def mock_llm_service(app_config):
    """LLM service double whose generate_text is an AsyncMock."""
    service = Mock(spec=LLMService)
    service.settings = app_config
    service.generate_text = AsyncMock()
    return service


@pytest.fixture
def sample_job_description():
    return (
        "Senior Backend Engineer at a fintech startup.\n"
        "Requirements:\n"
        "- 5+ years of Python development experience\n"
        "- Experience with AWS and Docker in production\n"
        "- Strong communication and leadership skills\n"
        "Kubernetes knowledge is required."
    )


@pytest.fixture
def sample_cv():
    return (
        "Jane Doe\n"
        "jane.doe@example.com | +1 555-123-4567\n"
        "Experience: Backend developer at Acme Corp, building Python services on AWS.\n"
        "Education: BSc Computer Science, State University"
    )
