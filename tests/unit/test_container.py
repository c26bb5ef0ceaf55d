"""Tests for the dependency injection container."""

from unittest.mock import patch

import pytest

from cv_optimizer.agents.cv_writer_agent import CVWriterAgent
from cv_optimizer.agents.job_analyzer_agent import JobAnalyzerAgent
from cv_optimizer.core.container import ContainerSingleton, get_container
from cv_optimizer.error_handling.exceptions import ConfigurationError
from cv_optimizer.services.file_parser_service import FileParserService
from cv_optimizer.services.llm_service import LLMService

TOKEN_VARS = (
    "HUGGINGFACE_API_TOKEN",
    "NEXT_PUBLIC_HUGGINGFACE_API_TOKEN",
    "HF_TOKEN",
    "HF_API_TOKEN",
)


@pytest.fixture
def clear_tokens(monkeypatch):
    for name in TOKEN_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def inference_client():
    with patch("cv_optimizer.services.llm.huggingface_client.InferenceClient") as client_class:
        yield client_class


class TestContainerSingleton:
    """Test cases for the container singleton."""

    def test_same_instance(self):
        assert get_container() is get_container()

    def test_reset_creates_new_instance(self):
        first = get_container()

        ContainerSingleton.reset_instance()

        assert get_container() is not first


class TestContainerProviders:
    """Test cases for provider wiring."""

    def test_llm_stack_uses_resolved_token(self, monkeypatch, clear_tokens, inference_client):
        # Arrange
        monkeypatch.setenv("HF_TOKEN", "hf_container_token")
        container = get_container()

        # Act
        service = container.llm_service()

        # Assert
        assert isinstance(service, LLMService)
        assert service is container.llm_service()
        assert inference_client.call_args.kwargs["token"] == "hf_container_token"

    def test_agents_share_services(self, monkeypatch, inference_client):
        monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "hf_container_token")
        container = get_container()

        job_analyzer = container.job_analyzer_agent()
        cv_writer = container.cv_writer_agent()

        assert isinstance(job_analyzer, JobAnalyzerAgent)
        assert isinstance(cv_writer, CVWriterAgent)
        assert job_analyzer.llm_service is cv_writer.llm_service
        assert job_analyzer.template_manager is cv_writer.template_manager

    def test_missing_token_fails_only_when_model_is_needed(self, clear_tokens):
        """Services that never call a model resolve without a token."""
        container = get_container()

        assert isinstance(container.file_parser(), FileParserService)
        assert container.template_manager().list_templates()
        with pytest.raises(ConfigurationError):
            container.llm_service()
