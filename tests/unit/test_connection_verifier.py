"""Tests for the Hugging Face connection check."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from cv_optimizer.error_handling.exceptions import ConfigurationError
from cv_optimizer.services.connection_verifier import verify_connection


def _token(value="hf_abcdefghijklmnop"):
    return lambda: value


def _missing_token():
    raise ConfigurationError("HUGGINGFACE_API_TOKEN is not set.")


class _HubError(Exception):
    def __init__(self, message, status_code):
        super().__init__(message)
        self.response = SimpleNamespace(status_code=status_code, text=message)


class TestVerifyConnection:
    """Test cases for verify_connection."""

    @pytest.mark.asyncio
    async def test_connected(self):
        # Arrange
        whoami = Mock(return_value={"name": "jane", "type": "user"})

        # Act
        diagnostics = await verify_connection(token_resolver=_token(), whoami=whoami)

        # Assert
        whoami.assert_called_once_with(token="hf_abcdefghijklmnop")
        assert diagnostics.connected is True
        assert diagnostics.token_found is True
        assert diagnostics.token_prefix == "hf_abcdefg..."
        assert diagnostics.user == "jane"
        assert diagnostics.error is None
        assert diagnostics.response_time_ms >= 0

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """A missing token is reported without contacting the Hub."""
        whoami = Mock()

        diagnostics = await verify_connection(token_resolver=_missing_token, whoami=whoami)

        whoami.assert_not_called()
        assert diagnostics.connected is False
        assert diagnostics.token_found is False
        assert diagnostics.token_prefix == ""
        assert diagnostics.error == "HUGGINGFACE_API_TOKEN is not set."

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        whoami = Mock(side_effect=_HubError("401 Client Error: Unauthorized", 401))

        diagnostics = await verify_connection(token_resolver=_token(), whoami=whoami)

        assert diagnostics.connected is False
        assert diagnostics.token_found is True
        assert "authentication failed" in diagnostics.error
        assert diagnostics.response_time_ms is not None

    @pytest.mark.asyncio
    async def test_network_failure(self):
        whoami = Mock(side_effect=ConnectionError("Name resolution failed"))

        diagnostics = await verify_connection(token_resolver=_token(), whoami=whoami)

        assert diagnostics.connected is False
        assert "Name resolution failed" in diagnostics.error

    @pytest.mark.asyncio
    async def test_results_are_not_cached(self):
        whoami = Mock(side_effect=[ConnectionError("down"), {"name": "jane"}])

        first = await verify_connection(token_resolver=_token(), whoami=whoami)
        second = await verify_connection(token_resolver=_token(), whoami=whoami)

        assert first.connected is False
        assert second.connected is True
