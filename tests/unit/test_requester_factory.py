"""Tests for RequesterFactory."""

from unittest.mock import patch

import pytest

from policy_compare.comparison.example_client_adapter import ExampleClientAdapter
from policy_compare.comparison.factory import RequesterFactory
from policy_compare.comparison.requester import ComparisonRequester
from policy_compare.config.settings import Settings


class TestRequesterFactory:
    def test_creates_example_adapter_for_example_provider(self) -> None:
        requester = RequesterFactory.create(Settings(comparison_provider="example"))
        assert isinstance(requester, ComparisonRequester)
        assert isinstance(requester._client, ExampleClientAdapter)

    def test_uses_gemini_openai_endpoint_by_default(self) -> None:
        settings = Settings(comparison_gemini_api_key="gemini-key")
        with patch("policy_compare.comparison.factory.OpenAIClientAdapter") as mock_adapter:
            requester = RequesterFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="gemini-key",
            timeout_seconds=120,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )
        assert requester._model == "gemini-2.5-flash"

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            comparison_provider="openai",
            comparison_openai_api_key="openai-key",
            comparison_openai_model_name="gpt-4o",
            comparison_openai_timeout_seconds=42,
        )
        with patch("policy_compare.comparison.factory.OpenAIClientAdapter") as mock_adapter:
            requester = RequesterFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )
        assert requester._model == "gpt-4o"

    def test_provider_name_is_case_insensitive(self) -> None:
        settings = Settings(comparison_provider="OpenRouter", comparison_openrouter_api_key="k")
        with patch("policy_compare.comparison.factory.OpenAIClientAdapter") as mock_adapter:
            RequesterFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            comparison_provider="openai_compatible",
            comparison_openai_compatible_api_key="k",
            comparison_openai_compatible_model_name="m",
            comparison_openai_compatible_base_url="https://example.com/v1",
        )
        with patch("policy_compare.comparison.factory.OpenAIClientAdapter") as mock_adapter:
            RequesterFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=120,
            base_url="https://example.com/v1",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(comparison_provider="openai_compatible")
        with pytest.raises(ValueError, match="comparison_openai_compatible_base_url"):
            RequesterFactory.create(settings)

    def test_unknown_provider_raises(self) -> None:
        settings = Settings(comparison_provider="nonexistent")
        with pytest.raises(ValueError, match="Unknown comparison provider"):
            RequesterFactory.create(settings)

    def test_passes_temperature(self) -> None:
        settings = Settings(comparison_provider="openai", comparison_temperature=0.1)
        with patch("policy_compare.comparison.factory.OpenAIClientAdapter"):
            requester = RequesterFactory.create(settings)
        assert requester._temperature == 0.1
