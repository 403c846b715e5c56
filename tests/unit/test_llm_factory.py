from unittest.mock import patch

import pytest

from advisor.config.settings import Settings
from advisor.llm.example_client_adapter import ExampleClientAdapter
from advisor.llm.factory import LLMClientFactory
from advisor.llm.openai_client_adapter import OpenAIClientAdapter


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)  # type: ignore[call-arg]


class TestLLMClientFactory:
    def test_example_provider(self) -> None:
        client = LLMClientFactory.create(_settings(llm_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_openai_provider(self) -> None:
        with patch("advisor.llm.factory.OpenAIClientAdapter") as adapter_cls:
            LLMClientFactory.create(_settings(llm_provider="openai", llm_api_key="k"))
        kwargs = adapter_cls.call_args.kwargs
        assert kwargs["api_key"] == "k"
        assert kwargs["base_url"] is None
        assert kwargs["require_api_key"] is True

    def test_openai_provider_builds_real_adapter(self) -> None:
        client = LLMClientFactory.create(_settings(llm_provider="openai", llm_api_key="k"))
        assert isinstance(client, OpenAIClientAdapter)

    def test_known_compatible_provider_uses_default_base_url(self) -> None:
        with patch("advisor.llm.factory.OpenAIClientAdapter") as adapter_cls:
            LLMClientFactory.create(_settings(llm_provider="groq", llm_api_key="k"))
        assert adapter_cls.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_base_url_override(self) -> None:
        with patch("advisor.llm.factory.OpenAIClientAdapter") as adapter_cls:
            LLMClientFactory.create(
                _settings(llm_provider="gemini", llm_base_url="https://proxy.local/v1")
            )
        assert adapter_cls.call_args.kwargs["base_url"] == "https://proxy.local/v1"

    def test_ollama_is_keyless(self) -> None:
        with patch("advisor.llm.factory.OpenAIClientAdapter") as adapter_cls:
            LLMClientFactory.create(_settings(llm_provider="ollama"))
        assert adapter_cls.call_args.kwargs["require_api_key"] is False

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="llm_base_url is required"):
            LLMClientFactory.create(_settings(llm_provider="openai_compatible"))

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            LLMClientFactory.create(_settings(llm_provider="nope"))

    def test_client_timeout_covers_every_stage(self) -> None:
        with patch("advisor.llm.factory.OpenAIClientAdapter") as adapter_cls:
            LLMClientFactory.create(
                _settings(
                    llm_api_key="k",
                    ocr_timeout_seconds=10,
                    extraction_timeout_seconds=15,
                    chat_timeout_seconds=45,
                )
            )
        assert adapter_cls.call_args.kwargs["timeout_seconds"] == 45
