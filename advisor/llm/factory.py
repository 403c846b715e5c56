from typing import ClassVar

from advisor.config.settings import Settings
from advisor.llm.client_base import BaseLLMClient
from advisor.llm.example_client_adapter import ExampleClientAdapter
from advisor.llm.openai_client_adapter import OpenAIClientAdapter


class LLMClientFactory:
    """Creates the configured language-model client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseLLMClient:
        """Create a configured client from application settings."""
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key,
            timeout_seconds=cls._resolve_timeout_seconds(settings),
            base_url=cls._resolve_base_url(provider, settings),
            require_api_key=provider not in cls.KEYLESS_PROVIDERS,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.llm_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.llm_base_url.strip()
            if not url:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.llm_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_timeout_seconds(cls, settings: Settings) -> int:
        return max(
            settings.ocr_timeout_seconds,
            settings.extraction_timeout_seconds,
            settings.chat_timeout_seconds,
        )
