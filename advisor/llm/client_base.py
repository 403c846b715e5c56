from abc import ABC, abstractmethod

from advisor.llm.models import AssistantTurn


class BaseLLMClient(ABC):
    """Contract for provider-specific language-model clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_mode: bool = False,
        timeout_seconds: float | None = None,
    ) -> str:
        """Return provider response as plain text."""

    @abstractmethod
    def read_document(
        self,
        *,
        model: str,
        instruction: str,
        data: bytes,
        mime_type: str,
        timeout_seconds: float | None = None,
    ) -> str:
        """Send a document to a vision model and return its text answer."""

    @abstractmethod
    def create_tool_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        tools: list[dict[str, object]],
        timeout_seconds: float | None = None,
    ) -> AssistantTurn:
        """Run one chat turn with function tools available to the model."""
