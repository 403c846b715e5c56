from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ExtractedData(_WireModel):
    """Facts collected during the conversation, echoed back by the caller."""

    stay_years: float | None = Field(default=None, alias="stayYears")
    price: float | None = None
    down: float | None = None
    rent: float | None = None
    tenure_years: float = Field(default=25, alias="tenureYears")
    income: float | None = None


class ConversationState(_WireModel):
    extracted_data: ExtractedData = Field(default_factory=ExtractedData, alias="extractedData")
    last_calculation: dict[str, Any] | None = Field(default=None, alias="lastCalculation")


class ChatMessage(_WireModel):
    role: Literal["user", "assistant", "system"]
    content: str
    state: ConversationState | None = Field(default=None, alias="_state")


class FilePayload(_WireModel):
    data: str = Field(repr=False)
    mime_type: str = Field(alias="mimeType")


class ChatRequest(_WireModel):
    messages: list[ChatMessage]
    file: FilePayload | None = None
    state: ConversationState | None = None

    def resolved_state(self) -> ConversationState:
        """Explicit ``state`` wins; otherwise the last message carrying ``_state``."""
        if self.state is not None:
            return self.state
        for message in reversed(self.messages):
            if message.state is not None:
                return message.state
        return ConversationState()


class ChatReply(_WireModel):
    role: Literal["assistant"] = "assistant"
    content: str
    state: ConversationState | None = Field(default=None, alias="_state")


class ChatResponse(_WireModel):
    message: ChatReply


class ErrorResponse(_WireModel):
    error: str
    message: str
