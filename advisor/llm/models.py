from dataclasses import dataclass, field


@dataclass(frozen=True)
class ToolCall:
    """A function call requested by the chat model."""

    id: str
    name: str
    arguments: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class AssistantTurn:
    """Chat model output: plain content, tool calls, or both."""

    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)
