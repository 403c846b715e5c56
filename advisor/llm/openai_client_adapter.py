import base64
import json
from typing import Any

import httpx
import openai

from advisor.llm.client_base import BaseLLMClient
from advisor.llm.exceptions import (
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
)
from advisor.llm.models import AssistantTurn, ToolCall


class OpenAIClientAdapter(BaseLLMClient):
    """Language-model client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        require_api_key: bool = True,
    ) -> None:
        self._configured = bool(api_key) or not require_api_key
        self._client = openai.OpenAI(
            api_key=api_key or "unset",
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        options: dict[str, Any] = {}
        if json_mode:
            options["response_format"] = {"type": "json_object"}
        response = self._create(
            timeout_seconds,
            model=model,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            **options,
        )
        return self._first_content(response)

    def read_document(
        self,
        *,
        model: str,
        instruction: str,
        data: bytes,
        mime_type: str,
        timeout_seconds: float | None = None,
    ) -> str:
        data_url = f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
        if mime_type == "application/pdf":
            attachment: dict[str, Any] = {
                "type": "file",
                "file": {"filename": "document.pdf", "file_data": data_url},
            }
        else:
            attachment = {"type": "image_url", "image_url": {"url": data_url}}
        response = self._create(
            timeout_seconds,
            model=model,
            temperature=0.0,
            messages=[
                {
                    "role": "user",
                    "content": [{"type": "text", "text": instruction}, attachment],
                }
            ],
        )
        if not response.choices:
            raise LLMResponseError("AI returned no choices")
        return response.choices[0].message.content or ""

    def create_tool_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        tools: list[dict[str, object]],
        timeout_seconds: float | None = None,
    ) -> AssistantTurn:
        options: dict[str, Any] = {"tools": tools} if tools else {}
        response = self._create(
            timeout_seconds,
            model=model,
            temperature=temperature,
            messages=messages,
            **options,
        )
        if not response.choices:
            raise LLMResponseError("AI returned no choices")
        message = response.choices[0].message
        tool_calls = [self._to_tool_call(call) for call in message.tool_calls or []]
        content = message.content or ""
        if not content and not tool_calls:
            raise LLMResponseError("AI returned empty response")
        return AssistantTurn(content=content, tool_calls=tool_calls)

    def _create(self, timeout_seconds: float | None, **kwargs: Any) -> Any:
        if not self._configured:
            raise LLMUnavailableError("AI provider credential is not configured")
        if timeout_seconds is not None:
            kwargs["timeout"] = timeout_seconds
        try:
            return self._client.chat.completions.create(**kwargs)
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise LLMTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise LLMUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LLMUnavailableError(f"AI provider API error: {exc}") from exc

    @staticmethod
    def _first_content(response: Any) -> str:
        if not response.choices:
            raise LLMResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LLMResponseError("AI returned empty response")
        return content

    @staticmethod
    def _to_tool_call(call: Any) -> ToolCall:
        try:
            arguments = json.loads(call.function.arguments or "{}")
        except json.JSONDecodeError as exc:
            raise LLMResponseError(f"Invalid tool arguments for {call.function.name}") from exc
        if not isinstance(arguments, dict):
            raise LLMResponseError(f"Tool arguments for {call.function.name} must be an object")
        return ToolCall(id=call.id, name=call.function.name, arguments=arguments)
