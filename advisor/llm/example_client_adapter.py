"""Example language-model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLLMClient and register the provider in LLMClientFactory.
"""

import json
from typing import ClassVar

from advisor.llm.client_base import BaseLLMClient
from advisor.llm.models import AssistantTurn


class ExampleClientAdapter(BaseLLMClient):
    """Example adapter that returns fixed, valid responses.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_DOCUMENT_TEXT: ClassVar[str] = (
        "SALARY CERTIFICATE\n"
        "Employee Name: Jane Doe\n"
        "IBAN: AE070331234567890123456\n"
        "Basic Salary: AED 12,000\n"
        "Housing Allowance: AED 5,000\n"
        "Transportation Allowance: AED 1,500\n"
        "Net Salary: AED 18,500\n"
    )

    DEFAULT_EXTRACTION: ClassVar[dict[str, object]] = {
        "basicSalary": 12000,
        "housingAllowance": 5000,
        "transportationAllowance": 1500,
        "otherAllowances": [],
        "netSalary": 18500,
        "currency": "AED",
    }

    DEFAULT_CHAT_REPLY: ClassVar[str] = (
        "Happy to help. How many years do you plan to stay in the UAE?"
    )

    def __init__(
        self,
        *,
        document_text: str | None = None,
        extraction_response: str | None = None,
        chat_reply: str | None = None,
    ) -> None:
        self._document_text = (
            self.DEFAULT_DOCUMENT_TEXT if document_text is None else document_text
        )
        self._extraction_response = (
            json.dumps(self.DEFAULT_EXTRACTION)
            if extraction_response is None
            else extraction_response
        )
        self._chat_reply = self.DEFAULT_CHAT_REPLY if chat_reply is None else chat_reply

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
        _ = model, temperature, system_prompt, user_prompt, json_mode, timeout_seconds
        return self._extraction_response

    def read_document(
        self,
        *,
        model: str,
        instruction: str,
        data: bytes,
        mime_type: str,
        timeout_seconds: float | None = None,
    ) -> str:
        _ = model, instruction, data, mime_type, timeout_seconds
        return self._document_text

    def create_tool_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        tools: list[dict[str, object]],
        timeout_seconds: float | None = None,
    ) -> AssistantTurn:
        _ = model, temperature, messages, tools, timeout_seconds
        return AssistantTurn(content=self._chat_reply)
