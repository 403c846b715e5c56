"""One advisor turn: chat model with finance tools, arithmetic done locally."""

from pathlib import Path
from typing import Any

from advisor.chat.models import ChatMessage, ChatReply, ConversationState, ExtractedData
from advisor.chat.prompt_loader import load_summary_template, load_system_prompt
from advisor.extraction.confirmation import format_amount
from advisor.finance.emi import DEFAULT_RATE_ANNUAL, MAX_LTV, UPFRONT_COST_RATE
from advisor.finance.models import LtvIssue
from advisor.finance.tools import (
    CALCULATE_MORTGAGE,
    TOOL_DEFINITIONS,
    explain_calculation,
    format_aed,
    run_tool,
)
from advisor.llm.client_base import BaseLLMClient
from advisor.llm.exceptions import LLMError
from advisor.logging.logger import Log

APOLOGY_MESSAGE = (
    "I'm having trouble reaching the advisor service right now. "
    "Please try again in a moment."
)

CLARIFY_MESSAGE = "Could you tell me a bit more about what you'd like to calculate?"

_FIELD_LABELS: dict[str, str] = {
    "stayYears": "how many years you plan to stay in the UAE",
    "price": "the property price",
    "downPayment": "your down payment",
    "rent": "your monthly rent",
    "tenureYears": "the loan tenure",
}


class MortgageAdvisorAgent:
    """Runs a single conversation turn against the chat model.

    The model decides when to call ``calculate_mortgage`` or
    ``explain_calculation``; the tools run locally and the model is asked once
    more to phrase the result. Conversation state is returned to the caller,
    never stored here.
    """

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.2,
        timeout_seconds: float | None = None,
        system_prompt_path: Path | None = None,
        summary_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._timeout_seconds = timeout_seconds
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._summary_template = load_summary_template(summary_template_path)

    def run_turn(self, messages: list[ChatMessage], state: ConversationState) -> ChatReply:
        conversation = self._build_messages(messages, state)
        Log.info(f"Advisor turn started: {len(messages)} messages")
        try:
            turn = self._client.create_tool_completion(
                model=self._model,
                temperature=self._temperature,
                messages=conversation,
                tools=TOOL_DEFINITIONS,
                timeout_seconds=self._timeout_seconds,
            )
        except LLMError as exc:
            Log.error(f"Advisor model call failed: {type(exc).__name__}")
            return ChatReply(content=APOLOGY_MESSAGE, state=state)

        if not turn.tool_calls:
            return ChatReply(content=turn.content, state=state)

        call = turn.tool_calls[0]
        Log.info(f"Advisor requested tool {call.name}")
        try:
            result = run_tool(call.name, call.arguments, state.last_calculation)
        except ValueError:
            Log.warning(f"Advisor requested unknown tool {call.name}")
            return ChatReply(content=turn.content or CLARIFY_MESSAGE, state=state)

        if isinstance(result, str):
            return ChatReply(content=result, state=state)
        if "error" in result:
            return ChatReply(content=self._missing_inputs_message(result), state=state)

        new_state = self._remember(state, result) if call.name == CALCULATE_MORTGAGE else state
        return ChatReply(content=self._phrase(conversation, result), state=new_state)

    def _build_messages(
        self, messages: list[ChatMessage], state: ConversationState
    ) -> list[dict[str, object]]:
        conversation: list[dict[str, object]] = [
            {"role": "system", "content": self._system_prompt}
        ]
        income = state.extracted_data.income
        if income is not None:
            conversation.append(
                {
                    "role": "system",
                    "content": (
                        "The user's confirmed monthly income is "
                        f"{format_amount('AED', income)}."
                    ),
                }
            )
        for message in messages:
            role = "assistant" if message.role == "assistant" else "user"
            conversation.append({"role": role, "content": message.content})
        return conversation

    def _phrase(
        self, conversation: list[dict[str, object]], calculation: dict[str, Any]
    ) -> str:
        summary = self._build_summary(calculation)
        try:
            turn = self._client.create_tool_completion(
                model=self._model,
                temperature=self._temperature,
                messages=[*conversation, {"role": "user", "content": summary}],
                tools=[],
                timeout_seconds=self._timeout_seconds,
            )
        except LLMError as exc:
            Log.warning(f"Advisor formatting call failed: {type(exc).__name__}")
            return explain_calculation(calculation)
        return turn.content or explain_calculation(calculation)

    def _build_summary(self, calculation: dict[str, Any]) -> str:
        emi = calculation["emi"]
        recommendation = calculation["recommendation"]
        inputs = calculation["inputs"]

        price = inputs["price"]
        down = inputs["downPayment"]
        min_down = price * (1 - MAX_LTV)
        actual_down = max(down, min_down)
        total_months = int(inputs["tenureYears"] * 12)
        total_paid = emi["monthlyEmi"] * total_months
        adjustment_line = ""
        if str(LtvIssue.DOWN_PAYMENT_ADJUSTED) in emi["issues"]:
            adjustment_line = (
                f"- ADJUSTED Down Payment (to meet {1 - MAX_LTV:.0%} minimum): "
                f"{format_aed(actual_down)} ({actual_down / price:.1%})\n"
            )

        return self._summary_template.format(
            recommendation=recommendation["recommendation"].upper(),
            rationale=recommendation["rationale"],
            rate=f"{DEFAULT_RATE_ANNUAL:.1%}",
            max_ltv=f"{MAX_LTV:.0%}",
            min_down_pct=f"{1 - MAX_LTV:.0%}",
            min_down=format_aed(min_down),
            upfront_rate=f"{UPFRONT_COST_RATE:.0%}",
            price=format_aed(price),
            down_input=format_aed(down),
            down_input_pct=f"{down / price:.1%}",
            adjustment_line=adjustment_line,
            actual_down=format_aed(actual_down),
            actual_down_pct=f"{actual_down / price:.1%}",
            loan=format_aed(emi["loanAmount"]),
            upfront=format_aed(emi["upfrontCostEstimate"]),
            tenure=f"{inputs['tenureYears']:g}",
            emi=format_aed(emi["monthlyEmi"]),
            principal=format_aed(emi["monthlyPrincipalPortion"]),
            interest=format_aed(emi["monthlyInterestPortion"]),
            rent=format_aed(inputs["rent"]),
            stay=f"{inputs['stayYears']:g}",
            total_months=total_months,
            total_paid=format_aed(total_paid),
            total_interest=format_aed(total_paid - emi["loanAmount"]),
            total_cost=format_aed(actual_down + emi["upfrontCostEstimate"] + total_paid),
        )

    @staticmethod
    def _remember(state: ConversationState, calculation: dict[str, Any]) -> ConversationState:
        inputs = calculation["inputs"]
        extracted = ExtractedData(
            stay_years=inputs["stayYears"],
            price=inputs["price"],
            down=inputs["downPayment"],
            rent=inputs["rent"],
            tenure_years=inputs["tenureYears"],
            income=state.extracted_data.income,
        )
        return ConversationState(extracted_data=extracted, last_calculation=calculation)

    @staticmethod
    def _missing_inputs_message(result: dict[str, Any]) -> str:
        fields: list[str] = []
        for detail in result.get("details", []):
            loc = detail.get("loc") or ()
            name = str(loc[-1]) if loc else ""
            label = _FIELD_LABELS.get(name)
            if label and label not in fields:
                fields.append(label)
        if not fields:
            return CLARIFY_MESSAGE
        return "I need a bit more information to run the numbers: " + ", ".join(fields) + "."

