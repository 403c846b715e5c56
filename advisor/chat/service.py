import base64
import binascii

from advisor.chat.agent import MortgageAdvisorAgent
from advisor.chat.exceptions import InvalidChatRequestError
from advisor.chat.models import (
    ChatReply,
    ChatRequest,
    ChatResponse,
    ConversationState,
    FilePayload,
)
from advisor.extraction.confirmation import format_salary_confirmation
from advisor.extraction.income import choose_monthly_income
from advisor.logging.logger import Log
from advisor.ocr.models import DocumentPayload
from advisor.pipeline.models import FailureReason, PipelineFailure, message_for
from advisor.pipeline.processor import SalaryDocumentPipeline


class ChatService:
    """Routes a chat request to the document pipeline or the advisor turn."""

    def __init__(self, pipeline: SalaryDocumentPipeline, agent: MortgageAdvisorAgent) -> None:
        self._pipeline = pipeline
        self._agent = agent

    def handle(self, request: ChatRequest) -> ChatResponse:
        """Handle one chat request.

        Raises:
            InvalidChatRequestError: if the attached file cannot be accepted.
        """
        state = request.resolved_state()
        if request.file is not None:
            return ChatResponse(message=self._handle_document(request.file, state))
        return ChatResponse(message=self._agent.run_turn(request.messages, state))

    def _handle_document(self, file: FilePayload, state: ConversationState) -> ChatReply:
        payload = DocumentPayload(
            data=decode_base64(file.data),
            mime_type=file.mime_type,
        )
        result = self._pipeline.extract_salary_from_document(payload)

        if isinstance(result, PipelineFailure):
            if result.reason is FailureReason.INVALID_INPUT:
                raise InvalidChatRequestError(result.message)
            return ChatReply(content=result.message, state=state)

        income = choose_monthly_income(result.extraction)
        Log.info(f"Salary document confirmed for review (income found: {income is not None})")
        extracted = state.extracted_data.model_copy(update={"income": income})
        return ChatReply(
            content=format_salary_confirmation(result.extraction, income),
            state=state.model_copy(update={"extracted_data": extracted}),
        )


def decode_base64(data: str) -> bytes:
    """Decode a base64 document body, accepting an optional ``data:`` URL prefix.

    Raises:
        InvalidChatRequestError: if the body is not valid base64.
    """
    body = data.partition(",")[2] if data.startswith("data:") else data
    try:
        return base64.b64decode("".join(body.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidChatRequestError(message_for(FailureReason.INVALID_INPUT)) from exc
