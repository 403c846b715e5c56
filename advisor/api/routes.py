from fastapi import APIRouter, status
from fastapi.concurrency import run_in_threadpool

from advisor.api.dependencies import ChatServiceDep
from advisor.chat.models import ChatRequest, ChatResponse, ErrorResponse

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    tags=["chat"],
    summary="Advisor chat turn or salary document upload",
)
async def chat(request: ChatRequest, service: ChatServiceDep) -> ChatResponse:
    """Run one chat turn.

    With ``file`` attached the document goes through the privacy pipeline and
    the reply asks the user to confirm the extracted salary. Without it the
    advisor model answers, calling the finance tools when it has enough data.
    """
    return await run_in_threadpool(service.handle, request)
