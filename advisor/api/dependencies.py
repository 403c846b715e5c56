from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from advisor.chat.service import ChatService


def get_chat_service(request: Request) -> ChatService:
    """Get the process-wide chat service from app state.

    Raises:
        HTTPException: 503 if the service was not initialised.
    """
    service = getattr(request.app.state, "chat_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Chat service is not available",
        )
    return service


ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
