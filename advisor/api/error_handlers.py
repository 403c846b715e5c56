from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from advisor.chat.exceptions import InvalidChatRequestError
from advisor.logging.logger import Log
from advisor.pipeline.models import FailureReason

MALFORMED_REQUEST_MESSAGE = (
    "The request could not be read. Please check the message format and try again."
)


def _invalid_input(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(FailureReason.INVALID_INPUT), "message": message},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported as ``invalid_input`` without echoing the input."""
    errors = exc.errors()
    fields = sorted(
        {".".join(str(part) for part in err.get("loc", ()) if part != "body") for err in errors}
    )
    Log.warning(f"Rejected {request.url.path}: invalid fields {fields}")
    return _invalid_input(MALFORMED_REQUEST_MESSAGE)


async def handle_invalid_chat_request(
    request: Request, exc: InvalidChatRequestError
) -> JSONResponse:
    Log.warning(f"Rejected {request.url.path}: invalid document payload")
    return _invalid_input(str(exc))


async def handle_unknown_error(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "server_error",
            "message": "Something went wrong on our side. Please try again.",
        },
    )
