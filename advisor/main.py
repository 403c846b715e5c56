from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from advisor.api.error_handlers import (
    handle_invalid_chat_request,
    handle_unknown_error,
    handle_validation_error,
)
from advisor.api.routes import router
from advisor.chat.agent import MortgageAdvisorAgent
from advisor.chat.exceptions import InvalidChatRequestError
from advisor.chat.service import ChatService
from advisor.config.settings import Settings
from advisor.llm.factory import LLMClientFactory
from advisor.logging.logger import Log
from advisor.pipeline.processor import build_pipeline


def build_chat_service(settings: Settings) -> ChatService:
    """Build the chat service with all required adapters."""
    llm_client = LLMClientFactory.create(settings)
    pipeline = build_pipeline(settings, llm_client)
    agent = MortgageAdvisorAgent(
        client=llm_client,
        model=settings.chat_model_name,
        temperature=settings.chat_temperature,
        timeout_seconds=settings.chat_timeout_seconds,
    )
    return ChatService(pipeline=pipeline, agent=agent)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the API application; resources live for the lifespan of the app."""
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.info(
            f"Starting mortgage advisor ({settings.app_env}, provider {settings.llm_provider})"
        )
        app.state.chat_service = build_chat_service(settings)
        yield
        app.state.chat_service = None
        Log.info("Mortgage advisor stopped")

    app = FastAPI(title="UAE Mortgage Advisor", version="0.1.0", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(InvalidChatRequestError, handle_invalid_chat_request)
    app.add_exception_handler(Exception, handle_unknown_error)
    app.include_router(router)
    return app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
