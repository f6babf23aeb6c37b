"""Application factory for the Lyly Assistant FastAPI backend."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from lyly_assistant import __version__
from lyly_assistant.configuration import Settings, settings as default_settings
from lyly_assistant.llm.client import GenerationClient, build_generation_client
from lyly_assistant.logs import configure_logging

from .errors import install_error_handlers
from .routes import api_router


def create_app(
    settings: Optional[Settings] = None,
    generation_client: Optional[GenerationClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    The generation client is built once from ``settings`` unless one is
    supplied (tests pass a stub).
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, debug=settings.debug)

    app = FastAPI(
        title="Lyly Assistant API",
        description="Gemini-backed study tools: structured quizzes, explanations and chat helpers.",
        version=__version__,
    )
    app.state.settings = settings
    app.state.generation_client = generation_client or build_generation_client(settings)

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    install_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Lyly Assistant Backend is running!"

    return app
