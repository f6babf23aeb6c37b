"""FastAPI dependencies exposing the per-app settings and generation client."""

from fastapi import Request

from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_generation_client(request: Request) -> GenerationClient:
    return request.app.state.generation_client
