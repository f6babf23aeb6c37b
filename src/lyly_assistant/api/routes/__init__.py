"""Routers exposed under /api."""

from fastapi import APIRouter

from . import explanation, health, quiz, suggestions

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(quiz.router)
api_router.include_router(explanation.router)
api_router.include_router(suggestions.router)
