"""Readiness probe reporting the configured model and whether its credential is set."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from lyly_assistant.configuration import Settings

from ..dependencies import get_settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Model configuration readiness")
async def readiness(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    # "degraded": the app is up but every generation call will fail on the missing key.
    configured = bool(settings.api_key)
    return {
        "status": "ok" if configured else "degraded",
        "provider": settings.llm_provider,
        "model": settings.llm_model,
        "credentialConfigured": configured,
    }
