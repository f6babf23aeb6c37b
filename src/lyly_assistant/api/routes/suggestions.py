"""Endpoint suggesting follow-up questions for a chat."""

from fastapi import APIRouter, Depends, status

from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient

from ..dependencies import get_generation_client, get_settings
from ..errors import failure
from ..schemas.suggestions import QuickRepliesRequest, QuickRepliesResponse
from ..services.suggestion_service import quick_replies

router = APIRouter(prefix="/quick-replies", tags=["chat"])


@router.post(
    "",
    response_model=QuickRepliesResponse,
    status_code=status.HTTP_200_OK,
    summary="Suggest follow-up questions after the assistant's last reply",
)
async def create_quick_replies(
    request: QuickRepliesRequest,
    client: GenerationClient = Depends(get_generation_client),
    settings: Settings = Depends(get_settings),
) -> QuickRepliesResponse:
    try:
        suggestions = await quick_replies(request.chat_history, client, settings)
    except Exception as exc:
        raise failure(exc, "quick reply generation") from exc
    return QuickRepliesResponse(suggestions=suggestions)
