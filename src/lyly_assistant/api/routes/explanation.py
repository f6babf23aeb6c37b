"""Endpoint explaining the correct answer of a multiple-choice item."""

from fastapi import APIRouter, Depends, status

from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient

from ..dependencies import get_generation_client, get_settings
from ..errors import failure
from ..schemas.explanation import ExplanationRequest, ExplanationResponse
from ..services.explanation_service import explain_question

router = APIRouter(prefix="/explanation", tags=["explanation"])


@router.post(
    "",
    response_model=ExplanationResponse,
    status_code=status.HTTP_200_OK,
    summary="Explain why an answer is correct",
)
async def explain(
    request: ExplanationRequest,
    client: GenerationClient = Depends(get_generation_client),
    settings: Settings = Depends(get_settings),
) -> ExplanationResponse:
    try:
        text = await explain_question(request.question, client, settings)
    except Exception as exc:
        raise failure(exc, "answer explanation") from exc
    return ExplanationResponse(explanation=text)
