"""Endpoint for structured quiz generation."""

from fastapi import APIRouter, Depends, status

from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient

from ..dependencies import get_generation_client, get_settings
from ..errors import failure
from ..schemas.quiz import QuizRequest, QuizResponse
from ..services.quiz_service import generate_quiz_for_request

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post(
    "",
    response_model=QuizResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Generate a Bloom-levelled quiz from a document",
)
async def create_quiz(
    request: QuizRequest,
    client: GenerationClient = Depends(get_generation_client),
    settings: Settings = Depends(get_settings),
) -> QuizResponse:
    """Generate quiz items whose levels follow the requested counts."""
    try:
        result = await generate_quiz_for_request(request, client, settings)
    except Exception as exc:
        raise failure(exc, "quiz generation") from exc
    return QuizResponse(questions=result.questions)
