"""Service helpers around the quiz generation pipeline."""

from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient
from lyly_assistant.quiz import QuizResult, build_plan, generate_quiz

from ..schemas.quiz import QuizRequest


async def generate_quiz_for_request(
    request: QuizRequest,
    client: GenerationClient,
    settings: Settings,
) -> QuizResult:
    """Plan the request and run it through the model using deployment settings."""
    plan = build_plan(
        document_name=request.file_name,
        document_text=request.file_content,
        level_counts=request.level_counts,
        question_type=request.quiz_type,
        content_options=request.advanced_options,
        max_questions=settings.quiz_max_questions,
    )
    return await generate_quiz(
        plan,
        client,
        language=settings.output_language,
        strict=settings.quiz_strict_level_counts,
    )
