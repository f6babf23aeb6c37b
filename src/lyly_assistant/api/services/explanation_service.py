"""Service helpers for answer explanations."""

from lyly_assistant.agents.explainer import explain_answer
from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient

from ..schemas.explanation import ExplainedQuestion


async def explain_question(question: ExplainedQuestion, client: GenerationClient, settings: Settings) -> str:
    return await explain_answer(
        client,
        question=question.question,
        question_type=question.type,
        answer=question.answer,
        options=question.options,
        language=settings.output_language,
    )
