"""Linear quiz pipeline: plan -> prompt -> model call -> validate -> assemble."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from .assembler import assemble_result
from .models import GenerationPlan, QuizResult
from .prompt_compiler import DEFAULT_LANGUAGE, compile_quiz_prompt
from .validator import validate_quiz_output

if TYPE_CHECKING:
    from ..llm.client import GenerationClient


async def generate_quiz(
    plan: GenerationPlan,
    client: GenerationClient,
    language: str = DEFAULT_LANGUAGE,
    strict: bool = False,
) -> QuizResult:
    """Run one plan through the model. The model call is the only await point."""
    prompt = compile_quiz_prompt(plan, language=language)
    logger.info(
        "Generating {} {} question(s) from {!r}",
        plan.total_requested,
        plan.question_type.value,
        plan.document.name,
    )
    raw_text = await client.generate(prompt)
    items = validate_quiz_output(raw_text, plan, strict=strict)
    return assemble_result(items)
