"""
Answer Explainer
- Input: a multiple-choice question with its options and correct answer
- Output: free-text explanation of why the answer is right and the others are wrong
"""
from typing import List, Optional

from langchain_core.prompts import PromptTemplate

from ..llm.client import GenerationClient
from ..quiz.models import CompiledPrompt
from ..quiz.prompt_compiler import DEFAULT_LANGUAGE

NO_AUTO_EXPLANATION = "Đây là câu hỏi mở hoặc thiếu thông tin, không có giải thích tự động."

_TEMPLATE = (
    "For the following multiple-choice question:\n"
    "Question: \"{question}\"\n"
    "Correct answer: \"{answer}\"\n"
    "\n"
    "Explain clearly:\n"
    "1. Why \"{answer}\" is the correct answer.\n"
    "2. Why the other options are incorrect. The other options are: \"{others}\".\n"
    "\n"
    "Structure your reply in two clearly separated parts for the two points above. "
    "Write in {language}."
)

_PROMPT = PromptTemplate.from_template(_TEMPLATE)


def can_explain(question_type: Optional[str], answer: Optional[str], options: Optional[List[str]]) -> bool:
    return question_type == "multiple-choice" and bool(answer) and bool(options)


def build_explanation_prompt(question: str, answer: str, options: List[str], language: str = DEFAULT_LANGUAGE) -> CompiledPrompt:
    others = "\", \"".join(opt for opt in options if opt != answer)
    return CompiledPrompt(
        instruction=_PROMPT.format(question=question, answer=answer, others=others, language=language)
    )


async def explain_answer(
    client: GenerationClient,
    question: str,
    question_type: Optional[str],
    answer: Optional[str],
    options: Optional[List[str]],
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Explain a multiple-choice answer; open or incomplete questions get a fixed message."""
    if not can_explain(question_type, answer, options):
        return NO_AUTO_EXPLANATION
    prompt = build_explanation_prompt(question, answer, options, language=language)
    return (await client.generate(prompt)).strip()
