"""
Prompt Compiler
- renders a GenerationPlan into one instruction plus the JSON schema of the reply
- the reply is wrapped in a {"questions": [...]} container, never a bare array
"""
from __future__ import annotations

from typing import Any, Dict, List

from langchain_core.prompts import PromptTemplate

from ..levels import CognitiveLevel, QuestionType, label_for
from .models import CompiledPrompt, ContentOptions, GenerationPlan

DEFAULT_LANGUAGE = "Vietnamese (Tiếng Việt)"
MC_OPTION_COUNT = 4

_TEMPLATE = (
    "You are an expert curriculum designer. Create a set of quiz questions from the "
    "provided document \"{document_name}\", strictly following ALL of these requirements:\n"
    "\n"
    "1. Distribution across Bloom's taxonomy levels. You MUST create exactly this many "
    "questions per level:\n"
    "{level_lines}\n"
    "   - The total number of questions MUST be exactly {total}.\n"
    "   - Every question MUST set the field 'bloomLevel' to the machine tag of its level "
    "(one of: {level_tags}), never the human-readable label.\n"
    "\n"
    "2. Question type: {type_instruction}\n"
    "\n"
    "3. Content options:\n"
    "   - {formula_instruction}\n"
    "   - {image_instruction}\n"
    "\n"
    "4. Language: all question text, options and answers must be written in {language}.\n"
    "\n"
    "5. Output format: return ONLY a JSON object of the form {{\"questions\": [...]}} matching "
    "the provided schema. No commentary before or after the JSON.\n"
    "\n"
    "Document content:\n"
    "---\n"
    "{document_text}\n"
    "---"
)

_PROMPT = PromptTemplate.from_template(_TEMPLATE)

_TYPE_INSTRUCTIONS = {
    QuestionType.MULTIPLE_CHOICE: (
        "Multiple choice. Set 'type' to \"multiple-choice\". Each question has exactly "
        f"{MC_OPTION_COUNT} entries in 'options' and exactly one correct answer; 'answer' must be "
        "copied verbatim from one of the options."
    ),
    QuestionType.ESSAY: (
        "Essay. Set 'type' to \"essay\" and omit 'options'. Each question must come with a "
        "detailed model answer in 'answer'."
    ),
}


def render_level_lines(plan: GenerationPlan) -> str:
    lines: List[str] = []
    for level in plan.requested_levels():
        count = plan.level_counts[level]
        lines.append(f"   - {count} question(s) at level {label_for(level)} (bloomLevel: \"{level.value}\")")
    return "\n".join(lines)


def formula_instruction(options: ContentOptions) -> str:
    if options.include_formulas:
        return "Include mathematical/physical formulas where relevant, written in KaTeX notation (e.g. $E=mc^2$)."
    return "Do not include any formulas."


def image_instruction(options: ContentOptions) -> str:
    if options.include_images:
        return "You may suggest an illustrative image URL from placeholder.com in 'imageUrl' where helpful."
    return "Do not include images; leave 'imageUrl' out."


def quiz_response_schema(plan: GenerationPlan) -> Dict[str, Any]:
    """JSON schema of the expected reply, suitable for a model's response_schema."""
    item: Dict[str, Any] = {
        "type": "object",
        "properties": {
            "question": {"type": "string"},
            "type": {"type": "string", "enum": [plan.question_type.value]},
            "options": {"type": "array", "items": {"type": "string"}},
            "answer": {"type": "string"},
            "imageUrl": {"type": "string"},
            "bloomLevel": {"type": "string", "enum": [level.value for level in CognitiveLevel]},
        },
        "required": ["question", "type", "bloomLevel"],
    }
    if plan.question_type is QuestionType.MULTIPLE_CHOICE:
        item["required"] = ["question", "type", "options", "answer", "bloomLevel"]
    return {
        "type": "object",
        "properties": {"questions": {"type": "array", "items": item}},
        "required": ["questions"],
    }


def compile_quiz_prompt(plan: GenerationPlan, language: str = DEFAULT_LANGUAGE) -> CompiledPrompt:
    instruction = _PROMPT.format(
        document_name=plan.document.name,
        level_lines=render_level_lines(plan),
        total=plan.total_requested,
        level_tags=", ".join(f"'{level.value}'" for level in plan.requested_levels()),
        type_instruction=_TYPE_INSTRUCTIONS[plan.question_type],
        formula_instruction=formula_instruction(plan.content_options),
        image_instruction=image_instruction(plan.content_options),
        language=language,
        document_text=plan.document.text,
    )
    return CompiledPrompt(instruction=instruction, schema=quiz_response_schema(plan))
