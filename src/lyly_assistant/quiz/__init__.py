"""Structured quiz generation: plan -> prompt -> model call -> validate -> assemble."""

from .assembler import assemble_result
from .models import CompiledPrompt, ContentOptions, GenerationPlan, QuizItem, QuizResult, SourceDocument
from .pipeline import generate_quiz
from .planner import build_plan
from .prompt_compiler import compile_quiz_prompt
from .validator import level_histogram, validate_quiz_output

__all__ = [
    "CompiledPrompt",
    "ContentOptions",
    "GenerationPlan",
    "QuizItem",
    "QuizResult",
    "SourceDocument",
    "assemble_result",
    "build_plan",
    "compile_quiz_prompt",
    "generate_quiz",
    "level_histogram",
    "validate_quiz_output",
]
