"""Result Assembler: wraps validated items, keeping the model's emission order."""

from typing import Iterable

from .models import QuizItem, QuizResult


def assemble_result(items: Iterable[QuizItem]) -> QuizResult:
    return QuizResult(questions=list(items))
