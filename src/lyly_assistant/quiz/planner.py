"""
Level Distribution Planner
- Input: raw level counts as sent by the client (values may be strings, junk or negative)
- Output: an immutable GenerationPlan with non-negative integer counts per CognitiveLevel
"""
from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidPlanError
from ..levels import CognitiveLevel, QuestionType
from .models import ContentOptions, GenerationPlan, SourceDocument

DEFAULT_MAX_QUESTIONS = 50


def normalize_count(value: Any) -> int:
    """Coerce a raw count to a non-negative int; anything unusable is 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number) or number <= 0:
        return 0
    return int(number)


def normalize_level_counts(raw: Optional[Mapping[str, Any]]) -> Dict[CognitiveLevel, int]:
    counts: Dict[CognitiveLevel, int] = {level: 0 for level in CognitiveLevel}
    for key, value in (raw or {}).items():
        level = CognitiveLevel(key) if isinstance(key, CognitiveLevel) else _level_key(key)
        counts[level] += normalize_count(value)
    return counts


def _level_key(key: Any) -> CognitiveLevel:
    # Only machine tags are accepted as request keys; labels are a prompt concern.
    if isinstance(key, str):
        try:
            return CognitiveLevel(key.strip())
        except ValueError:
            pass
    known = ", ".join(level.value for level in CognitiveLevel)
    raise InvalidPlanError(f"Unknown cognitive level {key!r}. Expected one of: {known}.")


def build_plan(
    document_name: str,
    document_text: str,
    level_counts: Optional[Mapping[str, Any]],
    question_type: QuestionType | str,
    content_options: Optional[ContentOptions] = None,
    max_questions: int = DEFAULT_MAX_QUESTIONS,
) -> GenerationPlan:
    """Validate the request and freeze it into a GenerationPlan."""
    counts = normalize_level_counts(level_counts)
    total = sum(counts.values())
    if total == 0:
        raise InvalidPlanError("At least one question must be requested across the cognitive levels.")
    if total > max_questions:
        raise InvalidPlanError(f"Requested {total} questions; the maximum per quiz is {max_questions}.")

    try:
        qtype = QuestionType(question_type)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in QuestionType)
        raise InvalidPlanError(f"Invalid question type {question_type!r}. Expected one of: {allowed}.") from exc

    return GenerationPlan(
        document=SourceDocument(name=document_name, text=document_text),
        level_counts=counts,
        question_type=qtype,
        content_options=content_options or ContentOptions(),
    )
