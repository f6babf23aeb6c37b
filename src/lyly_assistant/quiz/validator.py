"""
Response Validator / Normalizer

Parses the model's raw reply, drops structurally broken items and compares the
surviving level distribution against the plan. Items are never fabricated,
reordered or padded.
"""
from __future__ import annotations

import json
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from ..errors import MalformedOutputError, PlanMismatchError
from ..levels import CognitiveLevel, QuestionType, parse_level
from .models import GenerationPlan, QuizItem
from .prompt_compiler import MC_OPTION_COUNT

ENVELOPE_KEY = "questions"


def parse_envelope(raw_text: str) -> List[Any]:
    """Return the raw item list from the reply envelope.

    Only surrounding whitespace is tolerated; prose or code fences around the
    JSON are a hard failure.
    """
    text = (raw_text or "").strip()
    if not text:
        raise MalformedOutputError("Model returned an empty payload.")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(f"Model output is not valid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno}).") from exc
    if not isinstance(payload, dict):
        raise MalformedOutputError(
            f"Expected a JSON object with a '{ENVELOPE_KEY}' field, got {type(payload).__name__}."
        )
    items = payload.get(ENVELOPE_KEY)
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedOutputError(f"'{ENVELOPE_KEY}' must be an array, got {type(items).__name__}.")
    return items


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def check_item(raw: Any, question_type: QuestionType) -> Tuple[Optional[QuizItem], Optional[str]]:
    """Structurally validate one raw item. Returns (item, None) or (None, reason)."""
    if not isinstance(raw, dict):
        return None, "item is not an object"
    if not _is_text(raw.get("question")):
        return None, "missing question text"
    if raw.get("type") != question_type.value:
        return None, f"type {raw.get('type')!r} does not match {question_type.value!r}"
    level = parse_level(raw.get("bloomLevel"))
    if level is None:
        return None, f"unknown bloomLevel {raw.get('bloomLevel')!r}"

    image_url = raw.get("imageUrl")
    if image_url is not None and not isinstance(image_url, str):
        return None, "imageUrl is not a string"
    answer = raw.get("answer")

    if question_type is QuestionType.MULTIPLE_CHOICE:
        options = raw.get("options")
        if not isinstance(options, list) or len(options) != MC_OPTION_COUNT:
            return None, f"multiple-choice item needs exactly {MC_OPTION_COUNT} options"
        if not all(_is_text(opt) for opt in options):
            return None, "options must be non-empty strings"
        if not _is_text(answer):
            return None, "multiple-choice item has no answer"
        matched = next((opt for opt in options if opt.strip() == answer.strip()), None)
        if matched is None:
            return None, "answer is not one of the options"
        answer = matched
    else:
        options = None
        if answer is not None and not isinstance(answer, str):
            return None, "essay answer is not a string"

    item = QuizItem(
        question=raw["question"],
        type=question_type,
        options=list(options) if options is not None else None,
        answer=answer,
        image_url=image_url,
        bloom_level=level,
    )
    return item, None


def level_histogram(items: Sequence[QuizItem]) -> Dict[CognitiveLevel, int]:
    return dict(Counter(item.bloom_level for item in items))


def level_discrepancy(items: Sequence[QuizItem], plan: GenerationPlan) -> Dict[str, Tuple[int, int]]:
    """Levels whose delivered count differs from the plan, as {tag: (expected, actual)}."""
    actual = level_histogram(items)
    diff: Dict[str, Tuple[int, int]] = {}
    for level in CognitiveLevel:
        expected = plan.level_counts.get(level, 0)
        got = actual.get(level, 0)
        if expected != got:
            diff[level.value] = (expected, got)
    return diff


def validate_quiz_output(raw_text: str, plan: GenerationPlan, strict: bool = False) -> List[QuizItem]:
    """Turn raw model text into QuizItems for ``plan``.

    Level-count mismatches are logged and returned as-is unless ``strict``,
    in which case PlanMismatchError is raised.
    """
    raw_items = parse_envelope(raw_text)
    items: List[QuizItem] = []
    for index, raw in enumerate(raw_items):
        item, reason = check_item(raw, plan.question_type)
        if item is None:
            logger.warning("Dropping quiz item #{}: {}", index, reason)
            continue
        items.append(item)

    diff = level_discrepancy(items, plan)
    if diff:
        summary = ", ".join(f"{tag}: expected {exp}, got {got}" for tag, (exp, got) in diff.items())
        if strict:
            raise PlanMismatchError(
                f"Generated questions do not match the requested distribution ({summary}).",
                expected={tag: exp for tag, (exp, _) in diff.items()},
                actual={tag: got for tag, (_, got) in diff.items()},
            )
        logger.warning("Level distribution mismatch for {!r}: {}", plan.document.name, summary)
    logger.debug("Validated {}/{} quiz items", len(items), len(raw_items))
    return items
