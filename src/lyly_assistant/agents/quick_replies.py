"""
Quick Replies
- suggests 3 short follow-up questions after the assistant's last chat turn
"""
import json
from typing import Any, Dict, List

from langchain_core.prompts import PromptTemplate
from loguru import logger

from ..errors import MalformedOutputError
from ..llm.client import GenerationClient
from ..quiz.models import CompiledPrompt
from ..quiz.prompt_compiler import DEFAULT_LANGUAGE

SUGGESTION_COUNT = 3

_TEMPLATE = (
    "Conversation so far:\n"
    "{transcript}\n"
    "\n"
    "Suggest {n} short follow-up questions the student might ask next, written in {language}.\n"
    "Return ONLY JSON: {{\"suggestions\": [\"...\"]}}"
)

_PROMPT = PromptTemplate.from_template(_TEMPLATE)

_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {"suggestions": {"type": "array", "items": {"type": "string"}}},
}


def _turn_text(turn: Dict[str, Any]) -> str:
    parts = turn.get("parts") or []
    texts = (str(p.get("text") or "").strip() for p in parts if isinstance(p, dict))
    return " ".join(t for t in texts if t)


def should_suggest(history: List[Dict[str, Any]]) -> bool:
    """Only after the assistant has answered."""
    return bool(history) and history[-1].get("role") != "user"


def render_transcript(history: List[Dict[str, Any]]) -> str:
    lines = []
    for turn in history:
        text = _turn_text(turn)
        if text:
            lines.append(f"{turn.get('role', 'user')}: {text}")
    return "\n".join(lines)


async def suggest_follow_ups(
    client: GenerationClient,
    history: List[Dict[str, Any]],
    language: str = DEFAULT_LANGUAGE,
) -> List[str]:
    if not should_suggest(history):
        return []
    prompt = CompiledPrompt(
        instruction=_PROMPT.format(
            transcript=render_transcript(history), n=SUGGESTION_COUNT, language=language
        ),
        schema=_SCHEMA,
    )
    raw = (await client.generate(prompt)).strip()
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(f"Suggestions are not valid JSON: {exc.msg}.") from exc
    if not isinstance(parsed, dict):
        raise MalformedOutputError("Suggestions payload is not a JSON object.")
    suggestions = [s.strip() for s in (parsed.get("suggestions") or []) if isinstance(s, str) and s.strip()]
    logger.debug("Suggested {} follow-up(s)", len(suggestions))
    return suggestions
