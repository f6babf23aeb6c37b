"""Service helpers for chat follow-up suggestions."""

from typing import List

from lyly_assistant.agents.quick_replies import suggest_follow_ups
from lyly_assistant.configuration import Settings
from lyly_assistant.llm.client import GenerationClient

from ..schemas.suggestions import ChatTurn


async def quick_replies(history: List[ChatTurn], client: GenerationClient, settings: Settings) -> List[str]:
    turns = [turn.model_dump() for turn in history]
    return await suggest_follow_ups(client, turns, language=settings.output_language)
