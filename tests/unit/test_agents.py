"""Tests for the explanation and quick-reply helpers."""

import asyncio
import json

import pytest

from lyly_assistant.agents.explainer import NO_AUTO_EXPLANATION, explain_answer
from lyly_assistant.agents.quick_replies import render_transcript, should_suggest, suggest_follow_ups
from lyly_assistant.errors import MalformedOutputError

from tests.stubs import StubGenerationClient

OPTIONS = ["12 V", "50 V", "220 V", "380 V"]


class TestExplainer:
    def test_multiple_choice_calls_model(self):
        stub = StubGenerationClient("  Vì 50 V là ngưỡng an toàn.  ")
        text = asyncio.run(explain_answer(stub, "Q?", "multiple-choice", "50 V", OPTIONS))
        assert text == "Vì 50 V là ngưỡng an toàn."
        instruction = stub.prompts[0].instruction
        assert 'Correct answer: "50 V"' in instruction
        assert '"12 V", "220 V", "380 V"' in instruction
        assert stub.prompts[0].schema is None

    @pytest.mark.parametrize(
        "qtype, answer, options",
        [("essay", "x", None), ("multiple-choice", None, OPTIONS), ("multiple-choice", "50 V", [])],
    )
    def test_short_circuit_without_model(self, qtype, answer, options):
        stub = StubGenerationClient()
        assert asyncio.run(explain_answer(stub, "Q?", qtype, answer, options)) == NO_AUTO_EXPLANATION
        assert stub.prompts == []


class TestQuickReplies:
    HISTORY = [
        {"role": "user", "parts": [{"text": "Nối đất là gì?"}]},
        {"role": "model", "parts": [{"text": "Nối đất là..."}]},
    ]

    def test_suggestions_parsed(self):
        stub = StubGenerationClient(json.dumps({"suggestions": ["A?", " ", "B?", 3]}))
        assert asyncio.run(suggest_follow_ups(stub, self.HISTORY)) == ["A?", "B?"]
        assert "user: Nối đất là gì?" in stub.prompts[0].instruction

    def test_no_call_after_user_turn_or_empty_history(self):
        stub = StubGenerationClient()
        assert asyncio.run(suggest_follow_ups(stub, [])) == []
        assert asyncio.run(suggest_follow_ups(stub, self.HISTORY[:1])) == []
        assert stub.prompts == []
        assert should_suggest(self.HISTORY)

    def test_malformed_suggestions(self):
        stub = StubGenerationClient("Sure! Here are some ideas")
        with pytest.raises(MalformedOutputError):
            asyncio.run(suggest_follow_ups(stub, self.HISTORY))

    def test_parts_without_text_are_skipped(self):
        history = [{"role": "user", "parts": [{"text": None, "inlineData": {}}, {"text": "hi"}]}]
        assert render_transcript(history) == "user: hi"

    def test_transcript_skips_empty_turns(self):
        history = self.HISTORY + [{"role": "user", "parts": []}]
        assert render_transcript(history).count("\n") == 1
