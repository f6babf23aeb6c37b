"""Shared fixtures: settings, plans and an app wired to a stub client."""

from typing import Any, Dict, Optional, Union

import pytest
from fastapi.testclient import TestClient

from lyly_assistant.api.app import create_app
from lyly_assistant.configuration import Settings
from lyly_assistant.quiz import ContentOptions, build_plan

from tests.stubs import StubGenerationClient


@pytest.fixture
def settings() -> Settings:
    return Settings(
        llm_provider="google",
        llm_model="gemini-test",
        google_api_key="test-key",
        output_language="Vietnamese (Tiếng Việt)",
        quiz_max_questions=50,
        quiz_strict_level_counts=False,
    )


@pytest.fixture
def make_plan():
    def _make(
        level_counts: Optional[Dict[str, Any]] = None,
        question_type: str = "multiple-choice",
        include_formulas: bool = False,
        include_images: bool = False,
    ):
        return build_plan(
            document_name="ch1.txt",
            document_text="Nguồn điện an toàn: điện áp dưới 50 V được coi là an toàn.",
            level_counts=level_counts or {"remembering": 2, "understanding": 1},
            question_type=question_type,
            content_options=ContentOptions(include_formulas=include_formulas, include_images=include_images),
        )

    return _make


@pytest.fixture
def make_api(settings):
    def _make(*replies: Union[str, Exception], **overrides: Any):
        stub = StubGenerationClient(*replies)
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        return TestClient(create_app(settings=app_settings, generation_client=stub)), stub

    return _make
