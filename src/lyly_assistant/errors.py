"""Error taxonomy for the generation pipelines.

Every error carries the ``stage`` that raised it so the API layer can log
where a request failed before turning it into a caller-visible message.
"""

from __future__ import annotations

from typing import Dict, Optional


class LylyError(Exception):
    """Base class for failures raised inside a generation pipeline."""

    stage: str = "pipeline"

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class InvalidPlanError(LylyError):
    """The requested level distribution cannot be turned into a plan."""

    stage = "planning"


class GenerationServiceError(LylyError):
    """Transport, credential, timeout or empty-response failure from the model."""

    stage = "generation"


class MalformedOutputError(LylyError):
    """The model returned text that is not the structured envelope we asked for."""

    stage = "validation"


class PlanMismatchError(LylyError):
    """Validated items do not match the requested per-level counts."""

    stage = "validation"

    def __init__(self, message: str, *, expected: Dict[str, int], actual: Dict[str, int]) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
