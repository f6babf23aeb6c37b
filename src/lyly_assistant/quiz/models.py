"""Value objects passed between the quiz pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..levels import CognitiveLevel, QuestionType


class SourceDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    text: str


class ContentOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    include_formulas: bool = Field(False, alias="includeFormulas")
    include_images: bool = Field(False, alias="includeImages")


class GenerationPlan(BaseModel):
    """Normalized description of what one quiz request must produce."""

    model_config = ConfigDict(frozen=True)

    document: SourceDocument
    level_counts: Mapping[CognitiveLevel, int]
    question_type: QuestionType
    content_options: ContentOptions = Field(default_factory=ContentOptions)

    @field_validator("level_counts")
    @classmethod
    def freeze_counts(cls, value: Mapping[CognitiveLevel, int]) -> Mapping[CognitiveLevel, int]:
        return MappingProxyType(dict(value))

    @property
    def total_requested(self) -> int:
        return sum(self.level_counts.values())

    def requested_levels(self) -> List[CognitiveLevel]:
        """Levels with a positive count, in enum order."""
        return [level for level in CognitiveLevel if self.level_counts.get(level, 0) > 0]


class QuizItem(BaseModel):
    """A single generated question. Wire names follow the frontend contract."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    type: QuestionType
    options: Optional[List[str]] = None
    answer: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    bloom_level: CognitiveLevel = Field(..., alias="bloomLevel")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QuizResult(BaseModel):
    questions: List[QuizItem] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.questions)

    def to_payload(self) -> Dict[str, Any]:
        return {"questions": [item.to_payload() for item in self.questions]}


@dataclass(frozen=True)
class CompiledPrompt:
    """Instruction text plus the JSON schema the model must answer with.

    ``schema`` is None for free-text generations (e.g. explanations).
    """

    instruction: str
    schema: Optional[Dict[str, Any]] = None
