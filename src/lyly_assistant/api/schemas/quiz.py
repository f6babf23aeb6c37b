"""Request and response models for quiz generation."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...quiz.models import ContentOptions, QuizItem


class QuizRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_content: str = Field(..., alias="fileContent", description="Plain text of the source document.")
    file_name: str = Field("document", alias="fileName")
    quiz_type: str = Field(..., alias="quizType", description="'multiple-choice' or 'essay'.")
    level_counts: Optional[Dict[str, Any]] = Field(
        None,
        alias="levelCounts",
        description="Questions requested per Bloom level; junk or negative values count as 0.",
    )
    advanced_options: ContentOptions = Field(default_factory=ContentOptions, alias="advancedOptions")


class QuizResponse(BaseModel):
    questions: List[QuizItem] = Field(default_factory=list)
