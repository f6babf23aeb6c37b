"""Request and response models for answer explanations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExplainedQuestion(BaseModel):
    """Loose view of a quiz item as echoed back by the client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    question: str = ""
    type: Optional[str] = None
    options: Optional[List[str]] = None
    answer: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    bloom_level: Optional[str] = Field(None, alias="bloomLevel")


class ExplanationRequest(BaseModel):
    question: ExplainedQuestion


class ExplanationResponse(BaseModel):
    explanation: str
