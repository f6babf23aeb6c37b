"""Request and response models for follow-up suggestions."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatPart(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = None


class ChatTurn(BaseModel):
    role: str
    parts: List[ChatPart] = Field(default_factory=list)


class QuickRepliesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chat_history: List[ChatTurn] = Field(default_factory=list, alias="chatHistory")


class QuickRepliesResponse(BaseModel):
    suggestions: List[str] = Field(default_factory=list)
