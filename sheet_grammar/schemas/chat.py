"""
Pydantic schemas for chat completion requests.
"""
from typing import List, Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single role-tagged message sent to the chat completion endpoint."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Request body for the chat completion endpoint."""

    model: str
    messages: List[ChatMessage] = Field(min_length=1)
    temperature: float = Field(ge=0.0, le=2.0)
    max_tokens: int = Field(gt=0)
