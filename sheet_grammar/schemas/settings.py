"""
Pydantic schemas for per-user add-on settings.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Language(str, Enum):
    """Languages the typo and grammar prompts are written for."""

    ENGLISH = "english"
    SPANISH = "spanish"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class UserSettings(BaseModel):
    """Snapshot of everything stored for the current user."""

    api_key: Optional[str] = Field(
        default=None,
        repr=False,
        description="Chat completion API key, absent until configured"
    )
    language: Language = Field(
        default=Language.ENGLISH,
        description="Language used for typo detection and grammar prompts"
    )
    custom_dictionary: List[str] = Field(
        default_factory=list,
        description="User-maintained words, unique and in insertion order"
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
