"""
Pydantic schemas for typo detection results.
"""
from typing import List

from pydantic import BaseModel, Field


class TypoSuggestion(BaseModel):
    """A misspelled word with candidate corrections."""

    word: str = Field(description="Misspelled word as found in the source text")
    replacements: List[str] = Field(
        default_factory=list,
        description="Suggested corrections, model order first"
    )


class TypoReport(BaseModel):
    """Parsed result of a typo detection call."""

    typos: List[TypoSuggestion] = Field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        """False when the model reported no typos (a neutral result, not an error)."""
        return len(self.typos) > 0
