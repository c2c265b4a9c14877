"""
Pydantic schemas for settings, model results and dialogs.
"""
from sheet_grammar.schemas.chat import ChatCompletionRequest, ChatMessage
from sheet_grammar.schemas.settings import Language, UserSettings
from sheet_grammar.schemas.typos import TypoReport, TypoSuggestion

__all__ = [
    "ChatCompletionRequest",
    "ChatMessage",
    "Language",
    "UserSettings",
    "TypoReport",
    "TypoSuggestion",
]
