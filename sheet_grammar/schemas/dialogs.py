"""
Pydantic view models for the dialogs and menu handed to the spreadsheet host.

The host renders these; the models carry only what the user sees and the
identifiers needed to route a choice back.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from sheet_grammar.schemas.settings import Language


class MenuItem(BaseModel):
    """Menu entry bound to an action handler name (None renders a separator)."""

    label: Optional[str] = None
    handler: Optional[str] = None

    @property
    def is_separator(self) -> bool:
        return self.handler is None


class Menu(BaseModel):
    title: str
    items: List[MenuItem]


class Dialog(BaseModel):
    """Base for modal dialogs."""

    title: str
    width: int = 400
    height: int = 300


class TypoEntry(BaseModel):
    """One detected typo as presented in the typo dialog."""

    index: int
    word: str
    options: List[str] = Field(description="Model replacements plus similar dictionary words")
    closed: bool = Field(default=False, description="Replaced or kept; no further interaction")


class TypoDialog(Dialog):
    title: str = "Fix Typos"
    width: int = 500
    height: int = 400
    heading: str = "Potential Typos Found"
    keep_original_label: str = "Keep Original"
    custom_word_placeholder: str = "Add custom replacement"
    entries: List[TypoEntry]
    corrected_text: str


class GrammarDialog(Dialog):
    title: str = "Improve Grammar"
    width: int = 600
    height: int = 400
    heading: str = "Grammar Improvement"
    original_text: str
    improved_text: str


class DictionaryEntry(BaseModel):
    index: int
    word: str


class DictionaryDialog(Dialog):
    title: str = "Custom Dictionary"
    width: int = 400
    height: int = 350
    empty_message: str = "No words in custom dictionary yet."
    add_placeholder: str = "Add new word"
    entries: List[DictionaryEntry]

    @property
    def is_empty(self) -> bool:
        return not self.entries


class LanguageDialog(Dialog):
    title: str = "Language Settings"
    width: int = 300
    height: int = 200
    current: Language
    options: List[Language] = Field(default_factory=lambda: list(Language))
