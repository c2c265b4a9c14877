"""
Custom dictionary manager dialog.
"""
from typing import List

from sheet_grammar.schemas.dialogs import DictionaryDialog, DictionaryEntry
from sheet_grammar.services.settings_store import SettingsStore


class DictionaryManager:
    """
    Lists, adds and removes custom dictionary words.

    The view is always rebuilt from the list the store returns after a
    mutation, never patched locally.
    """

    def __init__(self, settings_store: SettingsStore):
        self.settings_store = settings_store
        self.words: List[str] = settings_store.get_dictionary()

    def view(self) -> DictionaryDialog:
        return DictionaryDialog(
            entries=[DictionaryEntry(index=i, word=word) for i, word in enumerate(self.words)]
        )

    def add(self, word: str) -> DictionaryDialog:
        """Add a word (blank and duplicate input is ignored by the store)."""
        self.words = self.settings_store.add_word(word)
        return self.view()

    def delete(self, index: int) -> DictionaryDialog:
        """Delete the word at `index` and re-render."""
        self.words = self.settings_store.remove_word(index)
        return self.view()
