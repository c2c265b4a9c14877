"""
Interactive review of typo and grammar suggestions.

A review session is created when a dialog is shown and lives until the user
finalizes or closes it. Accepted corrections are applied to an in-memory
working copy; the cell is only written when the user finalizes.
"""
from typing import Callable, Iterable, List, Optional, Tuple

from sheet_grammar.schemas.dialogs import GrammarDialog, TypoDialog, TypoEntry
from sheet_grammar.schemas.typos import TypoSuggestion
from sheet_grammar.services.settings_store import SettingsStore
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.suggestions")

# Max length difference for a dictionary word to count as similar
SIMILAR_MAX_LENGTH_DIFFERENCE = 2

# Receives the final text, returns True if it was written to the cell
TextApplier = Callable[[str], bool]


def similar_words(word1: str, word2: str) -> bool:
    """
    Coarse similarity used to offer dictionary words as replacements.

    Two words are similar when their lowercase first characters match and
    their lengths differ by at most two.
    """
    word1 = word1.lower()
    word2 = word2.lower()
    return (
        word1[:1] == word2[:1]
        and abs(len(word1) - len(word2)) <= SIMILAR_MAX_LENGTH_DIFFERENCE
    )


def merge_replacements(typo: TypoSuggestion, dictionary: Iterable[str]) -> List[str]:
    """
    Options shown for a typo: model replacements, then similar dictionary words.

    Duplicates are dropped, first occurrence wins.
    """
    options: List[str] = []
    for replacement in typo.replacements:
        if replacement not in options:
            options.append(replacement)

    for dict_word in dictionary:
        if similar_words(typo.word, dict_word) and dict_word not in options:
            options.append(dict_word)

    return options


class TypoReviewSession:
    """State behind the typo dialog."""

    def __init__(
        self,
        original_text: str,
        typos: List[TypoSuggestion],
        settings_store: SettingsStore,
        apply_text: TextApplier
    ):
        """
        Build the session.

        Typos without any replacement option are not shown.

        Args:
            original_text: Text of the selected cell
            typos: Typos reported by the model
            settings_store: Store used for the custom dictionary
            apply_text: Writes the final text back to the source cell
        """
        self.original_text = original_text
        self.corrected_text = original_text
        self.settings_store = settings_store
        self.apply_text = apply_text
        self.finalized = False

        dictionary = settings_store.get_dictionary()
        self.entries: List[TypoEntry] = []
        for typo in typos:
            options = merge_replacements(typo, dictionary)
            if not options:
                logger.warning("Skipping typo without replacement options", word=typo.word)
                continue
            self.entries.append(TypoEntry(index=len(self.entries), word=typo.word, options=options))

        self.accepted: List[Tuple[str, str]] = []

    @property
    def has_entries(self) -> bool:
        return bool(self.entries)

    @property
    def open_entries(self) -> List[TypoEntry]:
        return [entry for entry in self.entries if not entry.closed]

    def view(self) -> TypoDialog:
        """Dialog model reflecting the current state."""
        return TypoDialog(
            entries=[entry.model_copy() for entry in self.entries],
            corrected_text=self.corrected_text
        )

    def _open_entry(self, index: int) -> Optional[TypoEntry]:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"No typo at index {index}")
        if self.finalized:
            logger.warning("Typo review already finalized", index=index)
            return None

        entry = self.entries[index]
        if entry.closed:
            logger.debug("Typo already handled", index=index, word=entry.word)
            return None
        return entry

    def replace(self, index: int, replacement: str) -> bool:
        """
        Replace every literal occurrence of the typo in the working copy.

        Args:
            index: Index of the typo entry
            replacement: Chosen replacement

        Returns:
            True if the substitution was recorded, False if the typo was
            already handled

        Raises:
            IndexError: If there is no typo at `index`
        """
        entry = self._open_entry(index)
        if entry is None:
            return False

        self.corrected_text = self.corrected_text.replace(entry.word, replacement)
        entry.closed = True
        self.accepted.append((entry.word, replacement))
        logger.info("Typo replaced", word=entry.word, replacement=replacement)
        return True

    def keep_original(self, index: int) -> bool:
        """Dismiss a typo, leaving the text unchanged."""
        entry = self._open_entry(index)
        if entry is None:
            return False

        entry.closed = True
        logger.info("Typo kept as original", word=entry.word)
        return True

    def add_and_replace(self, index: int, word: str) -> bool:
        """
        Add a custom word to the dictionary and use it as the replacement.

        Blank input is ignored.
        """
        word = (word or "").strip()
        if not word:
            return False

        if self._open_entry(index) is None:
            return False

        self.settings_store.add_word(word)
        return self.replace(index, word)

    def finalize(self) -> bool:
        """
        Send the fully substituted text to the cell.

        Returns:
            True if the cell was written; nothing is written when no
            substitution changed the text
        """
        if self.finalized:
            return False
        self.finalized = True

        if self.corrected_text == self.original_text:
            logger.info("Typo review finished without changes")
            return False

        written = self.apply_text(self.corrected_text)
        logger.info("Typo review finished", substitutions=len(self.accepted), written=written)
        return written


class GrammarReview:
    """State behind the grammar comparison dialog."""

    def __init__(self, original_text: str, improved_text: str, apply_text: TextApplier):
        self.original_text = original_text
        self.improved_text = improved_text
        self.apply_text = apply_text
        self.resolved = False

    def view(self) -> GrammarDialog:
        return GrammarDialog(original_text=self.original_text, improved_text=self.improved_text)

    def accept(self) -> bool:
        """Write the improved text verbatim. Returns True if the cell was written."""
        if self.resolved:
            return False
        self.resolved = True

        written = self.apply_text(self.improved_text)
        logger.info("Grammar improvement accepted", written=written)
        return written

    def cancel(self) -> None:
        """Discard the improvement; the cell is left untouched."""
        if not self.resolved:
            self.resolved = True
            logger.info("Grammar improvement cancelled")
