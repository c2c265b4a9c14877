"""
Per-user settings: API key, language preference and custom dictionary.
"""
import json
from typing import List, Optional, Union

from sheet_grammar.config import settings
from sheet_grammar.schemas.settings import Language, UserSettings
from sheet_grammar.services.property_store_base import PropertyStore
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.settings_store")

# Property keys, shared with the host's property service
API_KEY_PROPERTY = "OPENAI_API_KEY"
LANGUAGE_PROPERTY = "GRAMMAR_CHECKER_LANGUAGE"
DICTIONARY_PROPERTY = "CUSTOM_DICTIONARY"


def _default_language() -> Language:
    try:
        return Language(settings.DEFAULT_LANGUAGE.lower())
    except ValueError:
        logger.warning("Unknown DEFAULT_LANGUAGE, using english", value=settings.DEFAULT_LANGUAGE)
        return Language.ENGLISH


class SettingsStore:
    """
    Reads and writes the current user's settings through a PropertyStore.

    Every call goes straight to the backing store; nothing is cached, so two
    stores over the same backend always agree (last writer wins).
    """

    def __init__(self, properties: PropertyStore):
        self.properties = properties

    def get_api_key(self) -> Optional[str]:
        """Return the stored API key, None when not configured."""
        return self.properties.get_property(API_KEY_PROPERTY) or None

    def set_api_key(self, api_key: Optional[str]) -> None:
        """
        Store the API key (trimmed). A blank key clears the stored value.

        Args:
            api_key: Key as entered by the user
        """
        api_key = (api_key or "").strip()
        if not api_key:
            self.properties.delete_property(API_KEY_PROPERTY)
            logger.info("API key cleared")
            return

        self.properties.set_property(API_KEY_PROPERTY, api_key)
        logger.info("API key saved", key_length=len(api_key))

    def get_language(self) -> Language:
        stored = self.properties.get_property(LANGUAGE_PROPERTY)
        if not stored:
            return _default_language()

        try:
            return Language(stored)
        except ValueError:
            logger.warning("Ignoring unknown stored language", language=stored)
            return _default_language()

    def set_language(self, language: Union[Language, str]) -> Language:
        """
        Store the language preference.

        Args:
            language: Language enum or its value ("english", "spanish")

        Returns:
            The stored Language

        Raises:
            ValueError: If the language is not supported
        """
        language = Language(language)
        self.properties.set_property(LANGUAGE_PROPERTY, language.value)
        logger.info("Language preference saved", language=language.value)
        return language

    def get_dictionary(self) -> List[str]:
        """Return the custom dictionary in insertion order."""
        raw = self.properties.get_property(DICTIONARY_PROPERTY)
        if not raw:
            return []

        try:
            words = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored dictionary is not valid JSON, treating as empty", error=str(e))
            return []

        if not isinstance(words, list):
            logger.warning("Stored dictionary is not a list, treating as empty")
            return []

        return [word for word in words if isinstance(word, str)]

    def _save_dictionary(self, words: List[str]) -> None:
        self.properties.set_property(DICTIONARY_PROPERTY, json.dumps(words, ensure_ascii=False))

    def add_word(self, word: str) -> List[str]:
        """
        Append a word to the custom dictionary.

        Blank words and exact (case-sensitive) duplicates are ignored.

        Args:
            word: Word to add; surrounding whitespace is stripped

        Returns:
            The dictionary after the call
        """
        word = (word or "").strip()
        words = self.get_dictionary()
        if not word or word in words:
            return words

        words.append(word)
        self._save_dictionary(words)
        logger.info("Word added to custom dictionary", word=word, size=len(words))
        return words

    def remove_word(self, index: int) -> List[str]:
        """
        Remove the word at `index` from the custom dictionary.

        Out-of-range indices (including negative ones) are ignored.

        Returns:
            The dictionary after the call
        """
        words = self.get_dictionary()
        if not 0 <= index < len(words):
            logger.debug("Dictionary index out of range, nothing removed", index=index, size=len(words))
            return words

        removed = words.pop(index)
        self._save_dictionary(words)
        logger.info("Word removed from custom dictionary", word=removed, size=len(words))
        return words

    def load(self) -> UserSettings:
        """Snapshot of all settings for the current user."""
        return UserSettings(
            api_key=self.get_api_key(),
            language=self.get_language(),
            custom_dictionary=self.get_dictionary()
        )
