"""
Prompt templates for typo detection and grammar improvement.
"""
from typing import Dict, List

from sheet_grammar.schemas.chat import ChatMessage
from sheet_grammar.schemas.settings import Language


TYPO_LANGUAGE_INSTRUCTIONS: Dict[Language, str] = {
    Language.ENGLISH: (
        "Identify words with potential spelling mistakes in the following English text. "
        "For each word, provide possible corrections:"
    ),
    Language.SPANISH: (
        "Identifica palabras con posibles errores ortográficos en el siguiente texto en español. "
        "Para cada palabra, proporciona posibles correcciones:"
    ),
}

GRAMMAR_LANGUAGE_INSTRUCTIONS: Dict[Language, str] = {
    Language.ENGLISH: "Improve the grammar and clarity of this English text:",
    Language.SPANISH: "Mejora la gramática y claridad de este texto en español:",
}

TYPO_SYSTEM_PROMPT = (
    "You are a spelling assistant. {instructions} "
    "Return your response as a JSON object with the structure: "
    '{{"typos":[{{"word":"misspelled", "replacements":["correct1", "correct2"]}}]}}'
)

GRAMMAR_SYSTEM_PROMPT = (
    "You are a grammar assistant. {instructions} "
    "Return only the improved text without any additional explanation."
)


def build_typo_messages(text: str, language: Language) -> List[ChatMessage]:
    """
    Build the system + user messages for typo detection.

    Args:
        text: Raw text of the selected cell
        language: Language the text is written in

    Returns:
        Messages asking for a {"typos": [...]} JSON object
    """
    system_prompt = TYPO_SYSTEM_PROMPT.format(
        instructions=TYPO_LANGUAGE_INSTRUCTIONS[Language(language)]
    )
    return [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=text),
    ]


def build_grammar_messages(text: str, language: Language) -> List[ChatMessage]:
    """Build the system + user messages for grammar improvement."""
    system_prompt = GRAMMAR_SYSTEM_PROMPT.format(
        instructions=GRAMMAR_LANGUAGE_INSTRUCTIONS[Language(language)]
    )
    return [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=text),
    ]
