"""
Interpretation of model replies for typo detection and grammar improvement.

Typo replies are only loosely structured: the JSON object may be wrapped in a
markdown fence or surrounded by prose. Extraction runs three stages in order
and the first one that finds something wins:

1. a ```json fenced block
2. the first top-level {...} object, found by brace matching
3. the whole reply
"""
import json
import re
from typing import Any, List, Optional

from sheet_grammar.schemas.typos import TypoReport, TypoSuggestion
from sheet_grammar.services.errors import ResponseParseError
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.response_parser")

JSON_FENCE_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)

PARSE_ERROR_MESSAGE = "Failed to parse OpenAI response"


def extract_fenced_json(reply: str) -> Optional[str]:
    """Return the body of the first ```json fenced block, if any."""
    match = JSON_FENCE_PATTERN.search(reply)
    if match:
        return match.group(1)
    return None


def extract_braced_object(reply: str) -> Optional[str]:
    """
    Return the first top-level {...} substring, matching braces.

    Braces inside JSON string literals are ignored. Returns None when there is
    no opening brace or the first object is never closed.
    """
    start = reply.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for position in range(start, len(reply)):
        char = reply[position]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return reply[start:position + 1]

    return None


def extract_json_candidate(reply: str) -> str:
    """Pick the text to parse as JSON (fenced block, braced object, whole reply)."""
    fenced = extract_fenced_json(reply)
    if fenced is not None:
        return fenced.strip()

    braced = extract_braced_object(reply)
    if braced is not None:
        return braced

    return reply.strip()


def _parse_replacements(raw: Any) -> List[str]:
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str) and item.strip()]


def _parse_typo_entries(raw_typos: Any) -> List[TypoSuggestion]:
    if not isinstance(raw_typos, list):
        logger.warning("'typos' is not a list, treating as no typos", value_type=type(raw_typos).__name__)
        return []

    typos = []
    for entry in raw_typos:
        if not isinstance(entry, dict):
            logger.warning("Skipping typo entry that is not an object", entry=entry)
            continue

        word = entry.get("word")
        if not isinstance(word, str) or not word:
            logger.warning("Skipping typo entry without a word", entry=entry)
            continue

        typos.append(
            TypoSuggestion(word=word, replacements=_parse_replacements(entry.get("replacements")))
        )

    return typos


def parse_typo_response(reply: str) -> TypoReport:
    """
    Parse a typo detection reply.

    Args:
        reply: Raw text returned by the chat completion client

    Returns:
        TypoReport; an empty report means no typos were found

    Raises:
        ResponseParseError: If no JSON object can be read from the reply
    """
    candidate = extract_json_candidate(reply)

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse typo response as JSON", error=str(e), response_length=len(reply))
        logger.debug(f"Raw typo response: {reply[:500]}")
        raise ResponseParseError(PARSE_ERROR_MESSAGE, llm_raw_response=reply) from e

    if not isinstance(parsed, dict):
        logger.error("Typo response is not a JSON object", value_type=type(parsed).__name__)
        raise ResponseParseError(PARSE_ERROR_MESSAGE, llm_raw_response=reply)

    report = TypoReport(typos=_parse_typo_entries(parsed.get("typos") or []))
    logger.info("Typo response parsed", typos=len(report.typos))
    return report


def parse_grammar_response(reply: str) -> str:
    """The improved text is the reply itself, trimmed."""
    return reply.strip()
