"""
Exceptions raised by the grammar checker services.

Every error carries a user-facing message; action handlers turn these into a
single host alert.
"""
from typing import Optional


class GrammarCheckerError(Exception):
    """Base class for errors surfaced to the user as an alert."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingApiKeyError(GrammarCheckerError):
    """No API key is configured for the current user."""

    def __init__(self, message: str = "Please set your OpenAI API key first."):
        super().__init__(message)


class EmptySelectionError(GrammarCheckerError):
    """The action was triggered without a selected range or on an empty cell."""


class ApiError(GrammarCheckerError):
    """
    The chat completion API did not return a usable reply.

    Attributes:
        message: Error message
        status_code: HTTP status code (None for transport failures and timeouts)
        response_body: Raw response body, kept for diagnostics
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class ResponseParseError(GrammarCheckerError):
    """
    The model reply could not be interpreted as the expected JSON shape.

    Attributes:
        message: Error message
        llm_raw_response: Raw reply from the model
    """

    def __init__(self, message: str, llm_raw_response: Optional[str] = None):
        super().__init__(message)
        self.llm_raw_response = llm_raw_response
