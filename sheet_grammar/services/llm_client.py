"""
Chat completion client for the OpenAI-compatible API.
"""
from typing import Any, Dict, List, Optional, Sequence

import httpx

from sheet_grammar.config import settings
from sheet_grammar.schemas.chat import ChatCompletionRequest, ChatMessage
from sheet_grammar.services.errors import ApiError, MissingApiKeyError
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.llm_client")


class ChatCompletionClient:
    """Sends one chat completion request per call and returns the reply text."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the client.

        Args:
            api_url: Chat completion endpoint (if None, uses settings.OPENAI_API_URL)
            model: Model identifier (if None, uses settings.OPENAI_MODEL)
            temperature: Sampling temperature (if None, uses settings.LLM_TEMPERATURE)
            max_tokens: Max output tokens (if None, uses settings.LLM_MAX_TOKENS)
            timeout: Request timeout in seconds (if None, uses settings.LLM_TIMEOUT_SECONDS)
        """
        self.api_url = api_url or settings.OPENAI_API_URL
        self.model = model or settings.OPENAI_MODEL
        self.temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS
        self.timeout = timeout or settings.LLM_TIMEOUT_SECONDS

    def _build_payload(self, messages: Sequence[ChatMessage]) -> Dict[str, Any]:
        request = ChatCompletionRequest(
            model=self.model,
            messages=list(messages),
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )
        return request.model_dump()

    def complete(self, api_key: Optional[str], messages: List[ChatMessage]) -> str:
        """
        Send the messages to the chat completion endpoint.

        Args:
            api_key: API key of the current user
            messages: Ordered role-tagged messages (system, user)

        Returns:
            Content of the first choice, untrimmed

        Raises:
            MissingApiKeyError: If no API key is given
            ApiError: If the request fails, times out or the status is not 200
        """
        if not api_key:
            raise MissingApiKeyError()

        payload = self._build_payload(messages)
        headers = {"Authorization": f"Bearer {api_key}"}

        logger.info(
            "Calling chat completion API",
            model=self.model,
            messages=len(payload["messages"]),
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.api_url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            logger.error("Chat completion request timed out", timeout=self.timeout)
            raise ApiError(f"API request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.error("Chat completion request failed", error=str(e))
            raise ApiError(f"API request failed: {e}") from e

        response_body = response.text
        if response.status_code != 200:
            logger.error(
                "Chat completion API returned an error",
                status_code=response.status_code,
                body=response_body[:500]
            )
            raise ApiError(
                f"API Error {response.status_code}: {response_body}",
                status_code=response.status_code,
                response_body=response_body
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Chat completion reply has no message content", body=response_body[:500])
            raise ApiError(
                "Failed to get response from OpenAI",
                status_code=response.status_code,
                response_body=response_body
            ) from e

        if not isinstance(content, str):
            raise ApiError(
                "Failed to get response from OpenAI",
                status_code=response.status_code,
                response_body=response_body
            )

        logger.debug(f"Raw chat completion reply: {content[:200]}...")
        return content
