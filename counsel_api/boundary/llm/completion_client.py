"""
Completion service client.

Wraps the Gemini chat model behind a single prompt-in, text-out call.
The counselor reply is whatever the model returns for the raw user text.

Dependencies: langchain_google_genai, langchain_core
System role: Language model adapter for counselor replies
"""

import logging

from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from counsel_api.core.exceptions import CompletionError

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Gemini completion client.

    The underlying chat model is built on first use, so a missing API key
    only surfaces when a reply is actually requested.

    Usage:
        client = CompletionClient(api_key=key)
        reply = await client.complete("I feel anxious")
    """

    def __init__(
        self,
        api_key: str = "",
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.7,
    ) -> None:
        """
        Initialize completion client.

        Args:
            api_key: Google Generative AI API key (may be empty)
            model_id: Gemini model identifier
            temperature: Sampling temperature
        """
        self._api_key = api_key
        self._model_id = model_id
        self._temperature = temperature
        self._model: ChatGoogleGenerativeAI | None = None

    def _get_model(self) -> ChatGoogleGenerativeAI:
        if self._model is None:
            self._model = ChatGoogleGenerativeAI(
                model=self._model_id,
                temperature=self._temperature,
                google_api_key=self._api_key,
            )
            logger.info(f"Initialized completion model {self._model_id}")
        return self._model

    async def complete(self, prompt: str) -> str:
        """
        Request a reply for a prompt.

        Args:
            prompt: Raw user text

        Returns:
            str: Reply text as returned by the model (not trimmed)

        Raises:
            CompletionError: If the model cannot be built or the call fails
        """
        try:
            model = self._get_model()
            response = await model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"Completion call failed: {type(e).__name__}: {e}")
            raise CompletionError(str(e), model=self._model_id) from e

        return extract_text(response)


def extract_text(message: BaseMessage) -> str:
    """
    Flatten a chat model message into plain text.

    Gemini may return content as a string or as a list of parts
    (strings or ``{"type": "text", "text": ...}`` blocks).

    Args:
        message: Model response message

    Returns:
        str: Concatenated text content
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts: list[str] = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
