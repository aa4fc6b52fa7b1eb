"""Chat completion provider protocol."""

from typing import Protocol

from finbot.domain.views import ChatCompletion, ChatMessage


class ChatCompletionProvider(Protocol):
    """
    Protocol for LLM chat completion backends.

    Implementations receive the full message list, system prompt first, and
    raise on transport or API failure.
    """

    async def complete(
        self,
        messages: list[ChatMessage],
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        """Return the assistant reply for messages."""
        ...
