"""Stub chat provider for offline/testing use."""

from finbot.domain.views import ChatCompletion, ChatMessage


class StubChatProvider:
    """
    Deterministic provider that never leaves the process.

    Replies by acknowledging the latest user message and records every request
    it receives so callers can inspect the prompt that was built.
    """

    model = "stub"

    def __init__(self, reply_prefix: str = "FinBot (offline):"):
        self._reply_prefix = reply_prefix
        self.requests: list[list[ChatMessage]] = []

    async def complete(
        self,
        messages: list[ChatMessage],
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        """Return a canned reply built from the last user message."""
        self.requests.append(list(messages))
        last_user = next((m.content for m in reversed(messages) if m.role == "user"), "")
        return ChatCompletion(
            content=f"{self._reply_prefix} {last_user}".strip(),
            tokens_used=0,
            model=self.model,
        )
