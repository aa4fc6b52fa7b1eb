"""Chat service: assembles the system prompt and asks the LLM provider."""

import logging
from datetime import datetime
from typing import Callable

from finbot.core.exceptions import LLMServiceError
from finbot.core.timezone import now_local
from finbot.domain.views import ChatCompletion, ChatMessage
from finbot.providers.llm_provider import ChatCompletionProvider
from finbot.services.context_builder import FinancialContextBuilder
from finbot.services.prompts import get_base_system_prompt

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Maaf, saya tidak dapat memberikan respons saat ini."


class ChatService:
    """
    Produces assistant replies for a user's conversation.

    Financial context is optional: if it cannot be built the reply is still
    generated, just without the snapshot.
    """

    def __init__(
        self,
        provider: ChatCompletionProvider,
        context_builder: FinancialContextBuilder,
        history_limit: int = 10,
        max_tokens: int = 1500,
        temperature: float = 0.7,
        clock: Callable[[], datetime] = now_local,
    ):
        self._provider = provider
        self._context_builder = context_builder
        self._history_limit = history_limit
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._clock = clock

    async def build_system_prompt(
        self,
        user_id: str,
        include_financial_context: bool = True,
    ) -> str:
        """Base persona prompt, followed by the financial snapshot when available."""
        prompt = get_base_system_prompt(self._clock())
        if not include_financial_context:
            return prompt

        try:
            context = await self._context_builder.build_financial_context(user_id)
        except Exception:
            logger.warning(
                "Failed to build financial context for user %s; continuing without it",
                user_id,
                exc_info=True,
            )
            return prompt
        return f"{prompt}\n\n{context}"

    async def reply(
        self,
        user_id: str,
        messages: list[ChatMessage],
        include_financial_context: bool = True,
    ) -> ChatCompletion:
        """Return the assistant's answer to the latest messages of a conversation."""
        system_prompt = await self.build_system_prompt(user_id, include_financial_context)
        recent = self._recent_messages(messages)

        try:
            completion = await self._provider.complete(
                [ChatMessage(role="system", content=system_prompt), *recent],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except LLMServiceError:
            raise
        except Exception as exc:
            logger.exception("Chat completion failed for user %s", user_id)
            raise LLMServiceError() from exc

        if not completion.content:
            completion.content = FALLBACK_REPLY
        return completion

    def _recent_messages(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        recent: list[ChatMessage] = []
        for message in messages[-self._history_limit:]:
            # Stored system notes are replayed as user turns
            role = "user" if message.role == "system" else message.role
            recent.append(ChatMessage(role=role, content=message.content))
        return recent
