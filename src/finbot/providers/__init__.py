"""Chat completion providers module."""

from finbot.providers.llm_provider import ChatCompletionProvider
from finbot.providers.stub_provider import StubChatProvider
from finbot.providers.openrouter_provider import OpenRouterProvider

__all__ = [
    "ChatCompletionProvider",
    "StubChatProvider",
    "OpenRouterProvider",
]
