"""OpenRouter chat provider using the OpenAI-compatible API."""

from typing import Optional

from openai import AsyncOpenAI

from finbot.config.settings import Settings
from finbot.core.exceptions import LLMConfigurationError
from finbot.domain.views import ChatCompletion, ChatMessage


class OpenRouterProvider:
    """Sends chat completions to OpenRouter through the openai client."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://openrouter.ai/api/v1",
        site_url: str = "http://localhost:3000",
        app_name: str = "My Finance App",
        client: Optional[AsyncOpenAI] = None,
    ):
        if client is None and not api_key:
            raise LLMConfigurationError("OPENROUTER_API_KEY environment variable is not set")
        self._model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers={
                "HTTP-Referer": site_url,
                "X-Title": app_name,
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenRouterProvider":
        return cls(
            api_key=settings.openrouter_api_key,
            model=settings.openrouter_model,
            base_url=settings.openrouter_base_url,
            site_url=settings.openrouter_site_url,
            app_name=settings.openrouter_app_name,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        messages: list[ChatMessage],
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        """Request a single non-streaming completion."""
        completion = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": m.role, "content": m.content} for m in messages],
            max_tokens=max_tokens,
            temperature=temperature,
            presence_penalty=0.1,
            frequency_penalty=0.1,
        )

        content = ""
        if completion.choices:
            content = completion.choices[0].message.content or ""
        tokens_used = completion.usage.total_tokens if completion.usage else 0

        return ChatCompletion(content=content, tokens_used=tokens_used, model=self._model)
