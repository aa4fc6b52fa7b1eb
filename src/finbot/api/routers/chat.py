"""Assistant chat endpoint."""

from fastapi import APIRouter, Depends

from finbot.api.deps import get_chat_service, get_current_user_id, rate_limit
from finbot.api.schemas import (
    AssistantMessageResponse,
    ChatMetadataResponse,
    ChatRequest,
    ChatResponse,
)
from finbot.core.exceptions import ValidationError
from finbot.core.timezone import now_local
from finbot.domain.views import ChatMessage
from finbot.services import ChatService, RateLimitResult

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def send_message(
    data: ChatRequest,
    _limit: RateLimitResult = Depends(rate_limit("chat")),
    user_id: str = Depends(get_current_user_id),
    chat: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer the caller's message, optionally grounded in their financial data."""
    message = data.message.strip()
    if not message:
        raise ValidationError("Message is required")

    messages = [ChatMessage(role=m.role, content=m.content) for m in data.history]
    messages.append(ChatMessage(role="user", content=message))

    completion = await chat.reply(
        user_id,
        messages,
        include_financial_context=data.include_financial_context,
    )

    return ChatResponse(
        response=AssistantMessageResponse(
            content=completion.content,
            timestamp=now_local(),
        ),
        metadata=ChatMetadataResponse(
            tokens_used=completion.tokens_used,
            financial_context_included=data.include_financial_context,
            model=completion.model,
        ),
    )
