"""Pydantic schemas for chat endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from finbot.api.schemas.insights import CamelModel


class ChatMessageRequest(CamelModel):
    """One prior turn supplied by the client."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    """Request schema for POST /chat."""

    message: str = Field(..., description="The user's new message")
    history: list[ChatMessageRequest] = Field(
        default_factory=list,
        description="Earlier turns of the conversation, oldest first",
    )
    include_financial_context: bool = True


class AssistantMessageResponse(CamelModel):
    role: Literal["assistant"] = "assistant"
    content: str
    timestamp: datetime


class ChatMetadataResponse(CamelModel):
    tokens_used: int
    financial_context_included: bool
    model: str


class ChatResponse(CamelModel):
    """Response schema for POST /chat."""

    response: AssistantMessageResponse
    metadata: ChatMetadataResponse
