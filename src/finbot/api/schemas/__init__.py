"""Pydantic schemas for API request/response."""

from finbot.api.schemas.insights import (
    FinancialOverviewResponse,
    CategorySummaryResponse,
    PortfolioSummaryResponse,
    BudgetSummaryResponse,
    GoalSummaryResponse,
    FinancialSummaryResponse,
    FinancialContextResponse,
)
from finbot.api.schemas.chat import (
    ChatMessageRequest,
    ChatRequest,
    AssistantMessageResponse,
    ChatMetadataResponse,
    ChatResponse,
)

__all__ = [
    "FinancialOverviewResponse",
    "CategorySummaryResponse",
    "PortfolioSummaryResponse",
    "BudgetSummaryResponse",
    "GoalSummaryResponse",
    "FinancialSummaryResponse",
    "FinancialContextResponse",
    "ChatMessageRequest",
    "ChatRequest",
    "AssistantMessageResponse",
    "ChatMetadataResponse",
    "ChatResponse",
]
