"""View models for service outputs."""

from finbot.domain.views.insights import (
    FinancialOverview,
    CategorySummary,
    PortfolioSummary,
    BudgetSummary,
    GoalSummary,
    FinancialSummary,
)
from finbot.domain.views.chat import ChatMessage, ChatCompletion

__all__ = [
    "FinancialOverview",
    "CategorySummary",
    "PortfolioSummary",
    "BudgetSummary",
    "GoalSummary",
    "FinancialSummary",
    "ChatMessage",
    "ChatCompletion",
]
