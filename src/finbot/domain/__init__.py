"""Domain layer - pure business models with no external dependencies."""

from finbot.domain.models import (
    Transaction,
    Budget,
    SavingGoal,
    PortfolioHolding,
    TransactionType,
    HoldingType,
    GoalStatus,
    GoalPriority,
)

__all__ = [
    "Transaction",
    "Budget",
    "SavingGoal",
    "PortfolioHolding",
    "TransactionType",
    "HoldingType",
    "GoalStatus",
    "GoalPriority",
]
