"""Domain models package."""

from finbot.domain.models.enums import (
    TransactionType,
    HoldingType,
    GoalStatus,
    GoalPriority,
)
from finbot.domain.models.transaction import Transaction
from finbot.domain.models.budget import Budget
from finbot.domain.models.goal import SavingGoal
from finbot.domain.models.holding import PortfolioHolding

__all__ = [
    "TransactionType",
    "HoldingType",
    "GoalStatus",
    "GoalPriority",
    "Transaction",
    "Budget",
    "SavingGoal",
    "PortfolioHolding",
]
