"""Repository layer - data access abstractions and implementations."""

from finbot.repositories.protocols import (
    TransactionRepository,
    BudgetRepository,
    GoalRepository,
    PortfolioRepository,
)

__all__ = [
    "TransactionRepository",
    "BudgetRepository",
    "GoalRepository",
    "PortfolioRepository",
]
