"""Repository protocol definitions (interfaces)."""

from finbot.repositories.protocols.transaction_repo import TransactionRepository
from finbot.repositories.protocols.budget_repo import BudgetRepository
from finbot.repositories.protocols.goal_repo import GoalRepository
from finbot.repositories.protocols.portfolio_repo import PortfolioRepository

__all__ = [
    "TransactionRepository",
    "BudgetRepository",
    "GoalRepository",
    "PortfolioRepository",
]
