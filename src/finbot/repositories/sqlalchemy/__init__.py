"""SQLAlchemy repository implementations."""

from finbot.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from finbot.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from finbot.repositories.sqlalchemy.budget_repo import SqlAlchemyBudgetRepository
from finbot.repositories.sqlalchemy.goal_repo import SqlAlchemyGoalRepository
from finbot.repositories.sqlalchemy.portfolio_repo import SqlAlchemyPortfolioRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyBudgetRepository",
    "SqlAlchemyGoalRepository",
    "SqlAlchemyPortfolioRepository",
]
