"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Boolean,
    Integer,
    Text,
    Numeric,
    UniqueConstraint,
    Enum as SqlEnum,
)

from finbot.repositories.sqlalchemy.database import Base
from finbot.domain.models.enums import (
    TransactionType,
    HoldingType,
    GoalStatus,
    GoalPriority,
)


class TransactionORM(Base):
    """SQLAlchemy model for Transaction."""

    __tablename__ = "transactions"

    txn_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    txn_type = Column(SqlEnum(TransactionType), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    category = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    occurred_at = Column(DateTime, nullable=False, index=True)


class BudgetORM(Base):
    """SQLAlchemy model for Budget."""

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("user_id", "category", "period_year", "period_month"),
    )

    budget_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    monthly_limit = Column(Numeric(precision=18, scale=2), nullable=False)
    period_year = Column(Integer, nullable=False)
    period_month = Column(Integer, nullable=False)
    alert_threshold = Column(Integer, nullable=False, default=80)
    is_active = Column(Boolean, nullable=False, default=True)


class SavingGoalORM(Base):
    """SQLAlchemy model for SavingGoal."""

    __tablename__ = "saving_goals"

    goal_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    target_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    current_amount = Column(Numeric(precision=18, scale=2), default=Decimal("0"))
    deadline = Column(DateTime, nullable=True)
    priority = Column(SqlEnum(GoalPriority), nullable=False, default=GoalPriority.MEDIUM)
    status = Column(SqlEnum(GoalStatus), nullable=False, default=GoalStatus.ACTIVE)


class PortfolioHoldingORM(Base):
    """SQLAlchemy model for PortfolioHolding."""

    __tablename__ = "portfolio_holdings"

    holding_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    asset = Column(String(255), nullable=False)
    holding_type = Column(SqlEnum(HoldingType), nullable=False)
    quantity = Column(Numeric(precision=18, scale=8), nullable=False)
    current_value = Column(Numeric(precision=18, scale=4), nullable=False)
    purchase_price = Column(Numeric(precision=18, scale=4), nullable=True)
