"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a cash-flow record."""

    INCOME = "income"
    EXPENSE = "expense"


class HoldingType(str, Enum):
    """Instrument classes a portfolio holding can belong to."""

    STOCK = "stock"
    CRYPTO = "crypto"
    FUND = "fund"
    PROPERTY = "property"


class GoalStatus(str, Enum):
    """Lifecycle states of a saving goal."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class GoalPriority(str, Enum):
    """User-assigned saving goal priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
