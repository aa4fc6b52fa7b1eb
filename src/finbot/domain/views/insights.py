"""View models for the financial summary handed to the assistant."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, Optional

Trend = Literal["up", "down", "stable"]


@dataclass
class FinancialOverview:
    """Income and expense totals over the rolling summary window."""

    total_income: Decimal = field(default_factory=lambda: Decimal("0"))
    total_expense: Decimal = field(default_factory=lambda: Decimal("0"))
    net_savings: Decimal = field(default_factory=lambda: Decimal("0"))
    period_start: str = ""
    period_end: str = ""


@dataclass
class CategorySummary:
    """Spending in one expense category."""

    category: str
    total: Decimal
    percentage: int
    # No historical comparison exists yet, so every category reports "stable".
    trend: Trend = "stable"


@dataclass
class PortfolioSummary:
    """Point-in-time valuation of all holdings."""

    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    allocation: dict[str, Decimal] = field(default_factory=dict)
    gain_loss: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class BudgetSummary:
    """Usage of one active budget in the current calendar month."""

    category: str
    limit: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: int


@dataclass
class GoalSummary:
    """Progress of one active saving goal."""

    name: str
    progress: int
    days_remaining: Optional[int] = None


@dataclass
class FinancialSummary:
    """Aggregated snapshot of a user's finances. Never persisted."""

    overview: FinancialOverview = field(default_factory=FinancialOverview)
    top_categories: list[CategorySummary] = field(default_factory=list)
    portfolio: PortfolioSummary = field(default_factory=PortfolioSummary)
    budgets: list[BudgetSummary] = field(default_factory=list)
    goals: list[GoalSummary] = field(default_factory=list)
