"""Pydantic schemas for insights endpoints."""

from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Amounts are Decimal internally but plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base schema emitting camelCase keys for the web client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FinancialOverviewResponse(CamelModel):
    total_income: Money
    total_expense: Money
    net_savings: Money
    period_start: str
    period_end: str


class CategorySummaryResponse(CamelModel):
    category: str
    total: Money
    percentage: int
    trend: Literal["up", "down", "stable"]


class PortfolioSummaryResponse(CamelModel):
    total_value: Money
    allocation: dict[str, Money]
    gain_loss: Money


class BudgetSummaryResponse(CamelModel):
    category: str
    limit: Money
    spent: Money
    remaining: Money
    percentage: int


class GoalSummaryResponse(CamelModel):
    name: str
    progress: int
    days_remaining: Optional[int] = None


class FinancialSummaryResponse(CamelModel):
    """Response schema for GET /insights/summary."""

    overview: FinancialOverviewResponse
    top_categories: list[CategorySummaryResponse]
    portfolio: PortfolioSummaryResponse
    budgets: list[BudgetSummaryResponse]
    goals: list[GoalSummaryResponse]


class FinancialContextResponse(CamelModel):
    """Response schema for GET /insights/context."""

    context: str
