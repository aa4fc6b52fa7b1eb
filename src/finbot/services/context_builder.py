"""Financial context builder: rolls a user's data up for the assistant."""

import asyncio
import math
from collections import defaultdict
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

from finbot.core.timezone import now_local, month_bounds, format_date_label, to_local
from finbot.domain.models import Budget, PortfolioHolding, SavingGoal, Transaction
from finbot.domain.views import (
    BudgetSummary,
    CategorySummary,
    FinancialOverview,
    FinancialSummary,
    GoalSummary,
    PortfolioSummary,
)
from finbot.repositories.protocols import (
    BudgetRepository,
    GoalRepository,
    PortfolioRepository,
    TransactionRepository,
)
from finbot.services.prompts import format_financial_context

UNCATEGORIZED = "Uncategorized"
OTHER_HOLDING_TYPE = "other"


def rounded_percent(part: Decimal, whole: Decimal) -> int:
    """round(part / whole * 100) with halves toward +inf; 0 when whole is not positive."""
    if whole <= 0:
        return 0
    ratio = Decimal(part) / Decimal(whole) * 100
    return math.floor(ratio + Decimal("0.5"))


class FinancialContextBuilder:
    """
    Aggregates transactions, budgets, goals and holdings into a FinancialSummary.

    The summary is a pure function of the repositories at call time. Reads are
    issued concurrently; if any of them fails the whole call fails with the
    repository's own exception.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        budget_repo: BudgetRepository,
        goal_repo: GoalRepository,
        portfolio_repo: PortfolioRepository,
        window_days: int = 30,
        top_category_limit: int = 5,
        clock: Callable[[], datetime] = now_local,
    ):
        self._transactions = transaction_repo
        self._budgets = budget_repo
        self._goals = goal_repo
        self._portfolio = portfolio_repo
        self._window_days = window_days
        self._top_category_limit = top_category_limit
        self._clock = clock

    async def build_financial_context(self, user_id: str) -> str:
        """Render the user's summary as a text block for the system prompt."""
        summary = await self.get_financial_summary(user_id)
        return format_financial_context(summary)

    async def get_financial_summary(self, user_id: str) -> FinancialSummary:
        """
        Compute the summary for the last window_days days ending now.

        Budgets are those of the calendar month containing now, and their
        spending is measured over that whole month rather than the rolling
        window.
        """
        now = self._clock()
        start = now - timedelta(days=self._window_days)
        month_start, month_end = month_bounds(now.year, now.month)

        transactions, holdings, budgets, goals, month_spend = await asyncio.gather(
            asyncio.to_thread(
                self._transactions.find_transactions_in_range, user_id, start, now
            ),
            asyncio.to_thread(self._portfolio.find_all_holdings, user_id),
            asyncio.to_thread(
                self._budgets.find_active_budgets_for_month, user_id, now.year, now.month
            ),
            asyncio.to_thread(self._goals.find_active_goals, user_id),
            asyncio.to_thread(
                self._transactions.sum_expense_by_category, user_id, month_start, month_end
            ),
        )

        overview = self._overview(transactions, start, now)
        return FinancialSummary(
            overview=overview,
            top_categories=self._top_categories(transactions, overview.total_expense),
            portfolio=self._portfolio_summary(holdings),
            budgets=self._budget_summaries(budgets, month_spend),
            goals=self._goal_summaries(goals, now),
        )

    @staticmethod
    def _overview(
        transactions: list[Transaction],
        start: datetime,
        end: datetime,
    ) -> FinancialOverview:
        total_income = sum((t.amount for t in transactions if t.is_income), Decimal("0"))
        total_expense = sum((t.amount for t in transactions if t.is_expense), Decimal("0"))
        return FinancialOverview(
            total_income=total_income,
            total_expense=total_expense,
            net_savings=total_income - total_expense,
            period_start=format_date_label(start),
            period_end=format_date_label(end),
        )

    def _top_categories(
        self,
        transactions: list[Transaction],
        total_expense: Decimal,
    ) -> list[CategorySummary]:
        totals: dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
        for txn in transactions:
            if txn.is_expense:
                totals[txn.category or UNCATEGORIZED] += txn.amount

        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [
            CategorySummary(
                category=category,
                total=total,
                percentage=rounded_percent(total, total_expense),
            )
            for category, total in ranked[: self._top_category_limit]
        ]

    @staticmethod
    def _portfolio_summary(holdings: list[PortfolioHolding]) -> PortfolioSummary:
        allocation: dict[str, Decimal] = {}
        total_value = Decimal("0")
        total_cost = Decimal("0")

        for holding in holdings:
            value = holding.market_value
            total_value += value
            total_cost += holding.cost_basis

            key = holding.holding_type.value if holding.holding_type else OTHER_HOLDING_TYPE
            allocation[key] = allocation.get(key, Decimal("0")) + value

        return PortfolioSummary(
            total_value=total_value,
            allocation=allocation,
            gain_loss=total_value - total_cost,
        )

    @staticmethod
    def _budget_summaries(
        budgets: list[Budget],
        month_spend: dict[str, Decimal],
    ) -> list[BudgetSummary]:
        summaries = []
        for budget in budgets:
            spent = month_spend.get(budget.category, Decimal("0"))
            summaries.append(
                BudgetSummary(
                    category=budget.category,
                    limit=budget.monthly_limit,
                    spent=spent,
                    remaining=budget.monthly_limit - spent,
                    percentage=rounded_percent(spent, budget.monthly_limit),
                )
            )
        return summaries

    @staticmethod
    def _goal_summaries(goals: list[SavingGoal], now: datetime) -> list[GoalSummary]:
        summaries = []
        for goal in goals:
            days_remaining = None
            if goal.deadline is not None:
                seconds_left = (to_local(goal.deadline) - now).total_seconds()
                days_remaining = max(0, math.ceil(seconds_left / 86400))

            summaries.append(
                GoalSummary(
                    name=goal.name,
                    progress=min(100, rounded_percent(goal.current_amount, goal.target_amount)),
                    days_remaining=days_remaining,
                )
            )
        return summaries
