"""
Integration tests for the SQLAlchemy repositories over SQLite.

Tests cover:
- Inclusive range reads and end-exclusive monthly expense sums
- Local wall-clock round-trip of stored datetimes
- Active budget and goal filtering
- Holdings with and without purchase price
- The context builder reading through one session per repository
"""

import asyncio
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
import pytz
from sqlalchemy.exc import IntegrityError

from finbot.core.timezone import month_bounds
from finbot.domain.models import GoalStatus, HoldingType, TransactionType
from finbot.repositories.sqlalchemy import (
    SqlAlchemyBudgetRepository,
    SqlAlchemyGoalRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTransactionRepository,
)
from finbot.services import FinancialContextBuilder

from tests.conftest import (
    local_datetime,
    make_budget,
    make_goal,
    make_holding,
    make_transaction,
)

USER = "user-1"
INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


# =============================================================================
# TRANSACTION REPOSITORY
# =============================================================================


class TestTransactionRepository:
    def test_create_round_trips_local_time(self, transaction_repo):
        occurred = local_datetime(2024, 6, 1, 8, 15)

        saved = transaction_repo.create(
            make_transaction(USER, EXPENSE, "12500.50", "Food", occurred, "Nasi goreng")
        )

        assert saved.occurred_at == occurred
        assert saved.occurred_at.tzinfo is not None
        assert saved.amount == Decimal("12500.50")
        assert saved.txn_type == EXPENSE
        assert saved.description == "Nasi goreng"

    def test_range_is_inclusive_and_ordered(self, transaction_repo):
        start = local_datetime(2024, 6, 1, 0, 0)
        end = local_datetime(2024, 6, 30, 23, 59)
        transaction_repo.create(make_transaction(USER, EXPENSE, "3", "C", end))
        transaction_repo.create(make_transaction(USER, EXPENSE, "1", "A", start))
        transaction_repo.create(make_transaction(USER, INCOME, "2", "B", local_datetime(2024, 6, 10)))
        transaction_repo.create(
            make_transaction(USER, EXPENSE, "9", "Before", start - timedelta(seconds=1))
        )
        transaction_repo.create(make_transaction("user-2", EXPENSE, "9", "Other", start))

        found = transaction_repo.find_transactions_in_range(USER, start, end)

        assert [t.category for t in found] == ["A", "B", "C"]

    def test_range_accepts_other_timezones(self, transaction_repo):
        """
        GIVEN a transaction at 10:00 Jakarta time (03:00 UTC)
        WHEN the range is given in UTC
        THEN the bounds are compared as the same instants
        """
        transaction_repo.create(
            make_transaction(USER, EXPENSE, "1", "Food", local_datetime(2024, 6, 1, 10))
        )
        three_utc = pytz.utc.localize(datetime(2024, 6, 1, 3, 0))

        hit = transaction_repo.find_transactions_in_range(USER, three_utc, three_utc)
        miss = transaction_repo.find_transactions_in_range(
            USER, three_utc + timedelta(seconds=1), three_utc + timedelta(hours=1)
        )

        assert len(hit) == 1
        assert miss == []

    def test_sum_expense_by_category_is_end_exclusive(self, transaction_repo):
        month_start, month_end = month_bounds(2024, 6)
        transaction_repo.create(make_transaction(USER, EXPENSE, "100", "Food", month_start))
        transaction_repo.create(make_transaction(USER, EXPENSE, "50", "Food", local_datetime(2024, 6, 20)))
        transaction_repo.create(make_transaction(USER, EXPENSE, "70", "Rent", local_datetime(2024, 6, 30, 23, 59, 59)))
        transaction_repo.create(make_transaction(USER, EXPENSE, "999", "Food", month_end))
        transaction_repo.create(make_transaction(USER, INCOME, "500", "Food", local_datetime(2024, 6, 5)))

        totals = transaction_repo.sum_expense_by_category(USER, month_start, month_end)

        assert totals == {"Food": Decimal("150"), "Rent": Decimal("70")}

    def test_sum_for_user_without_expenses(self, transaction_repo):
        month_start, month_end = month_bounds(2024, 6)

        assert transaction_repo.sum_expense_by_category(USER, month_start, month_end) == {}


# =============================================================================
# BUDGET, GOAL AND PORTFOLIO REPOSITORIES
# =============================================================================


class TestBudgetRepository:
    def test_active_budgets_for_month(self, budget_repo):
        budget_repo.create(make_budget(USER, "Transport", "500000", 2024, 6))
        budget_repo.create(make_budget(USER, "Food", "1000000", 2024, 6))
        budget_repo.create(make_budget(USER, "Food", "900000", 2024, 5))
        budget_repo.create(make_budget(USER, "Fun", "100", 2024, 6, is_active=False))
        budget_repo.create(make_budget("user-2", "Food", "1", 2024, 6))

        found = budget_repo.find_active_budgets_for_month(USER, 2024, 6)

        assert [b.category for b in found] == ["Food", "Transport"]
        assert found[0].monthly_limit == Decimal("1000000")
        assert found[0].alert_threshold == 80

    def test_one_budget_per_category_and_month(self, budget_repo):
        budget_repo.create(make_budget(USER, "Food", "1", 2024, 6))

        with pytest.raises(IntegrityError):
            budget_repo.create(make_budget(USER, "Food", "2", 2024, 6))


class TestGoalRepository:
    def test_active_goals_only(self, goal_repo):
        deadline = local_datetime(2024, 12, 31, 23, 59)
        goal_repo.create(make_goal(USER, "Laptop", "15000000", "5000000", deadline=deadline))
        goal_repo.create(make_goal(USER, "Done", "100", "100", status=GoalStatus.COMPLETED))
        goal_repo.create(make_goal("user-2", "Theirs", "100"))

        found = goal_repo.find_active_goals(USER)

        assert len(found) == 1
        assert found[0].name == "Laptop"
        assert found[0].deadline == deadline
        assert found[0].current_amount == Decimal("5000000")

    def test_goal_without_deadline(self, goal_repo):
        goal_repo.create(make_goal(USER, "Someday", "100"))

        assert goal_repo.find_active_goals(USER)[0].deadline is None


class TestPortfolioRepository:
    def test_holdings(self, portfolio_repo):
        portfolio_repo.create(make_holding(USER, "BTC", HoldingType.CRYPTO, "0.5", "1000000000", "800000000"))
        portfolio_repo.create(make_holding(USER, "BBCA", HoldingType.STOCK, "100", "9000"))
        portfolio_repo.create(make_holding("user-2", "ETH", HoldingType.CRYPTO, "1", "1"))

        found = portfolio_repo.find_all_holdings(USER)

        assert [h.asset for h in found] == ["BBCA", "BTC"]
        assert found[0].purchase_price is None
        assert found[1].holding_type == HoldingType.CRYPTO
        assert found[1].market_value == Decimal("500000000")
        assert found[1].cost_basis == Decimal("400000000")


# =============================================================================
# CONTEXT BUILDER OVER SQLITE
# =============================================================================


class TestBuilderOverSqlite:
    """The builder reads concurrently, each repository on its own session."""

    def test_summary_from_database(self, file_session_factory, fixed_now):
        sessions = [file_session_factory() for _ in range(4)]
        try:
            transactions = SqlAlchemyTransactionRepository(sessions[0])
            budgets = SqlAlchemyBudgetRepository(sessions[1])
            goals = SqlAlchemyGoalRepository(sessions[2])
            portfolio = SqlAlchemyPortfolioRepository(sessions[3])

            day = fixed_now - timedelta(days=1)
            transactions.create(make_transaction(USER, EXPENSE, "100000", "Food", day))
            transactions.create(make_transaction(USER, EXPENSE, "50000", "Food", day))
            transactions.create(make_transaction(USER, INCOME, "500000", "Salary", day))
            budgets.create(make_budget(USER, "Food", "200000", 2024, 6))
            goals.create(make_goal(USER, "Laptop", "1000", "250", deadline=fixed_now + timedelta(days=5)))
            portfolio.create(make_holding(USER, "BBCA", HoldingType.STOCK, "10", "9000", "8000"))

            builder = FinancialContextBuilder(
                transactions, budgets, goals, portfolio, clock=lambda: fixed_now
            )
            summary = asyncio.run(builder.get_financial_summary(USER))
        finally:
            for session in sessions:
                session.close()

        assert summary.overview.total_income == Decimal("500000")
        assert summary.overview.total_expense == Decimal("150000")
        assert summary.overview.net_savings == Decimal("350000")
        assert [(c.category, c.total, c.percentage) for c in summary.top_categories] == [
            ("Food", Decimal("150000"), 100)
        ]
        assert summary.budgets[0].spent == Decimal("150000")
        assert summary.budgets[0].percentage == 75
        assert summary.goals[0].progress == 25
        assert summary.goals[0].days_remaining == 5
        assert summary.portfolio.total_value == Decimal("90000")
        assert summary.portfolio.gain_loss == Decimal("10000")
