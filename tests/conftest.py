"""
Pytest configuration and fixtures for the FinBot assistant tests.

This module provides:
- In-memory and file-backed SQLite database fixtures
- In-memory repository fakes for fast service tests
- Factory helpers for transactions, budgets, goals and holdings
- Time helpers for the configured local timezone
- Rate limiter, context builder, chat service and API client fixtures
"""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from finbot.main import app
from finbot.api.deps import get_llm_provider, get_rate_limiter
from finbot.config.settings import Settings, set_settings, reset_settings
from finbot.core.timezone import local_tz, now_local
from finbot.domain.models import (
    Budget,
    GoalStatus,
    HoldingType,
    PortfolioHolding,
    SavingGoal,
    Transaction,
    TransactionType,
)
from finbot.providers import StubChatProvider
from finbot.repositories.sqlalchemy.database import Base, reset_database
# Import ORM models to register them with Base before creating tables
from finbot.repositories.sqlalchemy import orm_models  # noqa: F401
from finbot.repositories.sqlalchemy import (
    SqlAlchemyTransactionRepository,
    SqlAlchemyBudgetRepository,
    SqlAlchemyGoalRepository,
    SqlAlchemyPortfolioRepository,
)
from finbot.services import ChatService, FinancialContextBuilder, RateLimiter


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def local_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in the configured timezone."""
    return local_tz().localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts from default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return local_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# FACTORY HELPERS (exported for use in tests)
# =============================================================================


def make_transaction(
    user_id: str,
    txn_type: TransactionType,
    amount: str,
    category: str,
    occurred_at: datetime,
    description: Optional[str] = None,
) -> Transaction:
    """Build a Transaction with a fresh id."""
    return Transaction(
        txn_id=str(uuid.uuid4()),
        user_id=user_id,
        txn_type=txn_type,
        amount=Decimal(amount),
        category=category,
        occurred_at=occurred_at,
        description=description,
    )


def make_budget(
    user_id: str,
    category: str,
    monthly_limit: str,
    year: int,
    month: int,
    is_active: bool = True,
) -> Budget:
    """Build a Budget with a fresh id."""
    return Budget(
        budget_id=str(uuid.uuid4()),
        user_id=user_id,
        category=category,
        monthly_limit=Decimal(monthly_limit),
        period_year=year,
        period_month=month,
        is_active=is_active,
    )


def make_goal(
    user_id: str,
    name: str,
    target_amount: str,
    current_amount: str = "0",
    deadline: Optional[datetime] = None,
    status: GoalStatus = GoalStatus.ACTIVE,
) -> SavingGoal:
    """Build a SavingGoal with a fresh id."""
    return SavingGoal(
        goal_id=str(uuid.uuid4()),
        user_id=user_id,
        name=name,
        target_amount=Decimal(target_amount),
        current_amount=Decimal(current_amount),
        deadline=deadline,
        status=status,
    )


def make_holding(
    user_id: str,
    asset: str,
    holding_type: HoldingType,
    quantity: str,
    current_value: str,
    purchase_price: Optional[str] = None,
) -> PortfolioHolding:
    """Build a PortfolioHolding with a fresh id."""
    return PortfolioHolding(
        holding_id=str(uuid.uuid4()),
        user_id=user_id,
        asset=asset,
        holding_type=holding_type,
        quantity=Decimal(quantity),
        current_value=Decimal(current_value),
        purchase_price=Decimal(purchase_price) if purchase_price is not None else None,
    )


# =============================================================================
# IN-MEMORY REPOSITORIES
# =============================================================================


class InMemoryTransactionRepository:
    """List-backed TransactionRepository with the same filtering rules as SQL."""

    def __init__(self):
        self.items: list[Transaction] = []

    def create(self, transaction: Transaction) -> Transaction:
        self.items.append(transaction)
        return transaction

    def find_transactions_in_range(self, user_id, start, end) -> list[Transaction]:
        return sorted(
            (t for t in self.items if t.user_id == user_id and start <= t.occurred_at <= end),
            key=lambda t: t.occurred_at,
        )

    def sum_expense_by_category(self, user_id, start, end) -> dict[str, Decimal]:
        totals: dict[str, Decimal] = {}
        for t in self.items:
            if t.user_id == user_id and t.is_expense and start <= t.occurred_at < end:
                totals[t.category] = totals.get(t.category, Decimal("0")) + t.amount
        return totals


class InMemoryBudgetRepository:
    def __init__(self):
        self.items: list[Budget] = []

    def create(self, budget: Budget) -> Budget:
        self.items.append(budget)
        return budget

    def find_active_budgets_for_month(self, user_id, year, month) -> list[Budget]:
        return [
            b for b in self.items
            if b.user_id == user_id
            and b.period_year == year
            and b.period_month == month
            and b.is_active
        ]


class InMemoryGoalRepository:
    def __init__(self):
        self.items: list[SavingGoal] = []

    def create(self, goal: SavingGoal) -> SavingGoal:
        self.items.append(goal)
        return goal

    def find_active_goals(self, user_id) -> list[SavingGoal]:
        return [
            g for g in self.items
            if g.user_id == user_id and g.status == GoalStatus.ACTIVE
        ]


class InMemoryPortfolioRepository:
    def __init__(self):
        self.items: list[PortfolioHolding] = []

    def create(self, holding: PortfolioHolding) -> PortfolioHolding:
        self.items.append(holding)
        return holding

    def find_all_holdings(self, user_id) -> list[PortfolioHolding]:
        return [h for h in self.items if h.user_id == user_id]


class FailingGoalRepository:
    """Goal repository whose store is unavailable."""

    def create(self, goal: SavingGoal) -> SavingGoal:
        raise ConnectionError("Store unavailable")

    def find_active_goals(self, user_id) -> list[SavingGoal]:
        raise ConnectionError("Store unavailable")


@pytest.fixture
def memory_transactions() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def memory_budgets() -> InMemoryBudgetRepository:
    return InMemoryBudgetRepository()


@pytest.fixture
def memory_goals() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def memory_portfolio() -> InMemoryPortfolioRepository:
    return InMemoryPortfolioRepository()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_limiter(fake_clock) -> RateLimiter:
    """Provide a limiter with default limits, a fake clock and no random sweeps."""
    return RateLimiter(clock=fake_clock, sweep_probability=0.0)


@pytest.fixture
def context_builder(
    memory_transactions,
    memory_budgets,
    memory_goals,
    memory_portfolio,
    fixed_now,
) -> FinancialContextBuilder:
    """Provide a FinancialContextBuilder over in-memory repositories."""
    return FinancialContextBuilder(
        transaction_repo=memory_transactions,
        budget_repo=memory_budgets,
        goal_repo=memory_goals,
        portfolio_repo=memory_portfolio,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def stub_provider() -> StubChatProvider:
    return StubChatProvider()


@pytest.fixture
def chat_service(stub_provider, context_builder, fixed_now) -> ChatService:
    """Provide ChatService wired to the stub provider."""
    return ChatService(
        provider=stub_provider,
        context_builder=context_builder,
        clock=lambda: fixed_now,
    )


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def budget_repo(test_session) -> SqlAlchemyBudgetRepository:
    return SqlAlchemyBudgetRepository(test_session)


@pytest.fixture
def goal_repo(test_session) -> SqlAlchemyGoalRepository:
    return SqlAlchemyGoalRepository(test_session)


@pytest.fixture
def portfolio_repo(test_session) -> SqlAlchemyPortfolioRepository:
    return SqlAlchemyPortfolioRepository(test_session)


@pytest.fixture
def file_session_factory(tmp_path):
    """Session factory over a file-backed SQLite database (one connection per session)."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'builder.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def api_limiter() -> RateLimiter:
    """Fresh limiter for every API test."""
    return RateLimiter(sweep_probability=0.0)


@pytest.fixture
def client(tmp_path, api_limiter, stub_provider) -> TestClient:
    """Provide FastAPI test client backed by a temporary SQLite database."""
    set_settings(Settings(data_dir=tmp_path, llm_provider="stub"))
    reset_database()

    app.dependency_overrides[get_rate_limiter] = lambda: api_limiter
    app.dependency_overrides[get_llm_provider] = lambda: stub_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()


def days_ago(days: float) -> datetime:
    """Local time the given number of days before now."""
    return now_local() - timedelta(days=days)
