#!/usr/bin/env python3
"""
Generate realistic demo data for the last 2 months.
Simulates an Indonesian salaried user with daily spending, budgets,
saving goals and a small portfolio.

Usage: python scripts/generate_test_data.py [user_id]
"""

import random
import sys
import uuid
from datetime import timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from finbot.core.timezone import now_local
from finbot.domain.models import (
    Budget,
    GoalPriority,
    HoldingType,
    PortfolioHolding,
    SavingGoal,
    Transaction,
    TransactionType,
)
from finbot.repositories.sqlalchemy import (
    SqlAlchemyBudgetRepository,
    SqlAlchemyGoalRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTransactionRepository,
    get_session,
    init_db,
)

# Category -> (min, max) spend per purchase in Rupiah
EXPENSE_CATEGORIES = {
    "Makanan": (15_000, 120_000),
    "Transportasi": (10_000, 75_000),
    "Belanja": (50_000, 600_000),
    "Hiburan": (40_000, 300_000),
    "Tagihan": (150_000, 900_000),
    "Kesehatan": (30_000, 400_000),
}

MONTHLY_BUDGETS = {
    "Makanan": Decimal("2500000"),
    "Transportasi": Decimal("800000"),
    "Belanja": Decimal("1500000"),
    "Hiburan": Decimal("600000"),
}

HOLDINGS = [
    ("BBCA", HoldingType.STOCK, "200", "9850", "8900"),
    ("TLKM", HoldingType.STOCK, "500", "3120", "3600"),
    ("Reksadana Pasar Uang", HoldingType.FUND, "1500", "1720", "1650"),
    ("BTC", HoldingType.CRYPTO, "0.015", "1050000000", None),
]


def generate_realistic_data(user_id: str) -> None:
    """Generate demo data for one user."""
    init_db()
    session = get_session()
    rng = random.Random(42)
    now = now_local()

    try:
        transactions = SqlAlchemyTransactionRepository(session)
        budgets = SqlAlchemyBudgetRepository(session)
        goals = SqlAlchemyGoalRepository(session)
        portfolio = SqlAlchemyPortfolioRepository(session)

        print(f"Generating data for user '{user_id}'")
        print("=" * 60)

        # Salary on the 25th of each of the last two months
        count = 0
        for months_back in (1, 0):
            payday = (now - relativedelta(months=months_back)).replace(day=25)
            if payday > now:
                continue
            transactions.create(Transaction(
                txn_id=str(uuid.uuid4()),
                user_id=user_id,
                txn_type=TransactionType.INCOME,
                amount=Decimal("12500000"),
                category="Gaji",
                occurred_at=payday.replace(hour=9, minute=0),
                description="Gaji bulanan",
            ))
            count += 1

        # One to three purchases a day for 60 days
        for days_back in range(60, -1, -1):
            day = now - timedelta(days=days_back)
            for _ in range(rng.randint(1, 3)):
                category = rng.choice(list(EXPENSE_CATEGORIES))
                low, high = EXPENSE_CATEGORIES[category]
                occurred_at = day.replace(hour=rng.randint(7, 21), minute=rng.randint(0, 59))
                if occurred_at > now:
                    continue
                transactions.create(Transaction(
                    txn_id=str(uuid.uuid4()),
                    user_id=user_id,
                    txn_type=TransactionType.EXPENSE,
                    amount=Decimal(rng.randrange(low, high, 500)),
                    category=category,
                    occurred_at=occurred_at,
                ))
                count += 1
        print(f"✓ {count} transactions")

        for category, limit in MONTHLY_BUDGETS.items():
            budgets.create(Budget(
                budget_id=str(uuid.uuid4()),
                user_id=user_id,
                category=category,
                monthly_limit=limit,
                period_year=now.year,
                period_month=now.month,
            ))
        print(f"✓ {len(MONTHLY_BUDGETS)} budgets for {now.month}/{now.year}")

        goals.create(SavingGoal(
            goal_id=str(uuid.uuid4()),
            user_id=user_id,
            name="Dana Darurat",
            target_amount=Decimal("30000000"),
            current_amount=Decimal("11250000"),
            priority=GoalPriority.HIGH,
        ))
        goals.create(SavingGoal(
            goal_id=str(uuid.uuid4()),
            user_id=user_id,
            name="Liburan ke Bali",
            target_amount=Decimal("8000000"),
            current_amount=Decimal("2400000"),
            deadline=now + timedelta(days=120),
        ))
        print("✓ 2 saving goals")

        for asset, holding_type, quantity, price, purchase_price in HOLDINGS:
            portfolio.create(PortfolioHolding(
                holding_id=str(uuid.uuid4()),
                user_id=user_id,
                asset=asset,
                holding_type=holding_type,
                quantity=Decimal(quantity),
                current_value=Decimal(price),
                purchase_price=Decimal(purchase_price) if purchase_price else None,
            ))
        print(f"✓ {len(HOLDINGS)} holdings")
    finally:
        session.close()

    print("=" * 60)
    print("Done. Try: curl -H 'X-User-Id: %s' localhost:8001/insights/summary" % user_id)


if __name__ == "__main__":
    generate_realistic_data(sys.argv[1] if len(sys.argv) > 1 else "demo-user")
