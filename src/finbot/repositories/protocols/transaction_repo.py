"""Transaction repository protocol."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from finbot.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for income/expense transaction data access."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        ...

    def find_transactions_in_range(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """List a user's transactions with start <= occurred_at <= end, oldest first."""
        ...

    def sum_expense_by_category(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> dict[str, Decimal]:
        """Total expenses per category with start <= occurred_at < end."""
        ...
