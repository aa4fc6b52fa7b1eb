"""Transaction domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finbot.domain.models.enums import TransactionType


@dataclass
class Transaction:
    """
    Single income or expense record.

    Amounts are always positive; direction is carried by txn_type.
    """

    txn_id: str
    user_id: str
    txn_type: TransactionType
    amount: Decimal
    category: str
    occurred_at: datetime
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str):
            self.txn_type = TransactionType(self.txn_type)

    @property
    def is_income(self) -> bool:
        """Return True for income records."""
        return self.txn_type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        """Return True for expense records."""
        return self.txn_type == TransactionType.EXPENSE
