"""Budget domain model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Budget:
    """Monthly spending limit for one category in one calendar month."""

    budget_id: str
    user_id: str
    category: str
    monthly_limit: Decimal
    period_year: int
    period_month: int
    alert_threshold: int = 80  # percentage
    is_active: bool = True
