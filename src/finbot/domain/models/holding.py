"""Portfolio holding domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from finbot.domain.models.enums import HoldingType


@dataclass
class PortfolioHolding:
    """
    Quantity of a named asset with its valuation.

    current_value and purchase_price are per-unit prices.
    """

    holding_id: str
    user_id: str
    asset: str
    holding_type: HoldingType
    quantity: Decimal
    current_value: Decimal
    purchase_price: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if isinstance(self.holding_type, str):
            self.holding_type = HoldingType(self.holding_type)

    @property
    def market_value(self) -> Decimal:
        """Current value of the whole position."""
        return self.current_value * self.quantity

    @property
    def cost_basis(self) -> Decimal:
        """Purchase value of the whole position (current value when unknown)."""
        unit_price = self.purchase_price if self.purchase_price is not None else self.current_value
        return unit_price * self.quantity
