"""Portfolio repository protocol."""

from typing import Protocol

from finbot.domain.models import PortfolioHolding


class PortfolioRepository(Protocol):
    """Interface for portfolio holding data access."""

    def create(self, holding: PortfolioHolding) -> PortfolioHolding:
        """Persist a new holding."""
        ...

    def find_all_holdings(self, user_id: str) -> list[PortfolioHolding]:
        """List every holding of a user."""
        ...
