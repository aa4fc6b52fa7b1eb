"""Budget repository protocol."""

from typing import Protocol

from finbot.domain.models import Budget


class BudgetRepository(Protocol):
    """Interface for budget data access."""

    def create(self, budget: Budget) -> Budget:
        """Persist a new budget."""
        ...

    def find_active_budgets_for_month(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> list[Budget]:
        """List a user's active budgets for one calendar month."""
        ...
