"""Saving goal repository protocol."""

from typing import Protocol

from finbot.domain.models import SavingGoal


class GoalRepository(Protocol):
    """Interface for saving goal data access."""

    def create(self, goal: SavingGoal) -> SavingGoal:
        """Persist a new saving goal."""
        ...

    def find_active_goals(self, user_id: str) -> list[SavingGoal]:
        """List a user's goals with status active."""
        ...
