"""Saving goal domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finbot.domain.models.enums import GoalPriority, GoalStatus


@dataclass
class SavingGoal:
    """Target amount the user is saving towards, with an optional deadline."""

    goal_id: str
    user_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = field(default_factory=lambda: Decimal("0"))
    deadline: Optional[datetime] = None
    priority: GoalPriority = GoalPriority.MEDIUM
    status: GoalStatus = GoalStatus.ACTIVE

    def __post_init__(self) -> None:
        if isinstance(self.priority, str):
            self.priority = GoalPriority(self.priority)
        if isinstance(self.status, str):
            self.status = GoalStatus(self.status)
