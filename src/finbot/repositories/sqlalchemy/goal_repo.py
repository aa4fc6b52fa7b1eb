"""SQLAlchemy implementation of GoalRepository."""

from decimal import Decimal

from sqlalchemy.orm import Session

from finbot.core.timezone import to_local, to_naive_local
from finbot.domain.models import SavingGoal, GoalStatus
from finbot.repositories.sqlalchemy.orm_models import SavingGoalORM


class SqlAlchemyGoalRepository:
    """SQLAlchemy-backed saving goal repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, goal: SavingGoal) -> SavingGoal:
        """Persist a new saving goal."""
        orm_goal = SavingGoalORM(
            goal_id=goal.goal_id,
            user_id=goal.user_id,
            name=goal.name,
            target_amount=goal.target_amount,
            current_amount=goal.current_amount,
            deadline=to_naive_local(goal.deadline) if goal.deadline else None,
            priority=goal.priority,
            status=goal.status,
        )
        self._db.add(orm_goal)
        self._db.commit()
        self._db.refresh(orm_goal)
        return self._to_domain(orm_goal)

    def find_active_goals(self, user_id: str) -> list[SavingGoal]:
        """List a user's goals with status active."""
        orm_goals = (
            self._db.query(SavingGoalORM)
            .filter(
                SavingGoalORM.user_id == user_id,
                SavingGoalORM.status == GoalStatus.ACTIVE,
            )
            .order_by(SavingGoalORM.name)
            .all()
        )
        return [self._to_domain(g) for g in orm_goals]

    @staticmethod
    def _to_domain(orm: SavingGoalORM) -> SavingGoal:
        """Convert ORM model to domain model."""
        return SavingGoal(
            goal_id=orm.goal_id,
            user_id=orm.user_id,
            name=orm.name,
            target_amount=Decimal(str(orm.target_amount)),
            current_amount=Decimal(str(orm.current_amount)) if orm.current_amount else Decimal("0"),
            deadline=to_local(orm.deadline) if orm.deadline else None,
            priority=orm.priority,
            status=orm.status,
        )
