"""SQLAlchemy implementation of BudgetRepository."""

from decimal import Decimal

from sqlalchemy.orm import Session

from finbot.domain.models import Budget
from finbot.repositories.sqlalchemy.orm_models import BudgetORM


class SqlAlchemyBudgetRepository:
    """SQLAlchemy-backed budget repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, budget: Budget) -> Budget:
        """Persist a new budget."""
        orm_budget = BudgetORM(
            budget_id=budget.budget_id,
            user_id=budget.user_id,
            category=budget.category,
            monthly_limit=budget.monthly_limit,
            period_year=budget.period_year,
            period_month=budget.period_month,
            alert_threshold=budget.alert_threshold,
            is_active=budget.is_active,
        )
        self._db.add(orm_budget)
        self._db.commit()
        self._db.refresh(orm_budget)
        return self._to_domain(orm_budget)

    def find_active_budgets_for_month(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> list[Budget]:
        """List a user's active budgets for one calendar month."""
        orm_budgets = (
            self._db.query(BudgetORM)
            .filter(
                BudgetORM.user_id == user_id,
                BudgetORM.period_year == year,
                BudgetORM.period_month == month,
                BudgetORM.is_active == True,  # noqa: E712
            )
            .order_by(BudgetORM.category)
            .all()
        )
        return [self._to_domain(b) for b in orm_budgets]

    @staticmethod
    def _to_domain(orm: BudgetORM) -> Budget:
        """Convert ORM model to domain model."""
        return Budget(
            budget_id=orm.budget_id,
            user_id=orm.user_id,
            category=orm.category,
            monthly_limit=Decimal(str(orm.monthly_limit)),
            period_year=orm.period_year,
            period_month=orm.period_month,
            alert_threshold=orm.alert_threshold,
            is_active=orm.is_active,
        )
