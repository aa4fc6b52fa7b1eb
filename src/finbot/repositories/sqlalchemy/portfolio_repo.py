"""SQLAlchemy implementation of PortfolioRepository."""

from decimal import Decimal

from sqlalchemy.orm import Session

from finbot.domain.models import PortfolioHolding
from finbot.repositories.sqlalchemy.orm_models import PortfolioHoldingORM


class SqlAlchemyPortfolioRepository:
    """SQLAlchemy-backed portfolio repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, holding: PortfolioHolding) -> PortfolioHolding:
        """Persist a new holding."""
        orm_holding = PortfolioHoldingORM(
            holding_id=holding.holding_id,
            user_id=holding.user_id,
            asset=holding.asset,
            holding_type=holding.holding_type,
            quantity=holding.quantity,
            current_value=holding.current_value,
            purchase_price=holding.purchase_price,
        )
        self._db.add(orm_holding)
        self._db.commit()
        self._db.refresh(orm_holding)
        return self._to_domain(orm_holding)

    def find_all_holdings(self, user_id: str) -> list[PortfolioHolding]:
        """List every holding of a user."""
        orm_holdings = (
            self._db.query(PortfolioHoldingORM)
            .filter(PortfolioHoldingORM.user_id == user_id)
            .order_by(PortfolioHoldingORM.asset)
            .all()
        )
        return [self._to_domain(h) for h in orm_holdings]

    @staticmethod
    def _to_domain(orm: PortfolioHoldingORM) -> PortfolioHolding:
        """Convert ORM model to domain model."""
        return PortfolioHolding(
            holding_id=orm.holding_id,
            user_id=orm.user_id,
            asset=orm.asset,
            holding_type=orm.holding_type,
            quantity=Decimal(str(orm.quantity)),
            current_value=Decimal(str(orm.current_value)),
            purchase_price=(
                Decimal(str(orm.purchase_price)) if orm.purchase_price is not None else None
            ),
        )
