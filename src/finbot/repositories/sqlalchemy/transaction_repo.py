"""SQLAlchemy implementation of TransactionRepository."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from finbot.core.timezone import to_local, to_naive_local
from finbot.domain.models import Transaction, TransactionType
from finbot.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        self._db.add(orm_txn)
        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def find_transactions_in_range(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """List a user's transactions with start <= occurred_at <= end, oldest first."""
        query = (
            self._db.query(TransactionORM)
            .filter(
                and_(
                    TransactionORM.user_id == user_id,
                    TransactionORM.occurred_at >= to_naive_local(start),
                    TransactionORM.occurred_at <= to_naive_local(end),
                )
            )
            .order_by(TransactionORM.occurred_at)
        )
        return [self._to_domain(t) for t in query.all()]

    def sum_expense_by_category(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> dict[str, Decimal]:
        """Total expenses per category with start <= occurred_at < end."""
        rows = (
            self._db.query(TransactionORM.category, func.sum(TransactionORM.amount))
            .filter(
                and_(
                    TransactionORM.user_id == user_id,
                    TransactionORM.txn_type == TransactionType.EXPENSE,
                    TransactionORM.occurred_at >= to_naive_local(start),
                    TransactionORM.occurred_at < to_naive_local(end),
                )
            )
            .group_by(TransactionORM.category)
            .all()
        )
        return {
            category: Decimal(str(total)) if total is not None else Decimal("0")
            for category, total in rows
        }

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            txn_id=txn.txn_id,
            user_id=txn.user_id,
            txn_type=txn.txn_type,
            amount=txn.amount,
            category=txn.category,
            description=txn.description,
            occurred_at=to_naive_local(txn.occurred_at),
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            txn_id=orm.txn_id,
            user_id=orm.user_id,
            txn_type=orm.txn_type,
            amount=Decimal(str(orm.amount)) if orm.amount is not None else Decimal("0"),
            category=orm.category,
            occurred_at=to_local(orm.occurred_at),
            description=orm.description,
        )
