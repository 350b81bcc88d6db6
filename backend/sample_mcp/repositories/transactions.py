"""
Transaction repository: CRUD plus filtered, ordered and aggregated queries.

List queries eagerly load each transaction's account and category so callers
can read them without a second lookup.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import joinedload, sessionmaker

from sample_mcp.models import Category, Transaction
from sample_mcp.repositories.base import Repository
from sample_mcp.schemas import TransactionSummary

CENT = Decimal("0.01")


def _as_date(value: date) -> date:
    """Transaction dates carry no time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


class TransactionRepository:
    """Transaction queries on top of a generic Repository[Transaction]."""

    def __init__(self, session_factory: sessionmaker):
        self.base: Repository[Transaction] = Repository(Transaction, session_factory)

    def __getattr__(self, name):
        return getattr(self.base, name)

    @staticmethod
    def _eager(db):
        return db.query(Transaction).options(
            joinedload(Transaction.account),
            joinedload(Transaction.category),
        )

    def find_all(self) -> List[Transaction]:
        with self.base.session() as db:
            return self._eager(db).all()

    def find_by_account_id(self, account_id: int) -> List[Transaction]:
        with self.base.session() as db:
            return (
                self._eager(db)
                .filter(Transaction.account_id == account_id)
                .all()
            )

    def find_by_date_range(self, start: date, end: date) -> List[Transaction]:
        """Transactions dated between start and end, both inclusive."""
        with self.base.session() as db:
            return (
                self._eager(db)
                .filter(Transaction.transaction_date.between(_as_date(start), _as_date(end)))
                .all()
            )

    def find_by_description_like(self, keyword: str) -> List[Transaction]:
        """
        Transactions whose description contains the keyword, ignoring case.
        Transactions without a description never match, even for an empty keyword.
        """
        with self.base.session() as db:
            return (
                self._eager(db)
                .filter(
                    Transaction.description.isnot(None),
                    Transaction.description.ilike(f"%{keyword}%"),
                )
                .all()
            )

    def find_by_account_and_date_range(
        self,
        account_id: int,
        start: date,
        end: date,
    ) -> List[Transaction]:
        """Transactions of one account within the date range, most recent first."""
        with self.base.session() as db:
            return (
                self._eager(db)
                .filter(
                    Transaction.account_id == account_id,
                    Transaction.transaction_date.between(_as_date(start), _as_date(end)),
                )
                .order_by(Transaction.transaction_date.desc())
                .all()
            )

    def sum_by_account_id(self, account_id: int) -> Decimal:
        """Total amount booked on the account; 0.00 when it has no transactions."""
        with self.base.session() as db:
            total = (
                db.query(func.coalesce(func.sum(Transaction.amount), 0))
                .filter(Transaction.account_id == account_id)
                .scalar()
            )
            return Decimal(str(total)).quantize(CENT)

    def count_by_account_id(self, account_id: int) -> int:
        with self.base.session() as db:
            count = (
                db.query(func.count(Transaction.transaction_id))
                .filter(Transaction.account_id == account_id)
                .scalar()
            )
            return int(count or 0)

    def find_latest_for_account(self, account_id: int, limit: int) -> List[Transaction]:
        """
        The most recent transactions of an account.

        Args:
            account_id: Account to read
            limit: Maximum number of transactions to return (at least 1)

        Returns:
            Up to `limit` transactions ordered by date, newest first
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        with self.base.session() as db:
            return (
                self._eager(db)
                .filter(Transaction.account_id == account_id)
                .order_by(
                    Transaction.transaction_date.desc(),
                    Transaction.transaction_id.desc(),
                )
                .limit(limit)
                .all()
            )

    def group_by_category(self, account_id: int) -> List[TransactionSummary]:
        """
        Total amount and transaction count per category for one account.
        Categories the account never used are not listed.
        """
        with self.base.session() as db:
            rows = (
                db.query(
                    Category.name.label("category_name"),
                    func.sum(Transaction.amount).label("total_amount"),
                    func.count(Transaction.transaction_id).label("transaction_count"),
                )
                .select_from(Transaction)
                .join(Category, Transaction.category_id == Category.category_id)
                .filter(Transaction.account_id == account_id)
                .group_by(Category.name)
                .order_by(Category.name)
                .all()
            )

            return [
                TransactionSummary(
                    category_name=row.category_name,
                    total_amount=Decimal(str(row.total_amount or 0)).quantize(CENT),
                    count=row.transaction_count,
                )
                for row in rows
            ]
