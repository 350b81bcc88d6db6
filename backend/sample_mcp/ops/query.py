"""
Query operations over the account, category and transaction repositories.

QueryOps flattens the repositories' read methods into one surface so callers
(the MCP tools) do not need to know which repository owns which query.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.engine import Engine

from sample_mcp.database import ConnectionConfig, create_session_factory
from sample_mcp.errors import ConfigurationError
from sample_mcp.models import Account, Category, Transaction
from sample_mcp.repositories import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)
from sample_mcp.schemas import TransactionSummary

logger = logging.getLogger(__name__)


class QueryOps:
    """
    Read operations across all repositories.

    Build it one of three ways:
        QueryOps(account_repo, category_repo, transaction_repo)  # repositories
        QueryOps.from_engine(engine)                             # open connection
        QueryOps.from_config(connection_config)                  # connection config

    No validation happens at construction; a missing repository raises
    ConfigurationError on first use.
    """

    def __init__(
        self,
        account_repo: Optional[AccountRepository] = None,
        category_repo: Optional[CategoryRepository] = None,
        transaction_repo: Optional[TransactionRepository] = None,
    ):
        self._account_repo = account_repo
        self._category_repo = category_repo
        self._transaction_repo = transaction_repo

    @classmethod
    def with_repositories(
        cls,
        account_repo: AccountRepository,
        category_repo: CategoryRepository,
        transaction_repo: TransactionRepository,
    ) -> "QueryOps":
        return cls(account_repo, category_repo, transaction_repo)

    @classmethod
    def from_engine(cls, engine: Engine) -> "QueryOps":
        """Build the repositories over an already open engine."""
        session_factory = create_session_factory(engine)
        return cls(
            AccountRepository(session_factory),
            CategoryRepository(session_factory),
            TransactionRepository(session_factory),
        )

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "QueryOps":
        """Acquire a pooled engine from the configuration, then build the repositories."""
        logger.info(
            f"Building QueryOps for {config.db_type.value} database "
            f"{config.db_name} on {config.host}:{config.port}"
        )
        engine = config.pool()
        return cls.from_engine(engine)

    @staticmethod
    def _require(repo, name: str):
        if repo is None:
            raise ConfigurationError(f"QueryOps has no {name} repository configured")
        return repo

    @property
    def accounts(self) -> AccountRepository:
        return self._require(self._account_repo, "account")

    @property
    def categories(self) -> CategoryRepository:
        return self._require(self._category_repo, "category")

    @property
    def transactions(self) -> TransactionRepository:
        return self._require(self._transaction_repo, "transaction")

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def get_account_by_id(self, account_id: int) -> Account:
        return self.accounts.find_by_id(account_id)

    def get_account_by_name(self, name: str) -> Account:
        return self.accounts.find_by_name(name)

    def search_accounts(self, keyword: str) -> List[Account]:
        """Accounts with names containing the keyword."""
        return self.accounts.find_by_name_like(keyword)

    def get_all_accounts(self) -> List[Account]:
        return self.accounts.find_all()

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_category_by_id(self, category_id: int) -> Category:
        return self.categories.find_by_id(category_id)

    def get_categories_by_type(self, category_type: str) -> List[Category]:
        return self.categories.find_by_type(category_type)

    def search_categories(self, keyword: str) -> List[Category]:
        """Categories with names containing the keyword."""
        return self.categories.find_by_name_like(keyword)

    def get_all_categories(self) -> List[Category]:
        return self.categories.find_all()

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def get_transaction_by_id(self, transaction_id: int) -> Transaction:
        return self.transactions.find_by_id(transaction_id)

    def get_transactions_by_account_id(self, account_id: int) -> List[Transaction]:
        return self.transactions.find_by_account_id(account_id)

    def get_transactions_by_date_range(self, start: date, end: date) -> List[Transaction]:
        return self.transactions.find_by_date_range(start, end)

    def get_transactions_by_account_and_date_range(
        self,
        account_id: int,
        start: date,
        end: date,
    ) -> List[Transaction]:
        return self.transactions.find_by_account_and_date_range(account_id, start, end)

    def search_transactions_by_description(self, keyword: str) -> List[Transaction]:
        """Transactions with descriptions containing the keyword."""
        return self.transactions.find_by_description_like(keyword)

    def get_account_balance(self, account_id: int) -> Decimal:
        """Sum of all transaction amounts for the account."""
        return self.transactions.sum_by_account_id(account_id)

    def get_transaction_count(self, account_id: int) -> int:
        return self.transactions.count_by_account_id(account_id)

    def get_latest_transactions(self, account_id: int, limit: int) -> List[Transaction]:
        return self.transactions.find_latest_for_account(account_id, limit)

    def get_transaction_summary_by_category(self, account_id: int) -> List[TransactionSummary]:
        return self.transactions.group_by_category(account_id)

    def get_all_transactions(self) -> List[Transaction]:
        return self.transactions.find_all()
