"""
Pytest fixtures for Sample MCP tests.

Each test gets its own temporary SQLite database with foreign keys enforced,
so repositories, the query facade and the tools run against a real store.
"""
import os
import sys
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sample_mcp.database import create_session_factory, enable_sqlite_foreign_keys, init_db  # noqa: E402
from sample_mcp.mcp.dependencies import set_query_ops  # noqa: E402
from sample_mcp.models import Account, Category, Transaction  # noqa: E402
from sample_mcp.ops import QueryOps  # noqa: E402
from sample_mcp.repositories import (  # noqa: E402
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)


@pytest.fixture
def db_engine(tmp_path):
    """Isolated SQLite database file with the schema created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'sample_mcp.db'}")
    enable_sqlite_foreign_keys(engine)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def account_repo(session_factory):
    return AccountRepository(session_factory)


@pytest.fixture
def category_repo(session_factory):
    return CategoryRepository(session_factory)


@pytest.fixture
def transaction_repo(session_factory):
    return TransactionRepository(session_factory)


@pytest.fixture
def query_ops(account_repo, category_repo, transaction_repo):
    return QueryOps(account_repo, category_repo, transaction_repo)


@pytest.fixture
def tool_query_ops(query_ops):
    """Install the facade for the MCP tool functions."""
    set_query_ops(query_ops)
    yield query_ops
    set_query_ops(None)


@pytest.fixture
def ledger(account_repo, category_repo, transaction_repo):
    """
    Two accounts, three categories and a handful of transactions.

    Checking: Food 12.50 (2024-01-01), Food 7.25 (2024-01-15),
              Salary 1500.00 (2024-01-31), Rent -800.00 (2024-02-01, no description)
    Savings:  Salary 200.00 (2024-01-20)
    """
    checking = account_repo.create(Account(name="Checking", account_type="BANK"))
    savings = account_repo.create(Account(name="Savings", account_type="BANK"))
    food = category_repo.create(Category(name="Food", category_type="EXPENSE"))
    rent = category_repo.create(Category(name="Rent", category_type="EXPENSE"))
    salary = category_repo.create(Category(name="Salary", category_type="INCOME"))

    rows = [
        (checking, food, "12.50", date(2024, 1, 1), "Lunch at the corner cafe"),
        (checking, food, "7.25", date(2024, 1, 15), "Groceries"),
        (checking, salary, "1500.00", date(2024, 1, 31), "January salary"),
        (checking, rent, "-800.00", date(2024, 2, 1), None),
        (savings, salary, "200.00", date(2024, 1, 20), "Bonus"),
    ]
    transactions = [
        transaction_repo.create(
            Transaction(
                account_id=account.account_id,
                category_id=category.category_id,
                amount=Decimal(amount),
                transaction_date=booked,
                description=description,
            )
        )
        for account, category, amount, booked, description in rows
    ]

    return {
        "checking": checking,
        "savings": savings,
        "food": food,
        "rent": rent,
        "salary": salary,
        "transactions": transactions,
    }
