"""
Repositories over the accounts, categories and transactions tables.

Structure:
- base.py: generic Repository with Create/FindByID/FindAll/Update/Delete
- accounts.py: AccountRepository (lookups by name)
- categories.py: CategoryRepository (lookups by type and name)
- transactions.py: TransactionRepository (date ranges, search, sums, grouping)
"""
from .accounts import AccountRepository
from .base import Repository
from .categories import CategoryRepository
from .transactions import TransactionRepository

__all__ = [
    "AccountRepository",
    "CategoryRepository",
    "Repository",
    "TransactionRepository",
]
