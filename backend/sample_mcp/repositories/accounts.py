"""
Account repository: CRUD plus lookups by name.
"""
from typing import List

from sqlalchemy.orm import sessionmaker

from sample_mcp.errors import NotFoundError
from sample_mcp.models import Account
from sample_mcp.repositories.base import Repository


class AccountRepository:
    """Account lookups on top of a generic Repository[Account]."""

    def __init__(self, session_factory: sessionmaker):
        self.base: Repository[Account] = Repository(Account, session_factory)

    def __getattr__(self, name):
        # create, find_by_id, find_all, update, delete, delete_by_id
        return getattr(self.base, name)

    def find_by_name(self, name: str) -> Account:
        """
        Get the account with exactly this name.

        Raises:
            NotFoundError: If no account has the name
        """
        with self.base.session() as db:
            account = db.query(Account).filter(Account.name == name).first()
            if account is None:
                raise NotFoundError("Account", name=name)
            return account

    def find_by_name_like(self, keyword: str) -> List[Account]:
        """Accounts whose name contains the keyword, ignoring case."""
        with self.base.session() as db:
            return db.query(Account).filter(Account.name.ilike(f"%{keyword}%")).all()
