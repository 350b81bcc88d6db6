"""
SQLAlchemy models for the accounts, categories and transactions tables.
"""
from datetime import datetime

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from sample_mcp.database import Base


class Account(Base):
    __tablename__ = "accounts"

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    account_type = Column(String(50), nullable=False)  # free-text tag, e.g. checking, savings
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")

    def __repr__(self) -> str:
        return f"<Account {self.account_id} {self.name!r}>"


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    category_type = Column(String(50), nullable=False)  # EXPENSE, INCOME, ...
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category {self.category_id} {self.name!r}>"


class Transaction(Base):
    """
    A single booked amount against an account, filed under a category.
    `account` and `category` are only populated when a query loads them eagerly.
    """
    __tablename__ = "transactions"

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.account_id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    transaction_date = Column(Date, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")

    # Indexes
    __table_args__ = (
        Index("idx_transactions_account", "account_id"),
        Index("idx_transactions_account_date", "account_id", "transaction_date"),
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.transaction_id} account={self.account_id} amount={self.amount}>"
