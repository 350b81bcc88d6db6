from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


# Account Schemas
class AccountResponse(BaseModel):
    account_id: int
    name: str
    account_type: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Category Schemas
class CategoryResponse(BaseModel):
    category_id: int
    name: str
    category_type: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Transaction Schemas
class TransactionResponse(BaseModel):
    transaction_id: int
    account_id: int
    category_id: int
    amount: Decimal
    transaction_date: date
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    account: Optional[AccountResponse] = None
    category: Optional[CategoryResponse] = None

    model_config = ConfigDict(from_attributes=True)


# Aggregation Schemas
class TransactionSummary(BaseModel):
    """Transactions of one account grouped by category name."""
    category_name: str
    total_amount: Decimal
    count: int
