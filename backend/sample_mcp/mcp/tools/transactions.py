"""
Transaction tools for the MCP server.
"""
from typing import Optional

from sqlalchemy import inspect

from sample_mcp.errors import NotFoundError
from sample_mcp.mcp.dependencies import clamp_limit, get_query_ops, parse_date
from sample_mcp.models import Transaction
from sample_mcp.schemas import (
    AccountResponse,
    CategoryResponse,
    TransactionResponse,
    TransactionSummary,
)


def _loaded(txn: Transaction, relation: str):
    """The related object if the query loaded it, else None."""
    if relation in inspect(txn).unloaded:
        return None
    return getattr(txn, relation)


def transaction_to_dict(txn: Transaction) -> dict:
    account = _loaded(txn, "account")
    category = _loaded(txn, "category")
    response = TransactionResponse(
        transaction_id=txn.transaction_id,
        account_id=txn.account_id,
        category_id=txn.category_id,
        amount=txn.amount,
        transaction_date=txn.transaction_date,
        description=txn.description,
        created_at=txn.created_at,
        updated_at=txn.updated_at,
        account=AccountResponse.model_validate(account) if account else None,
        category=CategoryResponse.model_validate(category) if category else None,
    )
    return response.model_dump(mode="json")


def summary_to_dict(summary: TransactionSummary) -> dict:
    return summary.model_dump(mode="json")


def get_transaction(transaction_id: int) -> dict | None:
    """
    Get a single transaction by ID.

    Returns:
        Transaction dictionary or None if not found
    """
    try:
        txn = get_query_ops().get_transaction_by_id(transaction_id)
    except NotFoundError:
        return None
    return transaction_to_dict(txn)


def list_transactions(
    account_id: Optional[int] = None,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
) -> list[dict]:
    """
    List transactions, optionally for one account and/or within a date range.

    Args:
        account_id: Filter by account ID (optional)
        from_date: Start date in ISO format, inclusive (required with to_date)
        to_date: End date in ISO format, inclusive (required with from_date)

    Returns:
        List of transaction dictionaries with account and category info
    """
    if (from_date is None) != (to_date is None):
        raise ValueError("from_date and to_date must be given together")

    query_ops = get_query_ops()

    if from_date is not None:
        start = parse_date(from_date, "from_date")
        end = parse_date(to_date, "to_date")
        if account_id is not None:
            transactions = query_ops.get_transactions_by_account_and_date_range(account_id, start, end)
        else:
            transactions = query_ops.get_transactions_by_date_range(start, end)
    elif account_id is not None:
        transactions = query_ops.get_transactions_by_account_id(account_id)
    else:
        transactions = query_ops.get_all_transactions()

    return [transaction_to_dict(txn) for txn in transactions]


def search_transactions(keyword: str) -> list[dict]:
    """Transactions whose description contains the keyword (case-insensitive)."""
    return [
        transaction_to_dict(txn)
        for txn in get_query_ops().search_transactions_by_description(keyword)
    ]


def get_latest_transactions(account_id: int, limit: int = 10) -> list[dict]:
    """
    Most recent transactions of an account, newest first.

    Args:
        account_id: The account's ID
        limit: Max results (default: 10, max: 100)
    """
    limit = clamp_limit(limit)
    return [
        transaction_to_dict(txn)
        for txn in get_query_ops().get_latest_transactions(account_id, limit)
    ]


def get_transaction_summary_by_category(account_id: int) -> list[dict]:
    return [
        summary_to_dict(summary)
        for summary in get_query_ops().get_transaction_summary_by_category(account_id)
    ]
