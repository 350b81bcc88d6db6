"""
Account tools for the MCP server.
"""
from sample_mcp.errors import NotFoundError
from sample_mcp.mcp.dependencies import get_query_ops
from sample_mcp.models import Account
from sample_mcp.schemas import AccountResponse


def account_to_dict(account: Account) -> dict:
    return AccountResponse.model_validate(account).model_dump(mode="json")


def get_account(account_id: int) -> dict | None:
    """
    Get a single account by ID.

    Returns:
        Account dictionary or None if not found
    """
    try:
        account = get_query_ops().get_account_by_id(account_id)
    except NotFoundError:
        return None
    return account_to_dict(account)


def get_account_by_name(name: str) -> dict | None:
    """
    Get the account with exactly this name.

    Returns:
        Account dictionary or None if not found
    """
    try:
        account = get_query_ops().get_account_by_name(name)
    except NotFoundError:
        return None
    return account_to_dict(account)


def search_accounts(keyword: str) -> list[dict]:
    return [account_to_dict(a) for a in get_query_ops().search_accounts(keyword)]


def list_accounts() -> list[dict]:
    return [account_to_dict(a) for a in get_query_ops().get_all_accounts()]


def get_account_balance(account_id: int) -> dict:
    """
    Get the balance (sum of all transaction amounts) of an account.

    Returns:
        Dict with account_id, balance (decimal string) and transaction_count
    """
    query_ops = get_query_ops()
    balance = query_ops.get_account_balance(account_id)
    count = query_ops.get_transaction_count(account_id)
    return {
        "account_id": account_id,
        "balance": str(balance),
        "transaction_count": count,
    }


def get_transaction_count(account_id: int) -> dict:
    return {
        "account_id": account_id,
        "count": get_query_ops().get_transaction_count(account_id),
    }
