"""
Main FastMCP server setup for Sample MCP.
Registers all tools from the tools modules.
"""
from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from sample_mcp.mcp.tools import accounts, categories, echo, transactions

# Initialize FastMCP server
mcp = FastMCP(
    name="Sample MCP",
    instructions="""
Sample MCP Server - Read access to accounts, categories and transactions.

## Available functionality
- **Echo**: Echo a message back with a timestamp
- **Accounts**: Look up by ID or name, search, list, balance and transaction count
- **Categories**: Look up by ID, list (optionally by type), search
- **Transactions**: Look up by ID, list by account and/or date range, search
  descriptions, latest per account, totals per category

Dates are ISO formatted (YYYY-MM-DD) and date ranges are inclusive.
Amounts are returned as decimal strings with two fractional digits.
Lookups by ID or name return null when nothing matches.
"""
)


@mcp.custom_route("/health", methods=["GET"])
async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "healthy", "service": "mcp"})


# ============================================================================
# Echo Tool
# ============================================================================

@mcp.tool(name="echo")
def echo_message(message: str) -> str:
    """
    Echoes back the input message.

    Args:
        message: The message to echo back

    Returns:
        The message prefixed with the current Unix timestamp, e.g. "[1700000000] hello"
    """
    return echo.echo(message)


# ============================================================================
# Account Tools
# ============================================================================

@mcp.tool
def list_accounts() -> list[dict]:
    """
    List all accounts.

    Returns:
        List of account dictionaries with account_id, name, account_type and timestamps
    """
    return accounts.list_accounts()


@mcp.tool
def get_account(account_id: int) -> dict | None:
    """
    Get a single account by ID.

    Args:
        account_id: The account's ID

    Returns:
        Account dictionary or None if not found
    """
    return accounts.get_account(account_id)


@mcp.tool
def get_account_by_name(name: str) -> dict | None:
    """
    Get the account with exactly this name.

    Args:
        name: The account's name (exact match)

    Returns:
        Account dictionary or None if not found
    """
    return accounts.get_account_by_name(name)


@mcp.tool
def search_accounts(keyword: str) -> list[dict]:
    """
    Search accounts whose name contains the keyword (case-insensitive).

    Args:
        keyword: Text to look for in account names

    Returns:
        List of matching accounts (empty if none)
    """
    return accounts.search_accounts(keyword)


@mcp.tool
def get_account_balance(account_id: int) -> dict:
    """
    Get the balance of an account: the sum of all its transaction amounts.

    Args:
        account_id: The account's ID

    Returns:
        Dict with account_id, balance and transaction_count (balance is "0.00" with no transactions)
    """
    return accounts.get_account_balance(account_id)


@mcp.tool
def get_transaction_count(account_id: int) -> dict:
    """
    Count the transactions of an account.

    Args:
        account_id: The account's ID

    Returns:
        Dict with account_id and count
    """
    return accounts.get_transaction_count(account_id)


# ============================================================================
# Category Tools
# ============================================================================

@mcp.tool
def list_categories(category_type: str | None = None) -> list[dict]:
    """
    List categories.

    Args:
        category_type: Only categories of this type, e.g. EXPENSE or INCOME (optional)

    Returns:
        List of category dictionaries with category_id, name, category_type and timestamps
    """
    return categories.list_categories(category_type)


@mcp.tool
def get_category(category_id: int) -> dict | None:
    """
    Get a single category by ID.

    Args:
        category_id: The category's ID

    Returns:
        Category dictionary or None if not found
    """
    return categories.get_category(category_id)


@mcp.tool
def search_categories(keyword: str) -> list[dict]:
    """
    Search categories whose name contains the keyword (case-insensitive).

    Args:
        keyword: Text to look for in category names

    Returns:
        List of matching categories (empty if none)
    """
    return categories.search_categories(keyword)


# ============================================================================
# Transaction Tools
# ============================================================================

@mcp.tool
def list_transactions(
    account_id: int | None = None,
    from_date: str | None = None,
    to_date: str | None = None,
) -> list[dict]:
    """
    List transactions with optional filtering.

    With both an account and a date range, results are ordered newest first.

    Args:
        account_id: Filter by account ID (optional)
        from_date: Start date YYYY-MM-DD, inclusive (optional, requires to_date)
        to_date: End date YYYY-MM-DD, inclusive (optional, requires from_date)

    Returns:
        List of transaction dictionaries with account and category info
    """
    return transactions.list_transactions(account_id, from_date, to_date)


@mcp.tool
def get_transaction(transaction_id: int) -> dict | None:
    """
    Get a single transaction by ID.

    Args:
        transaction_id: The transaction's ID

    Returns:
        Transaction dictionary or None if not found
    """
    return transactions.get_transaction(transaction_id)


@mcp.tool
def search_transactions(keyword: str) -> list[dict]:
    """
    Search transactions by description (case-insensitive substring match).
    Transactions without a description are never returned.

    Args:
        keyword: Text to look for in descriptions

    Returns:
        List of matching transactions with account and category info
    """
    return transactions.search_transactions(keyword)


@mcp.tool
def get_latest_transactions(account_id: int, limit: int = 10) -> list[dict]:
    """
    Get the most recent transactions of an account, newest first.

    Args:
        account_id: The account's ID
        limit: Max number of transactions (default: 10, max: 100)

    Returns:
        List of transactions with account and category info
    """
    return transactions.get_latest_transactions(account_id, limit)


@mcp.tool
def get_transaction_summary_by_category(account_id: int) -> list[dict]:
    """
    Get an account's transactions grouped by category.

    Args:
        account_id: The account's ID

    Returns:
        One entry per category used by the account, with category_name, total_amount and count
    """
    return transactions.get_transaction_summary_by_category(account_id)
