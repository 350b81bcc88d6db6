"""
MCP (Model Context Protocol) server for Sample MCP.
Provides read-only access to accounts, categories and transactions.

Usage:
    from sample_mcp.mcp.server import mcp

Tools available:
    General:
        - echo

    Accounts:
        - list_accounts
        - get_account
        - get_account_by_name
        - search_accounts
        - get_account_balance
        - get_transaction_count

    Categories:
        - list_categories
        - get_category
        - search_categories

    Transactions:
        - list_transactions
        - get_transaction
        - search_transactions
        - get_latest_transactions
        - get_transaction_summary_by_category
"""
