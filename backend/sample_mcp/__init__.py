"""
Sample MCP - an MCP server over accounts, categories and transactions.

The data-access layer is a generic repository with per-entity extensions,
flattened into one read surface by QueryOps.
"""
__version__ = "1.0.0"
