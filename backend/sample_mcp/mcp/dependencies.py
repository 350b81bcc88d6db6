"""
Shared state and argument validation for MCP tools.
"""
import logging
from datetime import date
from typing import Optional

from sample_mcp.config import load_config
from sample_mcp.ops import QueryOps

logger = logging.getLogger(__name__)

_query_ops: Optional[QueryOps] = None


def get_query_ops() -> QueryOps:
    """
    Query facade used by every tool invocation.
    Built from the loaded configuration on first use and reused afterwards.
    """
    global _query_ops
    if _query_ops is None:
        settings = load_config()
        _query_ops = QueryOps.from_config(settings.database)
    return _query_ops


def set_query_ops(query_ops: Optional[QueryOps]) -> None:
    """Install (or clear, with None) the facade used by the tools."""
    global _query_ops
    _query_ops = query_ops


def parse_date(value: str, field: str = "date") -> date:
    """
    Parse an ISO date (YYYY-MM-DD). A datetime string is truncated to its date.

    Raises:
        ValueError: If the value is not an ISO date
    """
    try:
        return date.fromisoformat(value[:10])
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Invalid {field} {value!r}: expected YYYY-MM-DD") from exc


def clamp_limit(limit: int, maximum: int = 100) -> int:
    return min(max(1, limit), maximum)
