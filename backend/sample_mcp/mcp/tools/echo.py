"""
Echo tool for the MCP server.
"""
import logging
import time

logger = logging.getLogger(__name__)


def echo(message: str) -> str:
    """Return the message prefixed with the current Unix timestamp."""
    logger.info("Handling echo tool call")
    return f"[{int(time.time())}] {message}"
