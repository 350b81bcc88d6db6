"""
Entry point for the Sample MCP Server.

Usage:
    stdio mode (for Claude Desktop):
        python mcp_server.py

    HTTP mode (for web deployment):
        uvicorn mcp_server:app --port 8001

    Using FastMCP CLI:
        fastmcp run mcp_server.py

Configuration is read from the file named by MCP_SERVER_CONFIG (default:
config.env next to this file) and from the environment.
"""
import logging

from dotenv import load_dotenv

from sample_mcp.config import LOG_FORMAT, load_config
from sample_mcp.database import init_db
from sample_mcp.mcp.dependencies import set_query_ops
from sample_mcp.mcp.server import mcp
from sample_mcp.ops import QueryOps

load_dotenv()

settings = load_config()

# Configure logging
logging.basicConfig(level=settings.get_log_level(), format=LOG_FORMAT)
logger = logging.getLogger("sample_mcp")

db = settings.database
logger.info(
    f"Database configuration loaded: Type={db.db_type.value}, Host={db.host}, "
    f"Port={db.port}, Database={db.db_name}"
)

# Guarded dev helper (the schema is normally created by migrations)
if settings.auto_create_tables:
    logger.warning("AUTO_CREATE_TABLES is enabled; creating tables via SQLAlchemy metadata.")
    engine = db.pool()
    init_db(engine)
    set_query_ops(QueryOps.from_engine(engine))

# HTTP app for uvicorn deployment
app = mcp.http_app()

if __name__ == "__main__":
    # Run in stdio mode for Claude Desktop
    mcp.run()
