"""
Configuration for the MCP server.

Settings come from, in increasing priority:
1. Defaults (a local PostgreSQL database)
2. A dotenv-style config file: the path in MCP_SERVER_CONFIG, or config.env
   next to the server entry point
3. Environment variables, nested with "__" (e.g. DATABASE__HOST=db.internal)
"""
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sample_mcp.database import ConnectionConfig
from sample_mcp.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable holding the config file path
ENV_MCP_SERVER_CONFIG = "MCP_SERVER_CONFIG"

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.env"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    database: ConnectionConfig = Field(default_factory=ConnectionConfig)
    log_level: str = "INFO"
    auto_create_tables: bool = False  # dev helper; the schema is normally pre-migrated

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        extra="ignore",  # Allow unrelated keys in the config file
    )

    def get_log_level(self) -> int:
        """Map the configured level name to a logging level, defaulting to INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def resolve_config_path(path: Optional[Path] = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(ENV_MCP_SERVER_CONFIG)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> Settings:
    """
    Load settings from the config file and the environment.

    A missing config file is not an error: defaults and environment are used.

    Args:
        path: Explicit config file path (optional)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    config_path = resolve_config_path(path)

    env_file = None
    if config_path.exists():
        if not config_path.is_file():
            raise ConfigurationError(f"config path is not a file: {config_path}")
        env_file = config_path
        logger.debug(f"Loading configuration from {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using defaults and environment")

    try:
        return Settings(_env_file=env_file)
    except (ValidationError, OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"failed to load configuration from {config_path}: {e}") from e
