"""
Tests for configuration loading and connection settings.
"""
import pytest
from pydantic import ValidationError

from sample_mcp.config import ENV_MCP_SERVER_CONFIG, load_config, resolve_config_path
from sample_mcp.database import ConnectionConfig, DatabaseType
from sample_mcp.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(ENV_MCP_SERVER_CONFIG, raising=False)
    for key in (
        "DATABASE__HOST",
        "DATABASE__PORT",
        "DATABASE__DB_TYPE",
        "DATABASE__DB_NAME",
        "LOG_LEVEL",
        "AUTO_CREATE_TABLES",
    ):
        monkeypatch.delenv(key, raising=False)


def test_missing_config_file_uses_defaults(tmp_path) -> None:
    settings = load_config(tmp_path / "absent.env")

    assert settings.database.db_type == DatabaseType.POSTGRES
    assert settings.database.host == "localhost"
    assert settings.database.port == 5432
    assert settings.database.db_name == "mcp_db"
    assert settings.database.timeout == 3.0
    assert settings.database.max_idle_conns == 5
    assert settings.database.max_open_conns == 10
    assert settings.auto_create_tables is False


def test_config_file_values(tmp_path) -> None:
    config_file = tmp_path / "config.env"
    config_file.write_text(
        "DATABASE__HOST=db.internal\n"
        "DATABASE__PORT=6543\n"
        "DATABASE__DB_NAME=ledger\n"
        "LOG_LEVEL=debug\n"
    )

    settings = load_config(config_file)

    assert settings.database.host == "db.internal"
    assert settings.database.port == 6543
    assert settings.database.db_name == "ledger"
    assert settings.get_log_level() == 10


def test_config_path_from_environment(tmp_path, monkeypatch) -> None:
    config_file = tmp_path / "from-env.env"
    config_file.write_text("DATABASE__DB_TYPE=MYSQL\n")
    monkeypatch.setenv(ENV_MCP_SERVER_CONFIG, str(config_file))

    assert resolve_config_path() == config_file
    assert load_config().database.db_type == DatabaseType.MYSQL


def test_environment_overrides_config_file(tmp_path, monkeypatch) -> None:
    config_file = tmp_path / "config.env"
    config_file.write_text("DATABASE__HOST=from-file\n")
    monkeypatch.setenv("DATABASE__HOST", "from-env")

    assert load_config(config_file).database.host == "from-env"


def test_invalid_config_value_raises_configuration_error(tmp_path) -> None:
    config_file = tmp_path / "config.env"
    config_file.write_text("DATABASE__TIMEOUT=1\n")

    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_config_path_that_is_a_directory_raises(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(tmp_path)


def test_unknown_log_level_defaults_to_info(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert load_config(tmp_path / "absent.env").get_log_level() == 20


def test_connection_config_accepts_file_style_keys() -> None:
    config = ConnectionConfig.model_validate(
        {"dbType": "MSSQL", "dbName": "reports", "maxIdleConns": 2, "maxOpenConns": 4}
    )

    assert config.db_type == DatabaseType.MSSQL
    assert config.db_name == "reports"
    assert config.max_idle_conns == 2


def test_connection_config_validation() -> None:
    with pytest.raises(ValidationError):
        ConnectionConfig(timeout=2)
    with pytest.raises(ValidationError):
        ConnectionConfig(max_open_conns=1)
    with pytest.raises(ValidationError):
        ConnectionConfig(host="")
    with pytest.raises(ValidationError):
        ConnectionConfig(db_type="ORACLE")


def test_postgres_url() -> None:
    url = ConnectionConfig(host="db", port=5433, username="app", password="secret", db_name="mcp").url()

    assert url.drivername == "postgresql+psycopg"
    assert url.host == "db"
    assert url.port == 5433
    assert url.username == "app"
    assert url.password == "secret"
    assert url.database == "mcp"


def test_sqlite_url_uses_db_name_as_path() -> None:
    url = ConnectionConfig(db_type=DatabaseType.SQLITE, db_name="/tmp/ledger.db").url()

    assert url.drivername == "sqlite"
    assert url.database == "/tmp/ledger.db"
    assert url.host is None
