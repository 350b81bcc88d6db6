"""
Database connection management using SQLAlchemy.
Builds pooled engines from a ConnectionConfig and bootstraps the schema.
"""
import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseType(str, Enum):
    MYSQL = "MYSQL"
    POSTGRES = "POSTGRES"
    MSSQL = "MSSQL"
    SQLITE = "SQLITE"


# SQLAlchemy driver name and the DBAPI connect() keyword for the connect timeout
_DRIVERS = {
    DatabaseType.POSTGRES: ("postgresql+psycopg", "connect_timeout"),
    DatabaseType.MYSQL: ("mysql+pymysql", "connect_timeout"),
    DatabaseType.MSSQL: ("mssql+pyodbc", "timeout"),
    DatabaseType.SQLITE: ("sqlite", "timeout"),
}


class ConnectionConfig(BaseModel):
    """
    Connection settings for the relational store.
    Field aliases match the keys used in config files (dbType, dbName, ...).
    """
    model_config = ConfigDict(populate_by_name=True)

    db_type: DatabaseType = Field(default=DatabaseType.POSTGRES, alias="dbType")
    host: str = Field(default="localhost", min_length=1)
    port: int = 5432
    username: str = Field(default="jasoet", min_length=1)
    password: str = "localhost"
    db_name: str = Field(default="mcp_db", min_length=1, alias="dbName")
    timeout: float = Field(default=3.0, ge=3.0)  # seconds
    max_idle_conns: int = Field(default=5, ge=1, alias="maxIdleConns")
    max_open_conns: int = Field(default=10, ge=2, alias="maxOpenConns")

    def url(self) -> URL:
        """Build the SQLAlchemy URL for this configuration."""
        drivername, _ = _DRIVERS[self.db_type]
        if self.db_type == DatabaseType.SQLITE:
            # db_name is the database file path
            return URL.create(drivername, database=self.db_name)

        query = {}
        if self.db_type == DatabaseType.MSSQL:
            query = {"driver": "ODBC Driver 18 for SQL Server", "Encrypt": "no"}

        return URL.create(
            drivername,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db_name,
            query=query,
        )

    def pool(self) -> Engine:
        """
        Create a pooled engine and verify the store is reachable.

        Returns:
            Engine ready for use by the repositories

        Raises:
            sqlalchemy.exc.OperationalError: If the store cannot be reached
        """
        _, timeout_arg = _DRIVERS[self.db_type]
        engine = create_engine(
            self.url(),
            pool_pre_ping=True,  # Verify connections before using
            pool_size=self.max_idle_conns,
            max_overflow=max(self.max_open_conns - self.max_idle_conns, 0),
            connect_args={timeout_arg: int(self.timeout)},
            echo=False,
        )
        if self.db_type == DatabaseType.SQLITE:
            enable_sqlite_foreign_keys(engine)

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        logger.info(
            f"Connected to {self.db_type.value} database {self.db_name} "
            f"(pool_size={self.max_idle_conns}, max_open={self.max_open_conns})"
        )
        return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite only enforces foreign keys when asked to, per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory shared by all repositories built over one engine.
    Objects stay readable after commit so they can be returned to callers.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """Create all tables from the model metadata."""
    # Register the models on Base.metadata before creating tables
    from sample_mcp import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.debug("Database schema initialized")
