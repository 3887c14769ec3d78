"""
db/drivers.py
-------------
Maps a connection URL to a DB-API driver and opens the connection.

Supported schemes:
    postgresql://host:port/dbname   (also postgres://) -> psycopg2
    sqlite:///path/to/file.db       (also sqlite::memory:) -> sqlite3

A leading ``jdbc:`` prefix is stripped, so JDBC-style URLs work unchanged.
Every connection is opened in autocommit mode: no transactions are managed here.
"""

import sqlite3
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable

import psycopg2

from db.exceptions import DatabaseConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)

_JDBC_PREFIX = "jdbc:"


@dataclass(frozen=True)
class Driver:
    """A DB-API module plus the function that opens a connection with it."""
    name: str
    module: ModuleType
    connect: Callable[[str, str, str], Any]

    @property
    def error(self) -> type:
        """The module's DB-API ``Error`` base class."""
        return self.module.Error


def _connect_postgres(url: str, username: str, password: str):
    conn = psycopg2.connect(url, user=username or None, password=password or None)
    conn.autocommit = True
    return conn


def _connect_sqlite(url: str, username: str, password: str):
    # sqlite has no credentials; username/password are accepted and ignored.
    path = url[len("sqlite:"):]
    if path in ("", "//", ":memory:"):
        path = ":memory:"
    elif path.startswith("///"):
        path = path[3:]
    elif path.startswith("//"):
        path = path[2:]
    return sqlite3.connect(path, isolation_level=None, check_same_thread=False)


_DRIVERS: dict[str, Driver] = {
    "postgresql": Driver("psycopg2", psycopg2, _connect_postgres),
    "postgres": Driver("psycopg2", psycopg2, _connect_postgres),
    "sqlite": Driver("sqlite3", sqlite3, _connect_sqlite),
}


def normalize_url(url: str) -> str:
    """Strip a JDBC prefix and surrounding whitespace from a connection URL."""
    url = url.strip()
    if url.lower().startswith(_JDBC_PREFIX):
        url = url[len(_JDBC_PREFIX):]
    return url


def resolve_driver(url: str) -> Driver:
    """
    Pick the driver for a connection URL by its scheme.

    Raises:
        DatabaseConnectionError: If the scheme is not supported.
    """
    scheme = normalize_url(url).split(":", 1)[0].lower()
    driver = _DRIVERS.get(scheme)
    if driver is None:
        raise DatabaseConnectionError(
            f"Unsupported database URL scheme '{scheme}'", url=url
        )
    return driver


def open_connection(driver: Driver, url: str, username: str, password: str):
    """
    Open a DB-API connection with the given driver.

    Raises:
        DatabaseConnectionError: If the driver rejects the credentials or the
            target is unreachable.
    """
    try:
        conn = driver.connect(normalize_url(url), username, password)
    except driver.error as e:
        logger.error(f"Failed to connect with {driver.name}: {e}")
        raise DatabaseConnectionError(
            "Error establishing database connection", url=url
        ) from e
    logger.info(f"Database connection established ({driver.name}).")
    return conn
