"""
Pytest configuration and shared fixtures.
"""

import sqlite3
from pathlib import Path

import pytest

from db.connection import ConnectionManager


@pytest.fixture(autouse=True)
def reset_singleton():
    """Start and end every test without a shared ConnectionManager."""
    ConnectionManager.reset_instance()
    yield
    if ConnectionManager.is_initialized():
        ConnectionManager._instance.close_connection()
    ConnectionManager.reset_instance()


@pytest.fixture
def write_properties(tmp_path: Path):
    """Factory that writes a properties file and returns its path as a string."""

    def _write(content: str, name: str = "database_config.properties") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sqlite_db_path(tmp_path: Path) -> Path:
    """A SQLite database file with a populated `users` table."""
    db_path = tmp_path / "test.db"
    conn = sqlite3.connect(db_path)
    conn.executescript(
        """
        CREATE TABLE users (
            id       INTEGER PRIMARY KEY,
            username TEXT NOT NULL,
            password TEXT
        );
        INSERT INTO users (id, username, password) VALUES (1, 'alice', 'wonderland');
        INSERT INTO users (id, username, password) VALUES (2, 'bob', 'builder');
        """
    )
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture
def sqlite_config(write_properties, sqlite_db_path: Path) -> str:
    """Properties file pointing at the test SQLite database."""
    return write_properties(
        f"url=sqlite:///{sqlite_db_path}\n"
        "username=tester\n"
        "password=secret\n"
    )


@pytest.fixture
def other_sqlite_config(write_properties, tmp_path: Path) -> str:
    """A second, valid properties file pointing at a different database."""
    other_db = tmp_path / "other.db"
    sqlite3.connect(other_db).close()
    return write_properties(
        f"url=sqlite:///{other_db}\nusername=other\npassword=\n",
        name="other.properties",
    )


@pytest.fixture
def manager(sqlite_config: str):
    """An explicitly constructed manager, closed after the test."""
    mgr = ConnectionManager(sqlite_config)
    yield mgr
    mgr.close_connection()
