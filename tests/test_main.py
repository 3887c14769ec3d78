"""
Tests for the demo entry point.
"""

import logging
import sqlite3

import pytest

import main
from db.connection import ConnectionManager
from db.exceptions import ConfigurationError


class TestMain:
    """Tests for main.main."""

    def test_lists_users_and_closes(self, sqlite_config, monkeypatch, capsys):
        monkeypatch.setattr(main, "DB_CONFIG_PATH", sqlite_config)

        main.main()

        out = capsys.readouterr().out
        assert "Connection to the database established successfully." in out
        assert "User: 1, alice, wonderland" in out
        assert "User: 2, bob, builder" in out
        assert ConnectionManager.is_initialized()

    def test_missing_config_propagates(self, tmp_path, monkeypatch):
        monkeypatch.setattr(main, "DB_CONFIG_PATH", str(tmp_path / "absent.properties"))

        with pytest.raises(ConfigurationError):
            main.main()

    def test_print_users_releases_cursor(self, manager, monkeypatch, capsys):
        released = []
        original = manager.close_result_set

        def tracking_close(cursor):
            released.append(cursor)
            return original(cursor)

        monkeypatch.setattr(manager, "close_result_set", tracking_close)

        main.print_users(manager)

        assert len(released) == 1
        assert "User: 1, alice, wonderland" in capsys.readouterr().out


class TestMainReadFailure:
    """The demo logs a failure while reading rows and still cleans up."""

    @pytest.fixture
    def overflowing_config(self, write_properties, tmp_path):
        db_path = tmp_path / "overflow.db"
        conn = sqlite3.connect(db_path)
        conn.execute(
            """
            CREATE VIEW users AS
            SELECT x AS id,
                   'user' || x AS username,
                   CASE WHEN x = 3 THEN abs(-9223372036854775807 - 1) ELSE 'pw' END AS password
            FROM (SELECT 1 AS x UNION ALL SELECT 2 UNION ALL SELECT 3)
            """
        )
        conn.commit()
        conn.close()
        return write_properties(
            f"url=sqlite:///{db_path}\nusername=u\npassword=p\n", name="overflow.properties"
        )

    def test_connection_closed_after_failed_read(self, overflowing_config, monkeypatch, capsys, caplog):
        monkeypatch.setattr(main, "DB_CONFIG_PATH", overflowing_config)

        with caplog.at_level(logging.ERROR, logger="main"):
            main.main()

        out = capsys.readouterr().out
        assert "Connection to the database established successfully." in out
        assert "User: 1, user1, pw" in out
        assert "Failed to read users" in caplog.text

        conn = ConnectionManager._instance.get_connection()
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
