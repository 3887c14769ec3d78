"""
db/connection.py
----------------
Owns the single database connection and the helpers that run SQL on it.

Two ways to obtain a manager:
    - ConnectionManager(path): explicit construction, meant to be done once
      at startup and passed to whatever needs the database.
    - ConnectionManager.get_instance(path): shared, lazily created instance
      guarded by double-checked locking. The first path supplied wins; later
      paths are ignored (and logged).
"""

import threading
from typing import Optional

from db.drivers import open_connection, resolve_driver
from db.exceptions import QueryError, ResourceReleaseError
from db.properties import DatabaseConfig, load_properties
from models.row import Row
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionManager:
    """
    Wraps one DB-API connection opened from a properties file.

    The connection is shared by every caller and is NOT guarded by a lock:
    only first-time creation of the shared instance is serialized. Running
    queries on it from several threads at once is only safe if the driver's
    connection object is itself thread-safe.

    Cursors returned by ``execute_query`` must be released by the caller
    with ``close_result_set`` on every exit path.
    """

    _instance: Optional["ConnectionManager"] = None
    _lock = threading.Lock()

    def __init__(self, config_path: str):
        """
        Load the configuration and open the connection.

        Raises:
            ConfigurationError: If the properties file is unusable.
            DatabaseConnectionError: If the connection cannot be opened.
        """
        self.config: DatabaseConfig = load_properties(config_path)
        self._driver = resolve_driver(self.config.url)
        self._connection = open_connection(
            self._driver, self.config.url, self.config.username, self.config.password
        )

    # ── Shared instance ───────────────────────────────────

    @classmethod
    def get_instance(cls, config_path: str) -> "ConnectionManager":
        """
        Return the shared manager, creating it on first call.

        Args:
            config_path: Properties file used only if no instance exists yet.

        Returns:
            The process-wide ConnectionManager.
        """
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    instance = cls._instance = cls(config_path)
                    return instance

        if config_path != instance.config.path:
            logger.warning(
                f"ConnectionManager already initialized from "
                f"{instance.config.path}; ignoring {config_path}"
            )
        return instance

    @classmethod
    def is_initialized(cls) -> bool:
        """True once a shared instance exists, even after its connection is closed."""
        return cls._instance is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance without closing its connection."""
        with cls._lock:
            cls._instance = None

    # ── Connection ────────────────────────────────────────

    @property
    def config_path(self) -> str:
        """Path of the properties file this manager was built from."""
        return self.config.path

    def get_connection(self):
        """Return the underlying connection (open or not)."""
        return self._connection

    @property
    def driver_error(self) -> type:
        """The DB-API ``Error`` base class of the driver behind this connection."""
        return self._driver.error

    def close_connection(self) -> Optional[ResourceReleaseError]:
        """
        Close the connection.

        Returns:
            None on success, or the ResourceReleaseError describing a failed close.
        """
        if self._connection is None:
            return None
        try:
            self._connection.close()
        except self._driver.error as e:
            return self._release_failed("connection", e)
        logger.info("Database connection closed.")
        return None

    # ── Queries ───────────────────────────────────────────

    def execute_query(self, query: str):
        """
        Run a read query and return its open cursor.

        Args:
            query: SQL text.

        Returns:
            A DB-API cursor positioned before the first row.

        Raises:
            QueryError: If the driver rejects the query.
        """
        cursor = None
        try:
            cursor = self._connection.cursor()
            cursor.execute(query)
            return cursor
        except self._driver.error as e:
            self.close_result_set(cursor)
            logger.error(f"Query failed: {e}")
            raise QueryError("Error executing query", query) from e

    def execute_update(self, query: str) -> int:
        """
        Run a mutating statement.

        Returns:
            The number of affected rows as reported by the driver.

        Raises:
            QueryError: If the driver rejects the statement or it produces a result set.
        """
        cursor = None
        try:
            cursor = self._connection.cursor()
            cursor.execute(query)
            if cursor.description is not None:
                logger.error("Update statement returned a result set")
                raise QueryError("Error executing update", query)
            return cursor.rowcount
        except self._driver.error as e:
            logger.error(f"Update failed: {e}")
            raise QueryError("Error executing update", query) from e
        finally:
            self.close_statement(cursor)

    def execute_query_and_return_rows(self, query: str) -> list[Row]:
        """
        Run a query and read the whole result into memory.

        Every returned Row has exactly as many values as the query has
        columns. An empty result gives an empty list.

        Raises:
            QueryError: If execution or fetching fails; no partial result is returned.
        """
        message = "Error executing query and returning rows"
        cursor = None
        try:
            cursor = self._connection.cursor()
            cursor.execute(query)
            description = cursor.description
            if description is None:
                raise QueryError(message, query)
            rows = [Row.from_cursor(description, record) for record in cursor.fetchall()]
        except self._driver.error as e:
            logger.error(f"Query failed: {e}")
            raise QueryError(message, query) from e
        finally:
            self.close_statement(cursor)
        logger.debug(f"Fetched {len(rows)} rows with {len(description)} columns")
        return rows

    # ── Resource release ──────────────────────────────────

    def close_result_set(self, cursor) -> Optional[ResourceReleaseError]:
        """Release a cursor returned by execute_query. None is ignored."""
        return self._close_cursor(cursor, "result set")

    def close_statement(self, cursor) -> Optional[ResourceReleaseError]:
        """Release a statement cursor. None is ignored."""
        return self._close_cursor(cursor, "statement")

    def _close_cursor(self, cursor, resource: str) -> Optional[ResourceReleaseError]:
        if cursor is None:
            return None
        try:
            cursor.close()
        except self._driver.error as e:
            return self._release_failed(resource, e)
        return None

    @staticmethod
    def _release_failed(resource: str, error: Exception) -> ResourceReleaseError:
        logger.error(f"Failed to close {resource}: {error}", exc_info=error)
        return ResourceReleaseError(resource, error)
