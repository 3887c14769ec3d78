"""
main.py
-------
Demo entry point.

Responsibilities:
    - Acquire the shared ConnectionManager from the configured properties file.
    - List every user in the `users` table.
    - Release the cursor and close the connection.
"""

from config import DB_CONFIG_PATH
from db.connection import ConnectionManager
from utils.logger import get_logger

logger = get_logger(__name__)

USERS_QUERY = "SELECT * FROM users"


def print_users(manager: ConnectionManager) -> None:
    """
    Print id, username and password of every row in `users`.

    A driver error while reading rows is logged with its traceback and the
    listing stops there; the cursor is always released.
    """
    cursor = manager.execute_query(USERS_QUERY)
    try:
        columns = [col[0] for col in cursor.description]
        id_idx = columns.index("id")
        username_idx = columns.index("username")
        password_idx = columns.index("password")
        for record in cursor:
            print(f"User: {record[id_idx]}, {record[username_idx]}, {record[password_idx]}")
    except manager.driver_error as e:
        logger.error(f"Failed to read users: {e}", exc_info=e)
    finally:
        manager.close_result_set(cursor)


def main() -> None:
    """Connect, list users, disconnect."""
    logger.info(f"Loading database configuration from {DB_CONFIG_PATH}")
    manager = ConnectionManager.get_instance(DB_CONFIG_PATH)

    if manager.get_connection() is None:
        print("Failed to establish connection to the database.")
        return

    print("Connection to the database established successfully.")
    try:
        print_users(manager)
    finally:
        manager.close_connection()


if __name__ == "__main__":
    main()
