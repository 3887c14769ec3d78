"""
db/ - Database Layer
====================
Loads connection properties, opens the single database connection, and runs
raw SQL against it. This layer has no dependencies on other layers besides
models.row for result rows.
"""

from db.connection import ConnectionManager
from db.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    DatabaseError,
    QueryError,
    ResourceReleaseError,
)
from db.properties import DatabaseConfig, load_properties

__all__ = [
    "ConnectionManager",
    "ConfigurationError",
    "DatabaseConfig",
    "DatabaseConnectionError",
    "DatabaseError",
    "QueryError",
    "ResourceReleaseError",
    "load_properties",
]
