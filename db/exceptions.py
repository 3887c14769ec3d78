"""
db/exceptions.py
----------------
Error taxonomy for the database layer.

ConfigurationError, DatabaseConnectionError and QueryError are raised.
ResourceReleaseError is returned by the release helpers instead, so callers
decide whether a failed close matters to them.
"""

from typing import Optional


class DatabaseError(Exception):
    """Base class for every error raised by the db package."""


class ConfigurationError(DatabaseError):
    """The properties file is missing, unreadable or incomplete."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DatabaseConnectionError(DatabaseError):
    """The driver refused to open a connection for the configured URL."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class QueryError(DatabaseError):
    """
    A query or update failed.

    Attributes:
        query: The SQL text that was being executed.
    """

    def __init__(self, message: str, query: str):
        super().__init__(f"{message}: {query}")
        self.query = query


class ResourceReleaseError(DatabaseError):
    """Closing a connection or cursor failed. Returned, never raised."""

    def __init__(self, resource: str, cause: BaseException):
        super().__init__(f"Error closing {resource}: {cause}")
        self.resource = resource
        self.cause = cause
