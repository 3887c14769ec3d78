"""
db/properties.py
----------------
Loads database credentials from a key=value properties file:

    url=postgresql://localhost:5432/app
    username=app_user
    password=secret

Parsing is delegated to python-dotenv, which already handles comments,
quoting and blank lines for this line-oriented format.
"""

from dataclasses import dataclass, field

from dotenv import dotenv_values

from db.exceptions import ConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_KEYS = ("url", "username", "password")


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Credentials read from a properties file.

    Attributes:
        path: The file the values were read from.
        url: Connection URL (a leading ``jdbc:`` is tolerated).
        username: Database user.
        password: Database password (may be empty).
        properties: Every key/value pair found in the file.
    """
    path: str
    url: str
    username: str
    password: str
    properties: dict = field(default_factory=dict, compare=False)

    def __repr__(self) -> str:
        return f"DatabaseConfig(path={self.path!r}, url={self.url!r}, username={self.username!r})"


def load_properties(path: str) -> DatabaseConfig:
    """
    Read and validate a properties file.

    Args:
        path: Location of the properties file.

    Returns:
        A DatabaseConfig built from the file.

    Raises:
        ConfigurationError: If the file cannot be read or a required key is missing.
    """
    try:
        with open(path, encoding="utf-8") as f:
            values = dotenv_values(stream=f, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read configuration file {path}: {e}")
        raise ConfigurationError("Error loading configuration file", path=path) from e

    missing = [key for key in REQUIRED_KEYS if values.get(key) is None]
    if missing:
        logger.error(f"Configuration file {path} is missing keys: {', '.join(missing)}")
        raise ConfigurationError(
            f"Configuration file is missing required keys: {', '.join(missing)}",
            path=path,
        )
    if not values["url"].strip():
        raise ConfigurationError("Configuration key 'url' is empty", path=path)

    logger.info(f"Loaded database configuration from {path}")
    return DatabaseConfig(
        path=path,
        url=values["url"].strip(),
        username=values["username"],
        password=values["password"],
        properties=dict(values),
    )
