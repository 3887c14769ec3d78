"""
config.py
---------
Central configuration module. Loads environment variables from the .env
file and exposes them as typed constants.

Database credentials are NOT read from here: they live in the properties
file named by DB_CONFIG_PATH (see db/properties.py).
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
DB_CONFIG_PATH: str = os.getenv("DB_CONFIG_PATH", "database_config.properties")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_STREAM: str = os.getenv("LOG_STREAM", "stdout").lower()
