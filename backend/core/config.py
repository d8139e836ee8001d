"""
Application configuration.
Values come from the process environment (optionally seeded from a .env file).
"""
import os
from typing import List

from dotenv import load_dotenv

from backend.core.exceptions import ConfigurationException

load_dotenv()

DATABASE_URL_ENV = "EXERCISE_TRACKER_DATABASE_URL"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

DEFAULT_LOG_DIRECTORY_PROD = "/var/log/exercise-tracker"
DEFAULT_LOG_DIRECTORY_DEV = "./logs"
DEFAULT_LOG_FILE = "app.log"


def get_database_url() -> str:
    """
    Get the storage connection string.

    Raises:
        ConfigurationException: If the connection string is not set
    """
    url = os.getenv(DATABASE_URL_ENV)
    if not url:
        raise ConfigurationException(DATABASE_URL_ENV, "connection string is required")
    return url


def get_port() -> int:
    port = os.getenv("PORT")
    if not port:
        return DEFAULT_PORT
    try:
        return int(port)
    except ValueError:
        raise ConfigurationException("PORT", f"expected an integer, got {port!r}")


def get_host() -> str:
    return os.getenv("EXERCISE_TRACKER_HOST", DEFAULT_HOST)


def get_log_dir() -> str:
    return os.getenv("EXERCISE_TRACKER_LOG_DIR", DEFAULT_LOG_DIRECTORY_PROD)


def get_log_file() -> str:
    return os.getenv("EXERCISE_TRACKER_LOG_FILE", DEFAULT_LOG_FILE)


def get_cors_origins() -> List[str]:
    """Allowed CORS origins (comma-separated, "*" allows all)"""
    raw = os.getenv("EXERCISE_TRACKER_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
