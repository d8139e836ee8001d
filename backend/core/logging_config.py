"""
Logging configuration.
Logs go to a file in the configured log directory and to the console.
"""
import logging
from pathlib import Path

from backend.core.config import DEFAULT_LOG_DIRECTORY_DEV, get_log_dir, get_log_file

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging() -> Path:
    """
    Configure root logging with file and console handlers.

    Returns:
        Path of the log file in use
    """
    log_dir = get_log_dir()
    log_file = get_log_file()

    # Fallback to local directory if no permissions for /var/log
    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = Path(log_dir) / log_file
        file_handler = logging.FileHandler(log_path)
    except PermissionError:
        Path(DEFAULT_LOG_DIRECTORY_DEV).mkdir(parents=True, exist_ok=True)
        log_path = Path(DEFAULT_LOG_DIRECTORY_DEV) / log_file
        file_handler = logging.FileHandler(log_path)

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            file_handler,
            logging.StreamHandler()  # Also log to console
        ]
    )
    return log_path
