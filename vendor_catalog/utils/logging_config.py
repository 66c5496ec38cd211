"""
Logging configuration for the vendor catalog engine.

Modules log through get_logger(__name__). Nothing is installed on import:
records propagate to whatever the host application configured. Call
setup_logging() to give the package its own console (and optional file)
output instead.
"""
import os
import logging
from datetime import datetime
import threading
from typing import Optional

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

PACKAGE_LOGGER = "vendor_catalog"


def _level_from_env(default: int = logging.INFO) -> int:
    """
    Resolve the log level from VENDOR_CATALOG_LOG_LEVEL.

    Args:
        default (int): Level used when the variable is unset or unknown

    Returns:
        int: A logging level
    """
    name = os.environ.get("VENDOR_CATALOG_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(log_level: Optional[int] = None, log_dir: Optional[str] = None):
    """
    Set up logging configuration.

    Logging is configured once per process; later calls return the already
    configured logger. A file handler is only added when a log directory is
    given directly or through VENDOR_CATALOG_LOG_DIR. The package logger stops
    propagating to the root logger so each record is written once.

    Args:
        log_level: Logging level (default: VENDOR_CATALOG_LOG_LEVEL or INFO)
        log_dir: Directory for log files (default: VENDOR_CATALOG_LOG_DIR)

    Returns:
        logging.Logger: Configured logger
    """
    global _logging_initialized

    # Use lock to prevent race conditions when multiple threads try to initialize logging
    with _logging_lock:
        if _logging_initialized:
            return logging.getLogger(PACKAGE_LOGGER)

        if log_level is None:
            log_level = _level_from_env()
        if log_dir is None:
            log_dir = os.environ.get("VENDOR_CATALOG_LOG_DIR")

        # Configure the package logger, leaving the host application's root logger alone
        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(log_level)

        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

            # Generate a timestamp for the log file
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"vendor_catalog_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False

        if log_dir:
            logger.info(f"Logging initialized. Log file: {log_file}")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)
