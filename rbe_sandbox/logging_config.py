"""Logging configuration for RBE Sandbox."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

# Create logs directory if it doesn't exist
LOGS_DIR = Path(__file__).parent.parent / "logs"
LOGS_DIR.mkdir(exist_ok=True)

# Log file paths
API_LOG_FILE = LOGS_DIR / "api.log"
VISITORS_LOG_FILE = LOGS_DIR / "visitors.log"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging():
    """Configure logging for the application."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # setup_logging runs at import of main; don't stack handlers on reload
    if getattr(root_logger, "_rbe_configured", False):
        return root_logger

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    # API log file handler (rotating, 10MB max, keep 5 backups)
    api_file_handler = RotatingFileHandler(
        API_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    api_file_handler.setLevel(logging.INFO)
    api_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    # Visit counter log file handler (rotating, 10MB max, keep 5 backups)
    visitors_file_handler = RotatingFileHandler(
        VISITORS_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    visitors_file_handler.setLevel(logging.INFO)
    visitors_file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - [VISITORS] - %(levelname)s - %(message)s',
        datefmt=DATE_FORMAT
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(api_file_handler)

    # Counter storage logs to its own file as well
    visitors_logger = logging.getLogger('rbe_sandbox.services.visitor_counter')
    visitors_logger.addHandler(visitors_file_handler)
    visitors_logger.setLevel(logging.INFO)

    # Reduce noise from libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('aiosqlite').setLevel(logging.WARNING)

    root_logger._rbe_configured = True
    return root_logger


# Convenience function to get logger
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
