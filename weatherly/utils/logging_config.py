import logging
import sys
from pathlib import Path

import structlog

from weatherly.config.config import config


class CustomFormatter(logging.Formatter):
    """Formatter producing: [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}"""

    def format(self, record):
        # Last component of the logger name
        module_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{module_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_log_file_path() -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    log_filename = f"weatherly_{config.environment}.log"
    return logs_dir / log_filename


def configure_structlog():
    """
    Route structlog through the standard library loggers.

    Event dicts are rendered to a single line, either as JSON or as
    ``event key=value`` pairs depending on ``config.log_format``.
    """
    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging():
    """
    Configure logging for the application.

    Sets up file and console logging with the format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}
    """
    log_file_path = get_log_file_path()
    level = getattr(logging, config.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    configure_structlog()

    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", log_file=str(log_file_path), log_format=config.log_format)
