import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from clinic_admin.config import get_settings

LOGGER_NAME = "clinic_admin"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUPS = 5

logger = logging.getLogger(LOGGER_NAME)

_console_format = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
_file_format = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def configure_logging(force: bool = False) -> logging.Logger:
    """Attach console + rotating file handlers to the package logger once.

    Console output goes to stderr so that CLI tables on stdout stay clean.
    File logging is skipped when LOG_DIR is empty.
    """
    if logger.handlers and not force:
        return logger

    settings = get_settings()
    level = logging.DEBUG if settings.APP_DEBUG else logging.INFO

    # Prevent duplicate logs
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    # the console only shows problems unless debugging
    console_handler.setLevel(logging.DEBUG if settings.APP_DEBUG else logging.WARNING)
    console_handler.setFormatter(_console_format)
    logger.addHandler(console_handler)

    if settings.LOG_DIR:
        logs_dir = Path(settings.LOG_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_dir / "app.log", maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(_file_format)
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            logs_dir / "errors.log", maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(_file_format)
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance. If name is provided, returns a child logger."""
    configure_logging()
    if name:
        return logger.getChild(name)
    return logger
