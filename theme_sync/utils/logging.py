"""
Logging utility for the Theme Sync application.

Root logging is configured once from config; modules obtain named loggers
through `get_logger`.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "theme_sync.log"
DEFAULT_LOG_FORMAT = (
    "%(asctime)s - %(levelname)-8s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_FILE_SIZE_MB = 5
LOG_BACKUP_COUNT = 3

# Qt binding internals are only interesting when something is broken
QUIET_LOGGERS = {
    "PySide6": logging.WARNING,
    "shiboken6": logging.WARNING,
}

_logging_configured = False


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = DEFAULT_LOG_FILE,
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    max_bytes: int = MAX_LOG_FILE_SIZE_MB * 1024 * 1024,
    backup_count: int = LOG_BACKUP_COUNT,
    log_to_console: bool = True,
    force: bool = False,
):
    """
    Configure the root logger with a rotating file and/or stdout handler.

    Repeated calls with the same level are ignored unless `force` is set,
    which main.py uses to re-apply logging once the config file is loaded.
    """
    global _logging_configured

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()

    if not force and _logging_configured and root_logger.level == numeric_level:
        return

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    formatter = logging.Formatter(log_format, date_format)
    file_error = None

    if log_file:
        log_file_path = Path(log_file)
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            file_error = e
            log_to_console = True
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    for lib_name, lib_level in QUIET_LOGGERS.items():
        logging.getLogger(lib_name).setLevel(lib_level)

    _logging_configured = True

    logger = logging.getLogger(__name__)
    if file_error is not None:
        logger.warning(f"Could not open log file {log_file}: {file_error}; logging to console")
    logger.info(
        f"Logging initialized at {logging.getLevelName(numeric_level)} "
        f"(Python {sys.version.split()[0]}, {sys.platform})"
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger instance with the specified name.
    If name is None, returns the root logger.
    Falls back to the default setup if setup_logging was never called.
    """
    if not _logging_configured:
        setup_logging()
    return logging.getLogger(name)
