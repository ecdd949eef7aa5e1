"""
Centralized logging configuration for the NAS UE process.

This module provides standardized logging setup for all nasue components.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - [%(filename)s:%(lineno)d] - %(levelname)s - %(message)s"
)

# Log levels mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_LOG_DIR = "logs"
PACKAGE_LOGGER_NAME = "nasue"

# Global logger cache
_loggers: dict[str, logging.Logger] = {}


def _create_console_handler(
    log_level: int, formatter: logging.Formatter
) -> logging.StreamHandler:
    """
    Create and configure console handler.

    :param log_level: Logging level for the handler
    :type log_level: int
    :param formatter: Formatter for log messages
    :type formatter: logging.Formatter
    :return: Configured console handler
    :rtype: logging.StreamHandler
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    return console_handler


def _create_file_handler(
    log_file: str,
    log_dir: str | None,
    log_level: int,
    formatter: logging.Formatter,
    file_mode: str,
    max_bytes: int,
    backup_count: int,
) -> logging.handlers.RotatingFileHandler:
    """
    Create and configure rotating file handler.

    :param log_file: Name of the log file
    :type log_file: str
    :param log_dir: Directory for log files, defaults to logs/ in the working directory
    :type log_dir: str | None
    :param log_level: Logging level for the handler
    :type log_level: int
    :param formatter: Formatter for log messages
    :type formatter: logging.Formatter
    :param file_mode: File open mode ('a' for append, 'w' for overwrite)
    :type file_mode: str
    :param max_bytes: Maximum size of log file before rotation
    :type max_bytes: int
    :param backup_count: Number of backup files to keep
    :type backup_count: int
    :return: Configured rotating file handler
    :rtype: logging.handlers.RotatingFileHandler
    """
    log_dir_path = Path(log_dir if log_dir is not None else DEFAULT_LOG_DIR)
    log_dir_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_dir_path / log_file,
        mode=file_mode,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    return file_handler


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: str | None = None,
    log_dir: str | None = None,
    console: bool = True,
    file_mode: str = "a",
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up a standardized logger for nasue modules.

    Creates a logger with optional file and console handlers. File handlers
    use rotation to prevent unbounded growth.

    :param name: Logger name (typically __name__ of the calling module)
    :param level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param log_file: Optional log file name (created in log_dir)
    :param log_dir: Directory for log files (defaults to logs/)
    :param console: Whether to output to console
    :param file_mode: File open mode ('a' for append, 'w' for overwrite)
    :param max_bytes: Maximum size of log file before rotation
    :param backup_count: Number of backup files to keep
    :param format_string: Custom format string (uses DEFAULT_FORMAT if None)
    :return: Configured logger instance
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    if console:
        logger.addHandler(_create_console_handler(log_level, formatter))

    if log_file:
        logger.addHandler(
            _create_file_handler(
                log_file, log_dir, log_level, formatter, file_mode, max_bytes, backup_count
            )
        )

    _loggers[name] = logger

    return logger


def trace_level_to_log_level(trace_level: int) -> str:
    """
    Map a NAS trace mask to a logging level name.

    Any enabled trace bit turns on debug output; an empty mask keeps the
    process at INFO.

    :param trace_level: Trace mask as returned by the trace level accessor
    :type trace_level: int
    :return: Logging level name
    :rtype: str
    """
    return "DEBUG" if trace_level else "INFO"


def configure_process_logging(
    process_name: str, trace_level: int, log_file: str | None = None
) -> "LoggerAdapter":
    """
    Configure the nasue package logger for one NAS process run.

    Sets the level of the ``nasue`` logger (and all module loggers below it)
    from the trace mask and returns an adapter tagging each message with the
    process name. Handlers from an earlier call are closed and replaced, so
    the latest level, format and log file always apply.

    :param process_name: Name the process was started under
    :param trace_level: Trace mask taken from the command line
    :param log_file: Optional log file name written under logs/
    :return: Logger adapter carrying the process context
    """
    _loggers.pop(PACKAGE_LOGGER_NAME, None)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    level = trace_level_to_log_level(trace_level)
    logger = setup_logger(
        name=PACKAGE_LOGGER_NAME,
        level=level,
        log_file=log_file,
        format_string=DETAILED_FORMAT if level == "DEBUG" else DEFAULT_FORMAT,
    )
    return LoggerAdapter(logger, {"process": process_name})


class LoggerAdapter(logging.LoggerAdapter):
    """
    Custom logger adapter for adding contextual information.

    Prefixes every message with ``[key=value - ...]`` built from the extra
    context given at construction.
    """

    def __init__(self, logger: logging.Logger, extra: dict[str, Any]):
        super().__init__(logger, extra)

    def process(self, msg: Any, kwargs: Any) -> tuple[str, Any]:
        """
        Add extra context to log messages.

        :param msg: The log message
        :type msg: Any
        :param kwargs: Additional keyword arguments
        :type kwargs: Any
        :return: Processed message and kwargs
        :rtype: tuple[str, Any]
        """
        if self.extra:
            extra_str = " - ".join([f"{k}={v}" for k, v in self.extra.items()])
            return f"[{extra_str}] {msg}", kwargs
        return str(msg), kwargs
