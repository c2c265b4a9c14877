"""
Logging configuration for structured text logging.
"""
import logging
import sys
from typing import Dict
from sheet_grammar.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured text logging."""

    STANDARD_FIELDS = {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName"
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured key-value pairs."""
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        base_msg = f"{timestamp}.{int(record.msecs):03d} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        # Add extra fields if present
        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.STANDARD_FIELDS
        }

        if extra_fields:
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())
            base_msg += extra_str

        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)

        return base_msg


def setup_logging() -> logging.Logger:
    """
    Configure and return the add-on logger.

    Supports per-module log level configuration via environment variables:
    - APP_LOG_LEVEL: Add-on logs (default: LOG_LEVEL)
    - HTTPX_LOG_LEVEL: HTTPX logs (default: WARNING)
    - HTTPCORE_LOG_LEVEL: HTTPCore logs (default: WARNING)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("sheet_grammar")
    app_log_level = (settings.APP_LOG_LEVEL or settings.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, app_log_level))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, app_log_level))
    console_handler.setFormatter(StructuredFormatter())

    logger.addHandler(console_handler)
    logger.propagate = False

    log_config = _configure_third_party_loggers()
    logger.debug(
        "Log configuration applied",
        extra={"app_log_level": app_log_level, **log_config}
    )

    return logger


def _configure_third_party_loggers() -> Dict[str, str]:
    """
    Configure log levels for third-party libraries.

    Returns:
        Dictionary mapping setting names to configured levels
    """
    config = {}

    # HTTPX (chat completion requests)
    httpx_level = (settings.HTTPX_LOG_LEVEL or "WARNING").upper()
    logging.getLogger("httpx").setLevel(getattr(logging, httpx_level))
    config["httpx_log_level"] = httpx_level

    # HTTPCore (transport underneath HTTPX, logs raw connection events)
    httpcore_level = (settings.HTTPCORE_LOG_LEVEL or "WARNING").upper()
    logging.getLogger("httpcore").setLevel(getattr(logging, httpcore_level))
    config["httpcore_log_level"] = httpcore_level

    return config


class StructuredLogger:
    """Wrapper around logging.Logger that supports keyword arguments for structured logging."""

    # Reserved field names in LogRecord that should be prefixed
    RESERVED_FIELDS = StructuredFormatter.STANDARD_FIELDS

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _log(self, level: int, msg: str, *args, **kwargs):
        """Log with structured extra fields."""
        exc_info = kwargs.pop('exc_info', False)

        extra = {}
        for key, value in kwargs.items():
            if key in self.RESERVED_FIELDS:
                extra[f'ctx_{key}'] = value
            else:
                extra[key] = value

        self._logger.log(level, msg, *args, extra=extra, exc_info=exc_info, stacklevel=3)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger with the specified name under the add-on namespace.

    Args:
        name: Logger name (will be prefixed with 'sheet_grammar.')

    Returns:
        StructuredLogger instance
    """
    logger = logging.getLogger(f"sheet_grammar.{name}")
    return StructuredLogger(logger)


# Initialize add-on logger
app_logger = setup_logging()
