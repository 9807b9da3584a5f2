"""Logging configuration for the memcached client.

Provides JSON-formatted fault logs so that library errors can be persisted and
parsed by log aggregation services. The library never configures the root
logger; applications opt in with :func:`setup_logging` or
:func:`configure_logging`.
"""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import traceback

from memcached_client.core import config
from memcached_client.core.config import VALID_LOG_LEVELS


LIBRARY_LOGGER_NAME = "memcached_client"

# Handler installed by setup_logging, per logger name
_installed_handlers: Dict[str, logging.Handler] = {}


class JSONFormatter(logging.Formatter):
    """JSON formatter for persisted fault logs.

    Each record becomes one JSON line. Records carrying a ``MemcachedError``
    also get a ``memcached_error`` object holding the diagnostic message, so
    client failures can be filtered without parsing tracebacks.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_obj.update(_describe_exception(record.exc_info))
        elif hasattr(record, "error_type"):
            log_obj["error_type"] = record.error_type

        return json.dumps(log_obj, default=str)


def _describe_exception(exc_info) -> Dict[str, Any]:
    """Fields for a record's exception, with a dedicated block for client errors."""
    from memcached_client.domain.errors import MemcachedError

    exc_type, exc, tb = exc_info
    described: Dict[str, Any] = {
        "error_type": exc_type.__name__,
        "exception": {
            "type": exc_type.__name__,
            "message": str(exc),
            "traceback": traceback.format_exception(exc_type, exc, tb),
        },
    }
    if isinstance(exc, MemcachedError):
        described["memcached_error"] = {"message": exc.message}
    return described


def _resolve_level(level: str) -> int:
    name = str(level).upper()
    if name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, got {level!r}."
        )
    return getattr(logging, name)


def setup_logging(
    level: str = "WARNING",
    json_format: bool = False,
    logger_name: str = LIBRARY_LOGGER_NAME,
) -> logging.Logger:
    """Configure logging for the library logger.

    Calling it again for the same logger replaces the handler it installed
    there before; handlers on other loggers are left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to use JSON formatter (for persisted fault logs)
        logger_name: Logger to configure (the library logger by default)

    Returns:
        Configured logger

    Raises:
        ValueError: If level is not a standard log level

    Example:
        >>> logger = setup_logging(level="DEBUG", json_format=True)
    """
    numeric_level = _resolve_level(level)

    target = logging.getLogger(logger_name)
    target.setLevel(numeric_level)

    previous = _installed_handlers.pop(logger_name, None)
    if previous is not None:
        target.removeHandler(previous)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        # Human-readable format for development
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        formatter = logging.Formatter(fmt)

    console_handler.setFormatter(formatter)
    target.addHandler(console_handler)
    _installed_handlers[logger_name] = console_handler

    return target


def configure_logging(settings: Optional[config.Settings] = None) -> logging.Logger:
    """Configure the library logger from settings.

    Args:
        settings: Settings instance (the module-level settings if None)

    Returns:
        Configured library logger

    Raises:
        ValueError: If the settings hold an unusable value
    """
    if settings is None:
        settings = config.settings
    settings.validate_required_settings()

    return setup_logging(level=settings.log_level, json_format=settings.log_json)


def get_logger(name: str) -> logging.Logger:
    """Get a logger.

    Args:
        name: Logger name (typically __name__ of module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
