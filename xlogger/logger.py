# xlogger/logger.py
"""
Diagnostics logger of the library itself.

Sinks report what they swallow (unavailable files, failing transports)
here instead of raising into the calling code.

Usage:
    from xlogger.logger import get_app_logger

    logger = get_app_logger(__name__)
    logger.warning("Log file unavailable", path="/var/log/app.csv")
"""
from typing import Any, Optional
import structlog

from xlogger.config.logging_config import DEFAULT_LOGGING_CONFIG, load_logging_config
from xlogger.config.structlog_config import (
    configure_structlog,
    get_logger as _get_structlog_logger,
    is_configured,
)
from xlogger.errors import ConfigurationError


def _lazy_log_level() -> int:
    # initialize_config() rejects an invalid level; lazy setup must not raise
    try:
        return load_logging_config().level_int
    except ConfigurationError:
        return DEFAULT_LOGGING_CONFIG.level_int


class AppLogger:
    """
    Application logger wrapper.

    Provides a type-safe interface to structlog. The structlog logger is
    created on first use, configuring structlog from the environment if
    the application did not.
    """

    def __init__(self, name: str = "xlogger"):
        self._name = name
        self._logger_instance: Optional[structlog.BoundLogger] = None

    @property
    def _logger(self) -> structlog.BoundLogger:
        """Lazy-load logger instance."""
        if self._logger_instance is None:
            if not is_configured():
                configure_structlog(_lazy_log_level())
            self._logger_instance = _get_structlog_logger(self._name)
        return self._logger_instance

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log critical message."""
        self._logger.critical(msg, **kwargs)


def get_app_logger(name: str = "xlogger") -> AppLogger:
    """
    Get application logger instance.

    Args:
        name: Logger name

    Returns:
        AppLogger instance
    """
    return AppLogger(name)


__all__ = ["AppLogger", "get_app_logger"]
