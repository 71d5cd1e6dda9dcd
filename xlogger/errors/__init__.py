# xlogger/errors/__init__.py
"""
Exception hierarchy of the logging library.
"""

from .config_error import ConfigurationError
from .xlogger_error import SinkUnavailableError, UnknownSeverityError, XLoggerError

__all__ = [
    "ConfigurationError",
    "SinkUnavailableError",
    "UnknownSeverityError",
    "XLoggerError",
]
