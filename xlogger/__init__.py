# xlogger/__init__.py
"""
PSR-3 style logging with interchangeable sinks.

Usage:
    from xlogger import FileSink, LogOption

    sink = FileSink("info", fullpath="logs/app_{month}.csv")
    sink.set_options(LogOption.USER | LogOption.CALLER)
    sink.error("bad conditions :-(", {"more": "extra"})
"""

from .config import (
    DEFAULT_OPTIONS,
    LogOption,
    Severity,
    SinkConfiguration,
    SinkKind,
    XLoggerSettings,
    get_config,
    initialize_config,
)
from .context_vars import (
    RequestEnvironment,
    bind_request_environment,
    current_request_environment,
)
from .errors import (
    ConfigurationError,
    SinkUnavailableError,
    UnknownSeverityError,
    XLoggerError,
)
from .level_filter import ordinal, should_log
from .logger_aware import LoggerAwareMixin
from .record import LogRecord
from .scripts import expand_path_placeholders, get_caller, interpolate
from .sinks import (
    ChromeLoggerSink,
    FileSink,
    FirePHPSink,
    LogSink,
    NullSink,
    StructlogConsoleTransport,
    XMLSink,
    create_sink,
    create_sink_from_settings,
    register_sink,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "LogOption",
    "Severity",
    "SinkConfiguration",
    "SinkKind",
    "XLoggerSettings",
    "get_config",
    "initialize_config",
    "RequestEnvironment",
    "bind_request_environment",
    "current_request_environment",
    "ConfigurationError",
    "SinkUnavailableError",
    "UnknownSeverityError",
    "XLoggerError",
    "ordinal",
    "should_log",
    "LoggerAwareMixin",
    "LogRecord",
    "expand_path_placeholders",
    "get_caller",
    "interpolate",
    "ChromeLoggerSink",
    "FileSink",
    "FirePHPSink",
    "LogSink",
    "NullSink",
    "StructlogConsoleTransport",
    "XMLSink",
    "create_sink",
    "create_sink_from_settings",
    "register_sink",
]
