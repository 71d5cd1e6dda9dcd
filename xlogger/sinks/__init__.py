# xlogger/sinks/__init__.py
"""
Log sink backends.

Supports multiple backends: delimited file, XML document, FirePHP and
ChromeLogger browser consoles, and a null sink.

Example:
    sink = FileSink("warning", fullpath="logs/app_{date}.csv")
    sink.error("Order {id} failed", {"id": 42})
"""

from .base import LogSink
from .console_sink import ChromeLoggerSink, FirePHPSink, console_method
from .file_sink import FileSink
from .null_sink import NullSink
from .registry import available_sinks, create_sink, create_sink_from_settings, register_sink
from .transports import (
    BACKTRACE_LEVEL,
    ChromeLoggerTransport,
    FirePHPTransport,
    StructlogConsoleTransport,
)
from .xml_sink import XMLSink

__all__ = [
    "LogSink",
    "FileSink",
    "XMLSink",
    "FirePHPSink",
    "ChromeLoggerSink",
    "NullSink",
    "console_method",
    "available_sinks",
    "create_sink",
    "create_sink_from_settings",
    "register_sink",
    "BACKTRACE_LEVEL",
    "ChromeLoggerTransport",
    "FirePHPTransport",
    "StructlogConsoleTransport",
]
