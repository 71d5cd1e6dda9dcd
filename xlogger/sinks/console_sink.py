# xlogger/sinks/console_sink.py
"""
Sinks writing to the browser console of the developer.

Both sinks only use a small part of their console protocol, but being PSR-3
compatible they can route the logging of any existing component into the
browser console.
"""
import os
from abc import abstractmethod
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from xlogger.config.config_types import Severity
from xlogger.config.sink_config import SinkConfiguration
from xlogger.level_filter import LevelLike
from xlogger.record import LogRecord
from .base import LogSink
from .transports import (
    BACKTRACE_LEVEL,
    ChromeLoggerTransport,
    FirePHPTransport,
    StructlogConsoleTransport,
)

_CONSOLE_METHODS = {
    Severity.EMERGENCY: "error",
    Severity.ALERT: "error",
    Severity.CRITICAL: "error",
    Severity.ERROR: "error",
    Severity.WARNING: "warn",
    Severity.INFO: "info",
}

# frames between a transport call and the user's log call:
# _emit -> _dispatch -> public log method -> caller
_SINK_FRAME_DEPTH = 4


def console_method(severity: Severity) -> str:
    """Console method for a level: error, warn, info, or log for the rest."""
    return _CONSOLE_METHODS.get(severity, "log")


class _ConsoleSink(LogSink):
    """Shared emission path of the console sinks."""

    def __init__(
        self,
        transport: Any,
        level: Optional[LevelLike] = None,
        config: Optional[SinkConfiguration] = None,
    ):
        self._transport = transport
        super().__init__(level=level, config=config)

    @property
    def transport(self) -> Any:
        return self._transport

    def _emit(self, record: LogRecord) -> None:
        # every transport call is made from this frame, see _SINK_FRAME_DEPTH
        try:
            send: Callable[..., None] = getattr(self._transport, console_method(record.severity))
            send(record.labeled_message)
            if record.context:
                for method, args, kwargs in self._context_calls(record):
                    getattr(self._transport, method)(*args, **kwargs)
        except Exception as exc:
            # the transport is foreign code; logging must not break the caller
            self._report_dropped(f"{type(exc).__name__}: {exc}")

    @abstractmethod
    def _context_calls(self, record: LogRecord) -> Iterator[Tuple[str, tuple, Dict[str, Any]]]:
        """Transport calls (method, args, kwargs) sending the extra context."""
        pass


class FirePHPSink(_ConsoleSink):
    """
    Sink for the FirePHP console.

    Context entries that are not used as placeholders are sent as extra
    log entries labeled with their key.
    """

    def __init__(
        self,
        level: Optional[LevelLike] = None,
        transport: Optional[FirePHPTransport] = None,
        config: Optional[SinkConfiguration] = None,
    ):
        """
        Initialize FirePHP sink.

        Args:
            level: Minimum level to log
            transport: FirePHP transport (default: StructlogConsoleTransport)
            config: Optional starting configuration
        """
        transport = transport or StructlogConsoleTransport("xlogger.firephp")
        super().__init__(transport, level=level, config=config)

        # the console shows the file(line) of the log call, not of this sink
        transport.ignore_class_in_traces(type(self))
        transport.ignore_path_in_traces(os.path.dirname(os.path.abspath(__file__)))
        transport.ignore_path_in_traces(os.path.abspath(__file__))

    @property
    def name(self) -> str:
        return "firephp"

    def _context_calls(self, record: LogRecord) -> Iterator[Tuple[str, tuple, Dict[str, Any]]]:
        for key, value in record.extra_context():
            yield "log", (value,), {"label": key}


class ChromeLoggerSink(_ConsoleSink):
    """
    Sink for the ChromeLogger console.

    Context entries that are not used as placeholders are sent as one
    console group of `key value` info entries.
    """

    def __init__(
        self,
        level: Optional[LevelLike] = None,
        transport: Optional[ChromeLoggerTransport] = None,
        config: Optional[SinkConfiguration] = None,
    ):
        """
        Initialize ChromeLogger sink.

        Args:
            level: Minimum level to log
            transport: ChromeLogger transport (default: StructlogConsoleTransport)
            config: Optional starting configuration
        """
        transport = transport or StructlogConsoleTransport("xlogger.chromelogger")
        super().__init__(transport, level=level, config=config)

        # the console shows the file(line) of the log call, not of this sink
        transport.add_setting(BACKTRACE_LEVEL, _SINK_FRAME_DEPTH)

    @property
    def name(self) -> str:
        return "chromelogger"

    def _context_calls(self, record: LogRecord) -> Iterator[Tuple[str, tuple, Dict[str, Any]]]:
        yield "group", (), {}
        for key, value in record.extra_context():
            yield "info", (key, value), {}
        yield "group_end", (), {}


__all__ = ["FirePHPSink", "ChromeLoggerSink", "console_method"]
