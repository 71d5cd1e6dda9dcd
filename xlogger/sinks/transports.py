# xlogger/sinks/transports.py
"""
Call contracts of the remote console transports used by the console sinks.

The wire protocols themselves (FirePHP / ChromeLogger response headers) are
not part of this library; any object with the methods below can be passed
to a console sink. StructlogConsoleTransport implements both contracts on
top of the diagnostics logger, for development servers without a browser
extension.
"""

import inspect
import os
from typing import Any, Dict, List, Optional, Protocol

from xlogger.logger import AppLogger, get_app_logger
from xlogger.scripts import get_caller, is_stringable, to_text

BACKTRACE_LEVEL = "backtrace_level"


class FirePHPTransport(Protocol):
    """Console reached through the FirePHP protocol."""

    def error(self, value: Any, label: Optional[str] = None) -> None: ...

    def warn(self, value: Any, label: Optional[str] = None) -> None: ...

    def info(self, value: Any, label: Optional[str] = None) -> None: ...

    def log(self, value: Any, label: Optional[str] = None) -> None: ...

    def ignore_class_in_traces(self, cls: type) -> None: ...

    def ignore_path_in_traces(self, path: str) -> None: ...


class ChromeLoggerTransport(Protocol):
    """Console reached through the ChromeLogger protocol."""

    def error(self, *values: Any) -> None: ...

    def warn(self, *values: Any) -> None: ...

    def info(self, *values: Any) -> None: ...

    def log(self, *values: Any) -> None: ...

    def group(self, *values: Any) -> None: ...

    def group_end(self) -> None: ...

    def add_setting(self, key: str, value: Any) -> None: ...


def _render(value: Any) -> str:
    return to_text(value) if is_stringable(value) else repr(value)


class StructlogConsoleTransport:
    """
    Console transport writing through structlog.

    Entries carry the console method, an optional label and the call site.
    The call site is found like a browser console would: either by stepping
    out `backtrace_level` frames from the transport call, or by skipping the
    classes and paths registered with ignore_class_in_traces() /
    ignore_path_in_traces().
    """

    _METHODS = {
        "error": "error",
        "warn": "warning",
        "info": "info",
        "log": "info",
    }

    def __init__(self, name: str = "xlogger.console", logger: Optional[AppLogger] = None):
        self._logger = logger or get_app_logger(name)
        self._ignored_classes: List[type] = []
        self._ignored_paths: List[str] = []
        self._settings: Dict[str, Any] = {}
        self._group_depth = 0

    def ignore_class_in_traces(self, cls: type) -> None:
        if cls not in self._ignored_classes:
            self._ignored_classes.append(cls)

    def ignore_path_in_traces(self, path: str) -> None:
        if path not in self._ignored_paths:
            self._ignored_paths.append(path)

    def add_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def error(self, *values: Any, label: Optional[str] = None) -> None:
        self._write("error", values, label)

    def warn(self, *values: Any, label: Optional[str] = None) -> None:
        self._write("warn", values, label)

    def info(self, *values: Any, label: Optional[str] = None) -> None:
        self._write("info", values, label)

    def log(self, *values: Any, label: Optional[str] = None) -> None:
        self._write("log", values, label)

    def group(self, *values: Any) -> None:
        if values:
            self._write("log", values, None)
        self._group_depth += 1

    def group_end(self) -> None:
        self._group_depth = max(0, self._group_depth - 1)

    def _write(self, method: str, values: tuple, label: Optional[str]) -> None:
        current = inspect.currentframe()
        # frame of the public method (error/warn/info/log/group)
        origin = current.f_back if current is not None else None
        del current

        text = "  " * self._group_depth + " ".join(_render(v) for v in values)
        fields: Dict[str, Any] = {"console": method, "caller": self._caller(origin)}
        if label is not None:
            fields["label"] = label
        getattr(self._logger, self._METHODS[method])(text, **fields)

    def _caller(self, origin: Any) -> str:
        try:
            level = int(self._settings.get(BACKTRACE_LEVEL, 0))
            return get_caller(
                ignore_classes=(type(self), *self._ignored_classes),
                ignore_paths=(os.path.abspath(__file__), *self._ignored_paths),
                start_frame=origin,
                depth=level,
            )
        finally:
            del origin


__all__ = [
    "BACKTRACE_LEVEL",
    "FirePHPTransport",
    "ChromeLoggerTransport",
    "StructlogConsoleTransport",
]
