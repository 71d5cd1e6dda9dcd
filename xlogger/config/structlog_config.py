# xlogger/config/structlog_config.py
"""
Structlog setup for the library's own diagnostics.

The library never calls structlog.configure(): an application using
xlogger keeps its own structlog configuration. Diagnostics loggers are
wrapped with a private processor chain instead, built once per process by
configure_structlog(); get_app_logger() does it lazily with the
environment's diagnostics level if nobody did.
"""
import sys
import threading
from typing import Any, List, Optional, TextIO
import structlog
from rich.traceback import install as install_rich_traceback


class _StructlogState:
    """
    Singleton holding the processor chain of the diagnostics loggers.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    _log_level: Optional[int]
    _processors: Optional[List[Any]]
    _stream: Optional[TextIO]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._log_level = None
                    instance._processors = None
                    instance._stream = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        return self._processors is not None

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    def store(self, log_level: int, processors: List[Any], stream: Optional[TextIO]) -> None:
        with self._lock:
            self._log_level = log_level
            self._processors = processors
            self._stream = stream

    def wrap(self, name: str) -> structlog.BoundLogger:
        return structlog.wrap_logger(
            structlog.PrintLogger(file=self._stream or sys.stderr),
            processors=self._processors,
            wrapper_class=structlog.make_filtering_bound_logger(self._log_level),
            context_class=dict,
            logger_name=name,
        )

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._log_level = None
            self._processors = None
            self._stream = None


_state = _StructlogState()


def _add_logger_name(logger: Any, method_name: str, event_dict: dict) -> dict:
    # PrintLogger has no name; it is passed as initial context by wrap()
    event_dict.setdefault("logger", event_dict.pop("logger_name", None) or "xlogger")
    return event_dict


def configure_structlog(
    log_level: int,
    rich_tracebacks: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Build the diagnostics processor chain with the specified level.

    Args:
        log_level: Numeric logging level (e.g., logging.WARNING)
        rich_tracebacks: Also install Rich as the global excepthook
        stream: Output of the diagnostics (default: sys.stderr at log time)

    Raises:
        RuntimeError: If already configured in this process with a different level
    """
    if _state.is_configured:
        if _state.log_level == log_level:
            return
        raise RuntimeError(
            f"xlogger diagnostics already configured. "
            f"Current level: {_state.log_level}, attempted: {log_level}"
        )

    if rich_tracebacks:
        install_rich_traceback(show_locals=False, width=None, extra_lines=3)

    colors = (stream or sys.stderr).isatty()
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.dev.ConsoleRenderer(
            colors=colors,
            exception_formatter=structlog.dev.RichTracebackFormatter(
                show_locals=False,
                width=None,
                suppress=["starlette"],
            ),
        ),
    ]
    _state.store(log_level, processors, stream)


def get_logger(name: str = "xlogger") -> structlog.BoundLogger:
    """
    Get a diagnostics logger.

    Args:
        name: Logger name, rendered with every entry

    Raises:
        RuntimeError: If configure_structlog() was not called yet
    """
    if not _state.is_configured:
        raise RuntimeError(
            "xlogger diagnostics not configured. "
            "Call configure_structlog() or initialize_config() first."
        )
    return _state.wrap(name)


def is_configured() -> bool:
    """Check if the diagnostics loggers can be created."""
    return _state.is_configured


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
]
