# xlogger/sinks/base.py
"""Base class of all sink backends."""

import os
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from xlogger.config.config_types import LogOption, Severity
from xlogger.config.sink_config import SinkConfiguration
from xlogger.context_vars import current_request_environment
from xlogger.level_filter import LevelLike, should_log
from xlogger.logger import get_app_logger
from xlogger.record import LogRecord
from xlogger.scripts import expand_path_placeholders, get_caller, interpolate

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

Context = Optional[Mapping[str, Any]]


class LogSink(ABC):
    """
    Abstract base class of PSR-3 compatible log sinks.

    Each sink must implement _emit() to serialize and write a record.
    The only state shared through this class is the sink's own
    SinkConfiguration; destination handles belong to the subclasses,
    which close them in _close_destination().

    Every log call first checks the level (an unknown level raises
    UnknownSeverityError), then builds a LogRecord with the optional fields
    enabled in the configuration and hands it to _emit(). Failures to open
    or write the destination are absorbed by the subclasses.
    """

    def __init__(
        self,
        level: Optional[LevelLike] = None,
        config: Optional[SinkConfiguration] = None,
    ):
        """
        Initialize sink with configuration.

        Args:
            level: Minimum level to log (default: the config's level, debug)
            config: Configuration to start from; the sink works on a copy.
                Without one, the user defaults to the remote user of the
                current request environment.
        """
        if config is None:
            config = SinkConfiguration(user=current_request_environment().remote_user)
        else:
            config = config.model_copy()
        if level is not None:
            config.level = Severity.parse(level)
        self.config = config
        self._diagnostics = get_app_logger(f"xlogger.sinks.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Sink name for identification."""
        pass

    @abstractmethod
    def _emit(self, record: LogRecord) -> None:
        """
        Serialize and write one record that passed the level check.

        Must not raise for destination failures.
        """
        pass

    # configuration

    def set_log_level(self, level: LevelLike) -> None:
        """
        Set the minimum level; records below it are ignored.

        Raises:
            UnknownSeverityError: If the level is unknown
        """
        self.config.level = Severity.parse(level)

    def set_options(self, options: int) -> None:
        """Set the optional fields, any combination of LogOption flags."""
        self.config.options = int(options)

    def set_user(self, user: str) -> None:
        """
        Set the user name.

        Set it BEFORE a path containing {name} is set.
        """
        self.config.user = user

    def set_document_root(self, document_root: str) -> None:
        """Set the prefix cut off from caller file names."""
        self.config.document_root = document_root

    def set_fullpath(self, fullpath: str) -> None:
        """
        Set path and filename of the log file.

        Placeholders {date}, {month}, {year}, {week} and {name} are
        replaced before the file is opened. An empty value only closes
        the current destination.
        """
        self._close_destination()
        if fullpath:
            fullpath = self._expand(fullpath)
            self.config.path = os.path.dirname(fullpath) or "."
            self.config.filename = os.path.basename(fullpath)

    def set_path(self, path: str) -> None:
        """Set the directory of the log file; placeholders allowed."""
        self._close_destination()
        self.config.path = self._expand(path)

    def set_filename(self, filename: str) -> None:
        """Set the name of the log file; placeholders allowed."""
        self._close_destination()
        self.config.filename = self._expand(filename)

    def get_filename(self) -> str:
        """Get current filename with placeholders replaced."""
        return self.config.filename

    def get_fullpath(self) -> str:
        """Get full path of the log file."""
        return os.path.join(self.config.path, self.config.filename)

    # lifecycle

    def reset(self) -> None:
        """Discard the destination's content. Nothing to do for most sinks."""
        pass

    def close(self) -> None:
        """Release the destination; the next record reopens it."""
        self._close_destination()

    def _close_destination(self) -> None:
        pass

    def __enter__(self) -> "LogSink":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # PSR-3 interface

    def log(self, level: LevelLike, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        """
        Logs with an arbitrary level.

        Args:
            level: PSR-3 level name or Severity
            message: Message template with optional {key} placeholders
            context: Values for the placeholders and extra data
            caller: Call site to record instead of inspecting the stack

        Raises:
            UnknownSeverityError: If the level is unknown
        """
        self._dispatch(level, message, context, caller)

    def emergency(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        """System is unusable."""
        self._dispatch(Severity.EMERGENCY, message, context, caller)

    def alert(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        """Action must be taken immediately."""
        self._dispatch(Severity.ALERT, message, context, caller)

    def critical(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        self._dispatch(Severity.CRITICAL, message, context, caller)

    def error(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        self._dispatch(Severity.ERROR, message, context, caller)

    def warning(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        self._dispatch(Severity.WARNING, message, context, caller)

    def notice(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        """Normal but significant events."""
        self._dispatch(Severity.NOTICE, message, context, caller)

    def info(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        self._dispatch(Severity.INFO, message, context, caller)

    def debug(self, message: Any, context: Context = None, caller: Optional[str] = None) -> None:
        self._dispatch(Severity.DEBUG, message, context, caller)

    # internals

    def _dispatch(self, level: LevelLike, message: Any, context: Context, caller: Optional[str]) -> None:
        # the public method calling this is always exactly one frame up
        severity = Severity.parse(level)
        if not should_log(self.config.level, severity):
            return
        self._emit(self._build_record(severity, message, context or {}, caller))

    def _build_record(
        self,
        severity: Severity,
        message: Any,
        context: Mapping[str, Any],
        caller: Optional[str],
    ) -> LogRecord:
        environment = current_request_environment()
        config = self.config

        if config.includes(LogOption.CALLER) and caller is None:
            caller = self._resolve_caller()

        return LogRecord(
            severity=severity,
            template=str(message),
            message=interpolate(message, context),
            context=dict(context),
            ip=environment.client_ip if config.includes(LogOption.IP) else None,
            user=config.user if config.includes(LogOption.USER) else None,
            caller=caller if config.includes(LogOption.CALLER) else None,
            user_agent=environment.user_agent if config.includes(LogOption.USER_AGENT) else None,
        )

    def _resolve_caller(self) -> str:
        return get_caller(
            ignore_classes=(LogSink,),
            ignore_paths=(_PACKAGE_DIR,),
            document_root=self.config.document_root,
        )

    def _expand(self, template: str) -> str:
        return expand_path_placeholders(template, self.config.user)

    def _report_dropped(self, reason: str, **details: Any) -> None:
        self._diagnostics.warning(
            "Log record dropped",
            sink=self.name,
            reason=reason,
            **details,
        )


__all__ = ["LogSink", "Context"]
