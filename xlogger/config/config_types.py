# xlogger/config/config_types.py
"""Configuration type definitions."""

from enum import Enum, IntFlag
from typing import Union
import logging

from xlogger.errors import UnknownSeverityError


class Severity(str, Enum):
    """
    PSR-3 log levels, from most to least important.

    Inherits from str so values read from config or written to log files
    are the plain lowercase level names.

    Examples:
        >>> Severity.parse("error").ordinal
        4
        >>> Severity.ERROR.label
        'ERROR'
        >>> Severity.parse("fatal")
        Traceback (most recent call last):
        ...
        xlogger.errors.xlogger_error.UnknownSeverityError: Unknown logging level (fatal)
    """

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    @property
    def ordinal(self) -> int:
        """Relevance of the level: DEBUG is 0, EMERGENCY is 7."""
        return _SEVERITY_ORDINALS[self]

    @property
    def label(self) -> str:
        """Upper case name as written into log records."""
        return self.value.upper()

    @classmethod
    def parse(cls, level: Union["Severity", str]) -> "Severity":
        """
        Map a level name to its Severity.

        Args:
            level: Severity member or one of the eight lowercase level names

        Raises:
            UnknownSeverityError: If the name is not a PSR-3 level
        """
        if isinstance(level, cls):
            return level
        try:
            return cls(level)
        except ValueError:
            raise UnknownSeverityError(level) from None

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


_SEVERITY_ORDINALS = {
    Severity.EMERGENCY: 7,
    Severity.ALERT: 6,
    Severity.CRITICAL: 5,
    Severity.ERROR: 4,
    Severity.WARNING: 3,
    Severity.NOTICE: 2,
    Severity.INFO: 1,
    Severity.DEBUG: 0,
}


class LogOption(IntFlag):
    """
    Optional fields of a log record.

    Combine with `|`, e.g. `LogOption.USER | LogOption.CALLER`.
    """

    NONE = 0x00
    IP = 0x01
    CALLER = 0x02
    USER = 0x04
    USER_AGENT = 0x08

    @classmethod
    def parse(cls, text: str) -> "LogOption":
        """
        Parse an option mask from config text.

        Accepts an integer ("6", "0x06") or comma separated names
        ("user,caller"). Names are matched case-insensitively and
        "useragent"/"user-agent" are accepted for USER_AGENT.

        Raises:
            ValueError: If a name is unknown or the number is out of range
        """
        text = text.strip()
        if not text:
            return cls.NONE
        try:
            value = int(text, 0)
        except ValueError:
            value = None
        if value is not None:
            if value < 0 or value > int(ALL_OPTIONS):
                raise ValueError(f"Option mask out of range: {text}")
            return cls(value)

        options = cls.NONE
        for name in text.split(","):
            key = name.strip().upper().replace("-", "_")
            if key == "USERAGENT":
                key = "USER_AGENT"
            if key not in cls.__members__:
                valid = ", ".join(m.lower() for m in cls.__members__ if m != "NONE")
                raise ValueError(f"Unknown log option '{name.strip()}'. Valid: {valid}")
            options |= cls[key]
        return options


ALL_OPTIONS = LogOption.IP | LogOption.CALLER | LogOption.USER | LogOption.USER_AGENT
DEFAULT_OPTIONS = LogOption.IP | LogOption.USER | LogOption.USER_AGENT


class EnvLogLevel(str, Enum):
    """
    Levels of the library's own diagnostics logger.

    These are stdlib logging levels, unrelated to the PSR-3 Severity
    of the records a sink writes.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class SinkKind(str, Enum):
    """Sink backends that can be built from configuration."""

    FILE = "file"
    XML = "xml"
    FIREPHP = "firephp"
    CHROMELOGGER = "chromelogger"
    NULL = "null"

    @property
    def needs_path(self) -> bool:
        """Check if the backend writes to a file."""
        return self in (SinkKind.FILE, SinkKind.XML)

    def __str__(self) -> str:
        return self.value


__all__ = [
    "Severity",
    "LogOption",
    "ALL_OPTIONS",
    "DEFAULT_OPTIONS",
    "EnvLogLevel",
    "SinkKind",
]
