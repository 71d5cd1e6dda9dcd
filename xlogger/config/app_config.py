# xlogger/config/app_config.py
"""
Environment driven settings describing one sink.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator
from .config_types import ALL_OPTIONS, DEFAULT_OPTIONS, LogOption, Severity, SinkKind
from .env_config import require_env, get_env
from .logging_config import LoggingConfig, load_logging_config


class XLoggerSettings(BaseModel):
    """
    Complete sink configuration.

    All configuration is loaded from environment variables and validated
    at startup. Invalid configuration will fail fast with clear error messages.
    """

    sink: SinkKind
    level: Severity = Severity.DEBUG
    options: int = Field(default=int(DEFAULT_OPTIONS), ge=0, le=int(ALL_OPTIONS))
    fullpath: str = Field(default="", description="Log file path, may contain placeholders")
    user: Optional[str] = None
    document_root: str = ""
    stylesheet: str = Field(default="", description="XSL file referenced by XML logs")

    logging: LoggingConfig

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_destination(self) -> "XLoggerSettings":
        """
        File based sinks need somewhere to write.
        """
        if self.sink.needs_path and not self.fullpath:
            raise ValueError(f"A log file path is required for the '{self.sink}' sink")
        if self.stylesheet and self.sink != SinkKind.XML:
            raise ValueError("A stylesheet is only supported by the 'xml' sink")
        return self


def load_settings() -> XLoggerSettings:
    """
    Load sink settings from environment.

    Environment variables:
    Required:
    - XLOGGER_SINK: file, xml, firephp, chromelogger or null

    Optional:
    - XLOGGER_LEVEL: minimum PSR-3 level (default debug)
    - XLOGGER_OPTIONS: mask as integer or names, e.g. "user,caller"
    - XLOGGER_PATH: log file path (required for file and xml)
    - XLOGGER_USER: user name (default: remote user of the request)
    - XLOGGER_DOCUMENT_ROOT: prefix stripped from caller paths
    - XLOGGER_XSL: stylesheet for the xml sink
    - XLOGGER_DIAGNOSTICS_LEVEL: level of the library's own logger

    Returns:
        Validated XLoggerSettings instance

    Raises:
        ValidationError: If configuration is invalid
        ConfigurationError: If required env vars are missing
    """
    sink_str = require_env("XLOGGER_SINK").lower()
    try:
        sink = SinkKind(sink_str)
    except ValueError:
        valid_sinks = [s.value for s in SinkKind]
        raise ValueError(f"Invalid XLOGGER_SINK: {sink_str}. Must be one of: {valid_sinks}")

    level_str = get_env("XLOGGER_LEVEL", Severity.DEBUG.value)
    level = Severity.parse(level_str.lower())

    options_str = get_env("XLOGGER_OPTIONS")
    options = LogOption.parse(options_str) if options_str is not None else DEFAULT_OPTIONS

    return XLoggerSettings(
        sink=sink,
        level=level,
        options=int(options),
        fullpath=get_env("XLOGGER_PATH", ""),
        user=get_env("XLOGGER_USER"),
        document_root=get_env("XLOGGER_DOCUMENT_ROOT", ""),
        stylesheet=get_env("XLOGGER_XSL", ""),
        logging=load_logging_config(),
    )


__all__ = [
    "XLoggerSettings",
    "load_settings",
]
