# xlogger/config/sink_config.py
"""
Per-sink configuration.

Each sink owns one SinkConfiguration and mutates it only through its own
setters, so the sink can close its destination when the path changes.
"""

from pydantic import BaseModel, Field
from .config_types import ALL_OPTIONS, DEFAULT_OPTIONS, LogOption, Severity


class SinkConfiguration(BaseModel):
    """
    Settings shared by every sink backend.

    Attributes:
        level: Minimum severity that is written
        options: Bitmask of LogOption flags for the optional record fields
        user: User name written with LogOption.USER and used for {name}
        path: Directory of the log file (placeholders already expanded)
        filename: Name of the log file (placeholders already expanded)
        document_root: Prefix removed from caller file paths
    """

    level: Severity = Severity.DEBUG
    options: int = Field(default=int(DEFAULT_OPTIONS), ge=0, le=int(ALL_OPTIONS))
    user: str = ""
    path: str = "."
    filename: str = ""
    document_root: str = ""

    model_config = {"validate_assignment": True}

    @property
    def log_options(self) -> LogOption:
        """Options as a LogOption flag."""
        return LogOption(self.options)

    def includes(self, option: LogOption) -> bool:
        """Check if an optional field is enabled."""
        return (self.options & option) != 0


__all__ = ["SinkConfiguration"]
