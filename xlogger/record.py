# xlogger/record.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Mapping, Optional, Tuple

from xlogger.config.config_types import Severity
from xlogger.scripts.interpolate import has_placeholder


@dataclass(frozen=True)
class LogRecord:
    """
    One log call, ready to be serialized by a sink.

    Built fresh per call and never stored. Optional fields are None when
    the sink's options do not include them.
    """

    severity: Severity
    template: str
    # Final text with placeholders replaced
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    ip: Optional[str] = None
    user: Optional[str] = None
    caller: Optional[str] = None
    user_agent: Optional[str] = None

    @property
    def timestamp_text(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d %H:%M:%S")

    @property
    def level_label(self) -> str:
        return self.severity.label

    @property
    def labeled_message(self) -> str:
        """`SEVERITY: message` as written by file and console sinks."""
        return f"{self.level_label}: {self.message}"

    def extra_context(self) -> Iterator[Tuple[str, Any]]:
        """Context entries whose key is not a placeholder of the template."""
        for key, value in self.context.items():
            if not has_placeholder(self.template, key):
                yield key, value


__all__ = ["LogRecord"]
