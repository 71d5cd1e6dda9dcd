# xlogger/sinks/file_sink.py
"""Delimited text file sink (.log, .csv, .txt)."""
import fcntl
import os
from pathlib import Path
from typing import Optional, TextIO

from xlogger.config.sink_config import SinkConfiguration
from xlogger.errors import SinkUnavailableError
from xlogger.level_filter import LevelLike
from xlogger.record import LogRecord
from .base import LogSink

# extension -> (separator, replacement of the separator inside text fields)
_SEPARATORS = {
    "csv": (";", ","),
    "txt": (";", ","),
}
_DEFAULT_SEPARATOR = ("\t", " ")


class FileSink(LogSink):
    """
    Sink writing one line per record to a text file.

    The field separator depends on the file extension:
    - `.csv`, `.txt` : semicolon, `;` inside a field becomes `,`
    - `.log`, others : TAB, TAB inside a field becomes a space

    CR/LF inside a field become spaces, so every line is one record and
    every line of a given option mask has the same number of fields:
    timestamp, [IP], [user], [caller], `LEVEL: message`, [user-agent].

    The file is opened on the first record and kept open; each write holds
    an exclusive lock so concurrent processes never interleave lines.
    """

    def __init__(
        self,
        level: Optional[LevelLike] = None,
        fullpath: Optional[str] = None,
        config: Optional[SinkConfiguration] = None,
    ):
        """
        Initialize file sink.

        Args:
            level: Minimum level to log
            fullpath: Log file, may contain placeholders (see set_fullpath)
            config: Optional starting configuration
        """
        self._logfile: Optional[TextIO] = None
        self._separator = ""
        self._replacement = ""
        self._reset_requested = False
        super().__init__(level=level, config=config)
        if fullpath:
            self.set_fullpath(fullpath)

    @property
    def name(self) -> str:
        return "file"

    @property
    def separator(self) -> str:
        """Separator of the open file, "" while closed."""
        return self._separator

    def reset(self) -> None:
        """Truncate the log file when it is opened next."""
        self._close_destination()
        self._reset_requested = True

    def __del__(self) -> None:
        if getattr(self, "_logfile", None) is not None:
            self._close_destination()

    def _emit(self, record: LogRecord) -> None:
        try:
            logfile = self._open_logfile()
        except SinkUnavailableError as exc:
            self._report_dropped(exc.reason, destination=exc.destination)
            return

        line = self._format_line(record)
        try:
            fcntl.flock(logfile.fileno(), fcntl.LOCK_EX)
            try:
                logfile.write(line + "\n")
                logfile.flush()
            finally:
                fcntl.flock(logfile.fileno(), fcntl.LOCK_UN)
        except (OSError, ValueError) as exc:
            self._report_dropped(str(exc), destination=self.get_fullpath())

    def _format_line(self, record: LogRecord) -> str:
        fields = [record.timestamp_text]
        if record.ip is not None:
            fields.append(self._prepare_text(record.ip))
        if record.user is not None:
            fields.append(self._prepare_text(record.user))
        if record.caller is not None:
            fields.append(self._prepare_text(record.caller))
        fields.append(self._prepare_text(record.labeled_message))
        if record.user_agent is not None:
            fields.append(self._prepare_text(record.user_agent))
        return self._separator.join(fields)

    def _prepare_text(self, text: str) -> str:
        """Keep a field on one line and free of separators."""
        text = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        return text.replace(self._separator, self._replacement)

    def _open_logfile(self) -> TextIO:
        """
        Open the log file if not done so far and pick the separator.

        Raises:
            SinkUnavailableError: If the file cannot be created or opened
        """
        if self._logfile is not None:
            return self._logfile

        fullpath = self.get_fullpath()
        if not self.config.filename:
            raise SinkUnavailableError(fullpath, "no log file name set")

        extension = os.path.splitext(fullpath)[1].lower().lstrip(".")
        self._separator, self._replacement = _SEPARATORS.get(extension, _DEFAULT_SEPARATOR)

        mode = "w" if self._reset_requested else "a"
        try:
            Path(fullpath).parent.mkdir(parents=True, exist_ok=True)
            self._logfile = open(fullpath, mode, encoding="utf-8", errors="backslashreplace")
        except OSError as exc:
            raise SinkUnavailableError(fullpath, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            # e.g. an embedded NUL byte in the path
            raise SinkUnavailableError(fullpath, str(exc)) from exc

        self._reset_requested = False
        return self._logfile

    def _close_destination(self) -> None:
        if self._logfile is not None:
            try:
                self._logfile.close()
            finally:
                self._logfile = None
                self._separator = ""
                self._replacement = ""


__all__ = ["FileSink"]
