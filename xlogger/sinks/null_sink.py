# xlogger/sinks/null_sink.py
from xlogger.record import LogRecord
from .base import LogSink


class NullSink(LogSink):
    """
    Sink that discards every record.

    Levels are still checked, so a wrong level name fails the same way
    it would with a real sink.
    """

    @property
    def name(self) -> str:
        return "null"

    def _emit(self, record: LogRecord) -> None:
        pass


__all__ = ["NullSink"]
