# xlogger/sinks/xml_sink.py
"""XML document sink, optionally styled by an XSL stylesheet."""
import os
import re
import traceback
from typing import Any, Optional
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from xlogger.config.sink_config import SinkConfiguration
from xlogger.errors import SinkUnavailableError
from xlogger.level_filter import LevelLike
from xlogger.record import LogRecord
from xlogger.scripts import has_placeholder, is_stringable, to_text
from .base import LogSink

ROOT_ELEMENT = "log"
EXCEPTION_KEY = "exception"

# everything outside the XML 1.0 Char production, lone surrogates included
_INVALID_XML_CHARS = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _strip_whitespace_nodes(node: minidom.Node) -> None:
    """Drop indentation text so pretty printing does not stack it up."""
    for child in list(node.childNodes):
        if child.nodeType == child.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
        elif child.hasChildNodes():
            _strip_whitespace_nodes(child)


def _context_text(value: Any) -> str:
    return to_text(value) if is_stringable(value) else repr(value)


def _xml_text(text: str) -> str:
    """Replace characters a well-formed document cannot hold with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", text)


class XMLSink(LogSink):
    """
    Sink appending records as `item` elements to an XML document.

    Document layout:

        <?xml-stylesheet type="text/xsl" href="XMLLogger.xsl"?>
        <log>
          <item>
            <timestamp/> <IP-adress/> <user/> <caller/>
            <level/> <message/> <useragent/>
            <exception> <message/> <type/> <trace>...</trace> </exception>
            <context> <key/> <value/> </context>
          </item>
        </log>

    The whole document is written back after every record. There is no
    locking: concurrent writers may lose records or corrupt the file.
    """

    def __init__(
        self,
        level: Optional[LevelLike] = None,
        fullpath: Optional[str] = None,
        stylesheet: str = "",
        config: Optional[SinkConfiguration] = None,
    ):
        """
        Initialize XML sink.

        Args:
            level: Minimum level to log
            fullpath: Log file, may contain placeholders (see set_fullpath)
            stylesheet: XSL file referenced by newly created documents
            config: Optional starting configuration
        """
        self._document: Optional[minidom.Document] = None
        self._stylesheet = stylesheet
        super().__init__(level=level, config=config)
        if fullpath:
            self.set_fullpath(fullpath)

    @property
    def name(self) -> str:
        return "xml"

    def set_stylesheet(self, stylesheet: str) -> None:
        """Set the XSL file used to transform the log into HTML."""
        self._stylesheet = stylesheet

    def _emit(self, record: LogRecord) -> None:
        try:
            document = self._open_document()
        except SinkUnavailableError as exc:
            self._report_dropped(exc.reason, destination=exc.destination)
            return

        item = self._add_child(document.documentElement, "item")
        self._add_child(item, "timestamp", record.timestamp_text)
        if record.ip is not None:
            self._add_child(item, "IP-adress", record.ip)
        if record.user is not None:
            self._add_child(item, "user", record.user)
        if record.caller is not None:
            self._add_child(item, "caller", record.caller)
        self._add_child(item, "level", record.level_label)
        self._add_child(item, "message", record.message)
        if record.user_agent is not None:
            self._add_child(item, "useragent", record.user_agent)

        for key, value in record.context.items():
            if key == EXCEPTION_KEY and isinstance(value, BaseException):
                self._add_exception(item, value)
            elif not has_placeholder(record.template, key):
                context = self._add_child(item, "context")
                self._add_child(context, "key", str(key))
                self._add_child(context, "value", _context_text(value))

        try:
            self._save(document)
        except (OSError, ValueError) as exc:
            self._report_dropped(str(exc), destination=self.get_fullpath())

    def _add_exception(self, parent: minidom.Element, exc: BaseException) -> None:
        element = self._add_child(parent, "exception")
        self._add_child(element, "message", str(exc))
        self._add_child(element, "type", type(exc).__name__)
        for frame in traceback.extract_tb(exc.__traceback__):
            trace = self._add_child(element, "trace")
            self._add_child(trace, "file", frame.filename)
            self._add_child(trace, "line", str(frame.lineno))
            self._add_child(trace, "function", frame.name)
            if frame.line:
                self._add_child(trace, "code", frame.line)

    def _add_child(self, parent: minidom.Node, tag: str, text: str = "") -> minidom.Element:
        document = self._document
        child = document.createElement(tag)
        if text:
            child.appendChild(document.createTextNode(_xml_text(text)))
        parent.appendChild(child)
        return child

    def _open_document(self) -> minidom.Document:
        """
        Load the log document, or create it if the file does not exist.

        Raises:
            SinkUnavailableError: If the file cannot be read, parsed or created
        """
        if self._document is not None:
            return self._document

        fullpath = self.get_fullpath()
        if not self.config.filename:
            raise SinkUnavailableError(fullpath, "no log file name set")

        if not os.path.exists(fullpath):
            self._document = self._create_document()
            try:
                os.makedirs(os.path.dirname(fullpath) or ".", exist_ok=True)
                self._save(self._document)
            except (OSError, ValueError) as exc:
                self._document = None
                raise SinkUnavailableError(fullpath, exc.strerror or str(exc)) from exc
            return self._document

        try:
            document = minidom.parse(fullpath)
        except (OSError, ValueError) as exc:
            raise SinkUnavailableError(fullpath, exc.strerror or str(exc)) from exc
        except ExpatError as exc:
            raise SinkUnavailableError(fullpath, f"invalid XML: {exc}") from exc
        if document.documentElement is None:
            raise SinkUnavailableError(fullpath, "missing root element")

        _strip_whitespace_nodes(document)
        self._document = document
        return document

    def _create_document(self) -> minidom.Document:
        document = minidom.getDOMImplementation().createDocument(None, ROOT_ELEMENT, None)
        if self._stylesheet:
            instruction = document.createProcessingInstruction(
                "xml-stylesheet",
                f'type="text/xsl" href="{self._stylesheet}"',
            )
            document.insertBefore(instruction, document.documentElement)
        return document

    def _save(self, document: minidom.Document) -> None:
        content = document.toprettyxml(indent="  ", encoding="utf-8")
        with open(self.get_fullpath(), "wb") as f:
            f.write(content)

    def _close_destination(self) -> None:
        if self._document is not None:
            self._document.unlink()
            self._document = None


__all__ = ["XMLSink"]
