# xlogger/scripts/get_caller.py
import inspect
import os
from types import FrameType
from typing import Iterable, Optional, Sequence


def _normalize_paths(paths: Iterable[str]) -> list[str]:
    return [os.path.normcase(os.path.abspath(path)) for path in paths if path]


def _is_ignored(
    frame: FrameType,
    ignore_classes: tuple[type, ...],
    ignore_paths: Sequence[str],
) -> bool:
    if ignore_classes:
        owner = frame.f_locals.get("self", frame.f_locals.get("cls"))
        if owner is not None:
            owner_type = owner if isinstance(owner, type) else type(owner)
            if issubclass(owner_type, ignore_classes):
                return True

    filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
    for path in ignore_paths:
        if filename == path or filename.startswith(path.rstrip(os.sep) + os.sep):
            return True
    return False


def format_caller(filename: str, line: int, document_root: str = "") -> str:
    """Format a location as "<file>(<line>)" with the document root cut off."""
    if document_root and filename.startswith(document_root):
        filename = filename[len(document_root):]
    return f"{filename}({line})"


def get_caller(
    ignore_classes: Iterable[type] = (),
    ignore_paths: Iterable[str] = (),
    document_root: str = "",
    start_frame: Optional[FrameType] = None,
    depth: int = 0,
) -> str:
    """
    Get the first call site outside of the logging code.

    Walks the stack outward, skipping frames that run a method of an
    ignored class (or subclass) and frames whose source file lies under
    an ignored path.

    Args:
        ignore_classes: Classes whose methods are not reported as caller
        ignore_paths: Files or directories whose frames are skipped
        document_root: Prefix cut off from the reported file name
        start_frame: Frame to start from (default: the caller of this function)
        depth: Number of frames to step out before filtering starts

    Returns:
        "<file>(<line>)" of the first external frame, or "" if none resolves.
        Never raises.

    Example:
        If app/views.py line 12 calls sink.error(), which calls into the
        sink internals:
        - sink frames are skipped (self is a LogSink)
        - returns "app/views.py(12)" with document_root "/srv/www/"
    """
    frame: Optional[FrameType] = None
    try:
        if start_frame is not None:
            frame = start_frame
        else:
            current = inspect.currentframe()
            frame = current.f_back if current is not None else None
            del current

        for _ in range(depth):
            if frame is None:
                return ""
            frame = frame.f_back

        classes = tuple(ignore_classes)
        paths = _normalize_paths(ignore_paths)
        while frame is not None and _is_ignored(frame, classes, paths):
            frame = frame.f_back

        if frame is None:
            return ""
        return format_caller(frame.f_code.co_filename, frame.f_lineno, document_root)
    except Exception:
        # Diagnostic annotation only
        return ""
    finally:
        del frame


__all__ = ["get_caller", "format_caller"]
