# xlogger/scripts/__init__.py
from .expand_path import expand_path_placeholders, sanitize_user_name
from .get_caller import format_caller, get_caller
from .get_date_range import get_date_tokens, get_iso_week
from .interpolate import has_placeholder, interpolate, is_stringable, to_text

__all__ = [
    "expand_path_placeholders",
    "sanitize_user_name",
    "format_caller",
    "get_caller",
    "get_date_tokens",
    "get_iso_week",
    "has_placeholder",
    "interpolate",
    "is_stringable",
    "to_text",
]
