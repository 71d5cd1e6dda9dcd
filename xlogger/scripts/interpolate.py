# xlogger/scripts/interpolate.py
"""
PSR-3 message interpolation: `{key}` placeholders filled from the context.
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

_PRIMITIVES = (str, int, float, bool)
_CONTAINERS = (Mapping, list, tuple, set, frozenset)


def placeholder(key: Any) -> str:
    return "{" + str(key) + "}"


def is_stringable(value: Any) -> bool:
    """
    Check if a context value may replace a placeholder.

    Primitives and objects with their own __str__ qualify; containers and
    objects that would only render the default repr do not.
    """
    if value is None or isinstance(value, _PRIMITIVES):
        return True
    if isinstance(value, _CONTAINERS):
        return False
    return type(value).__str__ is not object.__str__


def to_text(value: Any) -> str:
    return "" if value is None else str(value)


def has_placeholder(template: Any, key: Any) -> bool:
    """Check if `{key}` occurs in the raw message template."""
    return placeholder(key) in str(template)


def interpolate(template: Any, context: Optional[Mapping[str, Any]] = None) -> str:
    """
    Replace `{key}` placeholders with the matching context values.

    Replacement is a single literal pass, longest placeholder first;
    replaced text is never scanned again. Placeholders without a
    stringable value stay as they are.

    Args:
        template: Message, any object is converted with str()
        context: Values to interpolate

    Returns:
        The interpolated message

    Example:
        >>> interpolate("Run loop ({loop})", {"loop": 3})
        'Run loop (3)'
        >>> interpolate("{a} and {missing}", {"a": "{missing}"})
        '{missing} and {missing}'
    """
    message = str(template)
    if not context:
        return message

    replacements: Dict[str, str] = {
        placeholder(key): to_text(value)
        for key, value in context.items()
        if is_stringable(value)
    }
    if not replacements:
        return message

    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda match: replacements[match.group(0)], message)


__all__ = ["interpolate", "is_stringable", "has_placeholder", "placeholder", "to_text"]
