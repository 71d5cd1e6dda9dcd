# xlogger/scripts/expand_path.py
"""
Placeholder expansion for log file paths.

Lets log files be split chronologically and/or per user, e.g.
`logs/{year}/app_{date}_{name}.csv`.
"""

import re
from datetime import date
from typing import Optional
from .get_date_range import get_date_tokens

_NAME_FILTER = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_user_name(user: str) -> str:
    """Drop every character that is not A-Z, a-z, 0-9, '_' or '-'."""
    return _NAME_FILTER.sub("", user)


def expand_path_placeholders(
    template: str,
    user: str = "",
    target_date: Optional[date] = None,
) -> str:
    """
    Replace path placeholders with their current values.

    Supported placeholders:
    - {date}  : current date (YYYY-MM-DD)
    - {month} : current month (YYYY-MM)
    - {year}  : current year (YYYY)
    - {week}  : current ISO-8601 week (YYYY_WW)
    - {name}  : the user name, filtered to a valid file name

    Args:
        template: Path, file name or full path
        user: User name for {name}
        target_date: Date to expand (default: today)

    Returns:
        The expanded path

    Example:
        >>> expand_path_placeholders("test_{date}_{name}.csv", "S./Kien", date(2024, 3, 1))
        'test_2024-03-01_SKien.csv'
    """
    path = template
    for token, value in get_date_tokens(target_date).items():
        path = path.replace(token, value)
    return path.replace("{name}", sanitize_user_name(user))


__all__ = ["expand_path_placeholders", "sanitize_user_name"]
