# xlogger/scripts/get_date_range.py
from datetime import date
from typing import Dict, Optional


def get_iso_week(target_date: Optional[date] = None) -> tuple[int, int]:
    """
    Calculate the ISO 8601 year and week number of the target date.

    The ISO year differs from the calendar year around new year, e.g.
    2024-12-30 belongs to week 1 of 2025.

    Args:
        target_date: The date to find the week for. Defaults to today if not provided.

    Returns:
        A tuple of (iso_year, week_number). Week number is 1-53.

    Example:
        >>> get_iso_week(date(2024, 1, 10))
        (2024, 2)
    """
    _date = target_date or date.today()
    iso_year, week_number, _ = _date.isocalendar()
    return iso_year, week_number


def get_date_tokens(target_date: Optional[date] = None) -> Dict[str, str]:
    """
    Date placeholders usable in log file paths.

    Returns:
        Mapping of placeholder to its value for the target date:
        {date} YYYY-MM-DD, {month} YYYY-MM, {year} YYYY, {week} YYYY_WW
    """
    _date = target_date or date.today()
    iso_year, week_number = get_iso_week(_date)
    return {
        "{date}": _date.strftime("%Y-%m-%d"),
        "{month}": _date.strftime("%Y-%m"),
        "{year}": _date.strftime("%Y"),
        "{week}": f"{iso_year:04d}_{week_number:02d}",
    }


__all__ = ["get_iso_week", "get_date_tokens"]
