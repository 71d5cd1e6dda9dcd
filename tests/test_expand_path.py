from __future__ import annotations

from datetime import date

import pytest

from xlogger.scripts import expand_path_placeholders, get_iso_week, sanitize_user_name


def test_date_tokens() -> None:
    day = date(2024, 3, 7)
    assert expand_path_placeholders("{date}|{month}|{year}|{week}", target_date=day) == (
        "2024-03-07|2024-03|2024|2024_10"
    )


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 12, 30), "2025_01"),
        (date(2021, 1, 3), "2020_53"),
        (date(2024, 1, 1), "2024_01"),
    ],
)
def test_week_uses_iso_year(day: date, expected: str) -> None:
    assert expand_path_placeholders("{week}", target_date=day) == expected


def test_name_is_sanitized() -> None:
    path = expand_path_placeholders("test_{date}_{name}.csv", "S./Kien", date(2024, 3, 1))
    assert path == "test_2024-03-01_SKien.csv"


def test_sanitize_keeps_allowed_characters() -> None:
    assert sanitize_user_name("a-b_C9 ../ü$") == "a-b_C9"


def test_unknown_tokens_are_kept() -> None:
    assert expand_path_placeholders("logs/{host}.log") == "logs/{host}.log"


def test_get_iso_week() -> None:
    assert get_iso_week(date(2024, 1, 10)) == (2024, 2)
