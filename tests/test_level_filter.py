from __future__ import annotations

import itertools

import pytest

from xlogger import Severity, UnknownSeverityError, ordinal, should_log

ORDINALS = {
    "emergency": 7,
    "alert": 6,
    "critical": 5,
    "error": 4,
    "warning": 3,
    "notice": 2,
    "info": 1,
    "debug": 0,
}


@pytest.mark.parametrize("name,value", sorted(ORDINALS.items()))
def test_ordinal_of_each_level(name: str, value: int) -> None:
    assert ordinal(name) == value
    assert ordinal(Severity(name)) == value


@pytest.mark.parametrize("minimum,candidate", list(itertools.product(ORDINALS, repeat=2)))
def test_should_log_for_all_pairs(minimum: str, candidate: str) -> None:
    assert should_log(minimum, candidate) is (ORDINALS[candidate] >= ORDINALS[minimum])


@pytest.mark.parametrize("name", ["fatal", "ERROR", "", "warn", "trace"])
def test_unknown_level_raises(name: str) -> None:
    with pytest.raises(UnknownSeverityError) as exc_info:
        ordinal(name)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.code == "UNKNOWN_SEVERITY"


def test_unknown_candidate_raises_even_below_threshold() -> None:
    with pytest.raises(UnknownSeverityError):
        should_log("emergency", "verbose")


def test_severity_label_and_str() -> None:
    assert Severity.CRITICAL.label == "CRITICAL"
    assert str(Severity.NOTICE) == "notice"
