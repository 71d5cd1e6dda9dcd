from __future__ import annotations

from xlogger.scripts import has_placeholder, interpolate, is_stringable


class Named:
    def __str__(self) -> str:
        return "named-object"


class Opaque:
    pass


def test_interpolate_replaces_placeholder() -> None:
    assert interpolate("Run loop ({loop})", {"loop": 3}) == "Run loop (3)"


def test_missing_key_stays_literal() -> None:
    assert interpolate("value {missing}", {"other": 1}) == "value {missing}"


def test_container_values_are_skipped() -> None:
    context = {"data": {"a": 1}, "items": [1, 2], "pair": (1, 2)}
    message = interpolate("{data} {items} {pair}", context)
    assert message == "{data} {items} {pair}"


def test_objects_need_their_own_str() -> None:
    assert interpolate("{a} {b}", {"a": Named(), "b": Opaque()}) == "named-object {b}"


def test_exceptions_render_their_message() -> None:
    assert interpolate("failed: {exception}", {"exception": ValueError("boom")}) == "failed: boom"


def test_replacement_is_not_recursive() -> None:
    message = interpolate("{first} / {second}", {"first": "{second}", "second": "2"})
    assert message == "{second} / 2"


def test_none_renders_empty() -> None:
    assert interpolate("[{value}]", {"value": None}) == "[]"


def test_every_occurrence_is_replaced() -> None:
    assert interpolate("{x}-{x}-{x}", {"x": "y"}) == "y-y-y"


def test_message_objects_are_converted() -> None:
    assert interpolate(Named(), {}) == "named-object"


def test_is_stringable() -> None:
    assert is_stringable("text")
    assert is_stringable(4.2)
    assert is_stringable(True)
    assert is_stringable(None)
    assert not is_stringable({"k": "v"})
    assert not is_stringable(Opaque())


def test_has_placeholder() -> None:
    assert has_placeholder("Start {class}::run()", "class")
    assert not has_placeholder("Start class::run()", "class")
