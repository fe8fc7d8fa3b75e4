from __future__ import annotations

import pytest

from prompt_handoff.buffer import (
    CursorRangeError,
    InsertAt,
    KillRange,
    LineBuffer,
    LineSnapshot,
    NoOp,
    ReplaceRange,
    clamp_offset,
)


def test_read_line_defaults_cursor_to_end() -> None:
    buffer = LineBuffer("hello")

    assert buffer.read_line() == LineSnapshot(text="hello", cursor=5)


def test_constructor_clamps_cursor() -> None:
    assert LineBuffer("abc", cursor=10).cursor == 3
    assert LineBuffer("abc", cursor=-1).cursor == 0


def test_insert_moves_cursor_after_text() -> None:
    buffer = LineBuffer("", cursor=0)

    delta = buffer.apply(InsertAt(0, "hi there"))

    assert delta.text == "hi there"
    assert delta.cursor == 8
    assert delta.kind == "insert"


def test_kill_whole_line() -> None:
    buffer = LineBuffer("old content", cursor=5)

    delta = buffer.apply(KillRange(0, 11))

    assert delta.text == ""
    assert delta.cursor == 0


def test_replace_whole_line() -> None:
    buffer = LineBuffer("hello world", cursor=3)

    delta = buffer.apply(ReplaceRange(0, 11, "goodbye world"))

    assert (delta.text, delta.cursor) == ("goodbye world", 13)


def test_noop_keeps_text_and_cursor_but_bumps_version() -> None:
    buffer = LineBuffer("same", cursor=2)

    delta = buffer.apply(NoOp())

    assert (delta.text, delta.cursor, delta.version) == ("same", 2, 1)


def test_out_of_range_primitive_is_rejected() -> None:
    buffer = LineBuffer("abc")

    with pytest.raises(CursorRangeError) as excinfo:
        buffer.apply(KillRange(0, 10))

    assert excinfo.value.span == (0, 10)
    assert buffer.text == "abc"
    assert buffer.version == 0


def test_apply_primitive_satisfies_host_protocol() -> None:
    buffer = LineBuffer("a")

    buffer.apply_primitive(ReplaceRange(0, 1, "b"))

    assert buffer.text == "b"


def test_clamp_offset() -> None:
    assert clamp_offset("abc", 2) == 2
    assert clamp_offset("abc", 7) == 3
    assert clamp_offset("abc", -2) == 0
