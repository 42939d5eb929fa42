"""Tests for the bounded command buffer."""

import pytest

from modalview.command_buffer import CommandBuffer


def test_default_capacity_holds_nine_keys():
    buf = CommandBuffer()
    assert buf.capacity == 10
    for i in range(9):
        assert buf.push(str(i)) is False
    assert buf.is_full
    assert buf.push("x") is True
    assert len(buf) == 9
    assert buf.last == "8"


def test_clear_and_collapse():
    buf = CommandBuffer()
    buf.push("g")
    buf.push("x")
    buf.collapse_to(":")
    assert buf.contents() == (":",)
    buf.clear()
    assert buf.contents() == ()
    assert buf.first is None
    assert buf.last is None
    assert not buf


def test_at_and_startswith():
    buf = CommandBuffer()
    for ch in ":q":
        buf.push(ch)
    assert buf.at(0) == ":"
    assert buf.at(1) == "q"
    assert buf.at(2) is None
    assert buf.startswith((":",))
    assert not buf.startswith((":", "w"))


def test_text_skips_unprintable_keys():
    buf = CommandBuffer()
    for code in (":", "w", "\x1b", "<delete>", "q"):
        buf.push(code)
    assert buf.text == ":wq"


def test_capacity_must_leave_room_for_a_key():
    with pytest.raises(ValueError):
        CommandBuffer(capacity=1)
