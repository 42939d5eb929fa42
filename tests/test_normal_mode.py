"""Tests for Normal-mode command recognition."""

import random

from helpers import make_editor, press
from modalview.modes import Mode


def cursor(editor):
    c = editor.state.cursor_model.cursor
    return c.column, c.row


def test_h_and_l_stay_within_row():
    line = "hello world"
    rng = random.Random(1234)
    for _ in range(50):
        editor = make_editor([line])
        expected = 0
        for _ in range(rng.randint(1, 40)):
            k = rng.choice("hl")
            press(editor, k)
            expected += 1 if k == "l" else -1
            expected = min(max(expected, 0), len(line))
            column, _ = cursor(editor)
            assert column == expected
            assert 0 <= column <= len(line)
        assert len(editor.state.command_buffer) == 0


def test_l_can_reach_row_length():
    editor = make_editor(["abc"])
    press(editor, "lllll")
    assert cursor(editor) == (3, 0)


def test_sticky_column_round_trip():
    editor = make_editor(["abcdefgh", "ab", "", "abcdefgh"])
    press(editor, "lllll")
    press(editor, "jjj")
    assert cursor(editor) == (5, 3)
    press(editor, "kkk")
    assert cursor(editor) == (5, 0)


def test_column_past_row_end_comes_back_one_short():
    # l may park the cursor on rowLength, but a vertical move only keeps the
    # sticky column when it is a valid character index, so j/k snap it to
    # rowLength - 1 even on a row of the same length.
    editor = make_editor(["abc", "abc"])
    press(editor, "lll")
    assert cursor(editor) == (3, 0)
    press(editor, "j")
    assert cursor(editor) == (2, 1)
    press(editor, "k")
    assert cursor(editor) == (2, 0)


def test_j_and_k_stop_at_edges():
    editor = make_editor(["one", "two"])
    press(editor, "jjjj")
    assert cursor(editor)[1] == 1
    press(editor, "kkkk")
    assert cursor(editor)[1] == 0


def test_gg_jumps_to_first_row():
    editor = make_editor([f"line {i}" for i in range(40)])
    for start in (0, 7, 39):
        editor.state.cursor_model.cursor.row = start
        press(editor, "gg")
        assert cursor(editor)[1] == 0
        assert len(editor.state.command_buffer) == 0


def test_G_jumps_to_last_row():
    editor = make_editor([f"line {i}" for i in range(40)])
    press(editor, "G")
    assert cursor(editor)[1] == 39
    press(editor, "G")
    assert cursor(editor)[1] == 39


def test_single_g_waits_for_more_keys():
    editor = make_editor(["a", "b"])
    press(editor, "j", "g")
    assert editor.state.command_buffer.contents() == ("g",)
    assert cursor(editor)[1] == 1


def test_g_with_unknown_second_key_is_kept_until_full():
    editor = make_editor(["a", "b"])
    press(editor, "gx")
    assert editor.state.command_buffer.contents() == ("g", "x")
    # The prefix path owns the buffer, so a later 'j' is not a motion
    press(editor, "j")
    assert cursor(editor)[1] == 0


def test_colon_discards_pending_prefix():
    editor = make_editor(["a"])
    press(editor, "gx:")
    assert editor.state.command_buffer.contents() == (":",)


def test_unknown_colon_command_clears_buffer():
    editor = make_editor(["a"])
    press(editor, ":w", "\r")
    assert editor.state.command_buffer.contents() == ()
    assert editor.running is True
    editor.terminal.clear_screen.assert_not_called()


def test_enter_without_colon_clears_buffer():
    editor = make_editor(["a"])
    press(editor, "zz", "\r")
    assert editor.state.command_buffer.contents() == ()
    assert editor.running is True


def test_colon_q_enter_quits():
    editor = make_editor(["a"])
    press(editor, ":q", "\r")
    assert editor.running is False
    editor.terminal.clear_screen.assert_called_once()


def test_colon_q_accepts_newline_terminator():
    editor = make_editor(["a"])
    press(editor, ":q", "\n")
    assert editor.running is False


def test_eleven_unknown_keys_never_overflow():
    editor = make_editor(["a"])
    for i in range(11):
        press(editor, str(i % 10))
        assert len(editor.state.command_buffer) <= 9
    # Cleared on the ninth key, then two more were buffered
    assert editor.state.command_buffer.contents() == ("9", "0")


def test_i_enters_insert_mode():
    editor = make_editor(["a"])
    press(editor, "i")
    assert editor.state.mode == Mode.INSERT
    assert len(editor.state.command_buffer) == 0


def test_empty_store_ignores_motions():
    editor = make_editor([])
    press(editor, "hjklGgg")
    assert cursor(editor) == (0, 0)
    assert len(editor.state.command_buffer) == 0


def test_delete_key_is_buffered_as_a_single_key():
    editor = make_editor(["a"])
    press(editor, "<DELETE>")
    assert editor.state.command_buffer.contents() == ("<delete>",)
