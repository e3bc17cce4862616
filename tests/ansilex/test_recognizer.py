"""Tests for recognizer — byte-exact matching of one ANSI control sequence."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ansilex.commands import (
    CursorBackward,
    CursorDown,
    CursorForward,
    CursorHome,
    CursorPosition,
    CursorUp,
    EraseDisplay,
    EraseLine,
    RestoreCursorPosition,
    SaveCursorPosition,
    SetGraphicMode,
)
from ansilex.recognizer import MAX_PARAMETER, recognize

# ── Recognized sequences ─────────────────────────────────────────────────


class TestRecognized:
    @pytest.mark.parametrize(
        ("seq", "command"),
        [
            ("[s", SaveCursorPosition()),
            ("[u", RestoreCursorPosition()),
            ("[H", CursorHome()),
            ("[f", CursorHome()),
            ("[2J", EraseDisplay()),
            ("[K", EraseLine()),
            ("[0;222H", CursorPosition(0, 222)),
            ("[22;19H", CursorPosition(22, 19)),
            ("[22;19f", CursorPosition(22, 19)),
            ("[1;2;H", CursorPosition(1, 2)),
            ("[9999A", CursorUp(9999)),
            ("[000000B", CursorDown(0)),
            ("[1234567890C", CursorForward(1234567890)),
            ("[1D", CursorBackward(1)),
            ("[0m", SetGraphicMode((0,))),
            ("[1;31m", SetGraphicMode((1, 31))),
            ("[38;5;196m", SetGraphicMode((38, 5, 196))),
        ],
        ids=[
            "save_cursor",
            "restore_cursor",
            "cursor_home_h",
            "cursor_home_f",
            "erase_display",
            "erase_line",
            "cursor_pos_zero_row",
            "cursor_pos_h",
            "cursor_pos_f",
            "cursor_pos_trailing_separator",
            "cursor_up",
            "cursor_down_leading_zeros",
            "cursor_forward_large",
            "cursor_backward",
            "sgr_single",
            "sgr_pair",
            "sgr_triple",
        ],
    )
    def test_consumes_whole_sequence(self, seq: str, command):
        b = seq.encode()
        assert recognize(b, len(b)) == (len(b) - 1, command)

    def test_str_buffer_accepted(self):
        assert recognize("[5A") == (2, CursorUp(5))

    def test_two_not_followed_by_j_is_a_value(self):
        assert recognize(b"[2A") == (2, CursorUp(2))
        assert recognize(b"[2;3H") == (4, CursorPosition(2, 3))
        assert recognize(b"[25m") == (3, SetGraphicMode((25,)))

    def test_extra_position_values_discarded(self):
        assert recognize(b"[1;2;3;4H") == (8, CursorPosition(1, 2))

    def test_trailing_bytes_ignored(self):
        assert recognize(b"[Ktext after") == (1, EraseLine())
        assert recognize(b"[2Jmore") == (2, EraseDisplay())

    def test_strided_memoryview_buffer(self):
        assert recognize(memoryview(b"[_2_J_")[::2]) == (2, EraseDisplay())

    def test_offset_reads_inside_larger_buffer(self):
        buf = b"abc\x1b[4Bxyz"
        assert recognize(buf, offset=4) == (2, CursorDown(4))

    def test_length_limits_available_bytes(self):
        # Terminator present in the buffer but outside the valid length
        assert recognize(b"[12A", 3) is None
        assert recognize(b"[12A", 4) == (3, CursorUp(12))

    def test_length_larger_than_buffer_is_clamped(self):
        assert recognize(b"[12", 50) is None
        assert recognize(b"[u", 50) == (1, RestoreCursorPosition())

    def test_max_value_boundary(self):
        b = f"[{MAX_PARAMETER}A".encode()
        assert recognize(b) == (len(b) - 1, CursorUp(MAX_PARAMETER))


# ── Rejected sequences ───────────────────────────────────────────────────


class TestRejected:
    @pytest.mark.parametrize(
        "seq",
        [
            "[",
            "",
            ")",
            " [s",
            "[1s",
            "[1u",
            "[1;1s",
            "[1k",
            "[k",
            "[1;1D",
            "[m",
            "[J",
            "[;m",
            "[;;;;m",
            "[;H",
            "[;f",
            "[1",
            "[2",
            "[11234231321312",
            "[112342313;",
            "[1.1A",
            "[1;H",
            "[1;;2m",
            "[1;2",
            "[-1A",
            "[+1A",
            "[=7h",
            "[1a",
        ],
        ids=[
            "bracket_only",
            "empty",
            "not_bracket",
            "leading_space",
            "digit_then_save",
            "digit_then_restore",
            "list_then_save",
            "digit_then_lower_k",
            "lower_k",
            "list_then_cursor_move",
            "sgr_no_value",
            "erase_display_no_value",
            "sgr_empty_first",
            "sgr_all_empty",
            "position_empty_first_h",
            "position_empty_first_f",
            "truncated_digit",
            "truncated_two",
            "unterminated_digits",
            "trailing_semicolon",
            "dot_in_value",
            "position_one_value",
            "sgr_empty_middle",
            "truncated_list",
            "negative_sign",
            "plus_sign",
            "set_mode_unsupported",
            "lowercase_terminator",
        ],
    )
    def test_returns_none(self, seq: str):
        b = seq.encode()
        assert recognize(b, len(b)) is None

    def test_overflow_rejected(self):
        b = f"[{MAX_PARAMETER + 1}A".encode()
        assert recognize(b) is None

    def test_custom_max_value(self):
        assert recognize(b"[255m", max_value=255) == (4, SetGraphicMode((255,)))
        assert recognize(b"[1;256m", max_value=255) is None

    def test_huge_digit_run_rejected(self):
        b = b"[" + b"9" * 10_000 + b"C"
        assert recognize(b) is None

    def test_huge_run_of_zeros_is_zero(self):
        b = b"[" + b"0" * 10_000 + b"C"
        assert recognize(b) == (len(b) - 1, CursorForward(0))

    def test_non_ascii_digits_rejected(self):
        assert recognize("[١A") is None

    def test_zero_length(self):
        assert recognize(b"[s", 0) is None


class TestArgumentErrors:
    def test_unsupported_buffer_type(self):
        with pytest.raises(TypeError):
            recognize([0x5B, 0x73], 2)  # type: ignore[arg-type]

    def test_negative_offset(self):
        with pytest.raises(ValueError, match="offset"):
            recognize(b"[s", offset=-1)

    def test_negative_length(self):
        with pytest.raises(ValueError, match="length"):
            recognize(b"[s", -1)


# ── Properties ───────────────────────────────────────────────────────────

_grammar_bytes = st.lists(
    st.sampled_from(list(b"[0123456789;HfsuKJABCDmk2x.")), max_size=20
).map(bytes)


@given(data=st.binary(max_size=40))
def test_never_raises_on_arbitrary_bytes(data: bytes) -> None:
    result = recognize(data, len(data))
    if result is not None:
        consumed, _ = result
        assert 0 < consumed < len(data)


@given(data=_grammar_bytes)
def test_consumed_bytes_end_on_terminator(data: bytes) -> None:
    result = recognize(data, len(data))
    if result is None:
        return
    consumed, command = result
    assert data[0:1] == b"["
    assert chr(data[consumed]) in "HfsuKJABCDm"
    # Re-recognizing just the consumed prefix yields the same command
    assert recognize(data[: consumed + 1]) == (consumed, command)


@given(
    values=st.lists(st.integers(min_value=0, max_value=10**6), min_size=1, max_size=8)
)
def test_sgr_values_preserved_in_order(values: list[int]) -> None:
    seq = ("[" + ";".join(str(v) for v in values) + "m").encode()
    assert recognize(seq) == (len(seq) - 1, SetGraphicMode(tuple(values)))
