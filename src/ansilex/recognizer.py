"""Sequence recognizer — turns the bytes after an ESC into a ControlCommand.

``recognize()`` is handed a buffer positioned right after the escape marker
(0x1B) and tries to match exactly one control sequence from the small
grammar below. Matching is byte-precise and case-sensitive::

    [H  [f  [s  [u  [K  [2J
    [nA [nB [nC [nD
    [nm [n;...;nm
    [r;cH [r;cf

Failure is reported as ``None``, never as an exception: a malformed sequence
is an expected input, and the scanner folds it back into plain text.

Key function: recognize().
"""

from collections.abc import Callable

from .commands import (
    ControlCommand,
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

Buffer = str | bytes | bytearray | memoryview

# Parameters are capped at the width of a native 64-bit unsigned integer.
# Larger values are rejected rather than wrapped.
MAX_PARAMETER = 2**64 - 1

_DIGITS = frozenset("0123456789")


def as_byte_view(data: bytes | bytearray | memoryview) -> memoryview:
    """Flat, contiguous unsigned-byte view of a bytes-like object.

    Strided or multi-dimensional views cannot be cast in place, so those are
    copied once into a contiguous buffer.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast("B")


# One-character sequences: ESC [ <char>
_SIMPLE_COMMANDS: dict[str, ControlCommand] = {
    "H": CursorHome(),
    "f": CursorHome(),
    "s": SaveCursorPosition(),
    "u": RestoreCursorPosition(),
    "K": EraseLine(),
}

_CURSOR_MOVES: dict[str, Callable[[int], ControlCommand]] = {
    "A": CursorUp,
    "B": CursorDown,
    "C": CursorForward,
    "D": CursorBackward,
}


def _parse_value(digits: list[str], max_value: int) -> int | None:
    """Parse accumulated ASCII digits; None if empty or above max_value."""
    if not digits:
        return None
    # Leading zeros are legal ("000000" is 0), so only strip them before
    # the length check that keeps int() away from huge digit runs.
    significant = "".join(digits).lstrip("0") or "0"
    if len(significant) > len(str(max_value)):
        return None
    value = int(significant)
    if value > max_value:
        return None
    return value


def recognize(
    buffer: Buffer,
    length: int | None = None,
    *,
    offset: int = 0,
    max_value: int = MAX_PARAMETER,
) -> tuple[int, ControlCommand] | None:
    """Recognize one control sequence at ``buffer[offset:]``.

    Args:
        buffer: Text or bytes-like input, positioned (at ``offset``) on the
            unit right after an escape marker.
        length: Number of valid units from ``offset`` onward. Defaults to the
            rest of the buffer; larger values are clamped to it.
        offset: Start position inside ``buffer``. Lets the scanner avoid
            slicing (and copying) the remaining input for every marker.
        max_value: Largest numeric parameter accepted.

    Returns:
        ``(n, command)`` where units ``0..n`` (inclusive, relative to
        ``offset``) form ``command``, or ``None`` if they do not form a
        recognized sequence.
    """
    if not isinstance(buffer, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"expected str or bytes-like buffer, got {type(buffer).__name__}")
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if length is not None and length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if isinstance(buffer, memoryview) and (buffer.ndim != 1 or buffer.format != "B"):
        buffer = as_byte_view(buffer)

    available = max(len(buffer) - offset, 0)
    length = available if length is None else min(length, available)

    def at(index: int) -> str:
        unit = buffer[offset + index]
        return unit if isinstance(unit, str) else chr(unit)

    if length == 0 or at(0) != "[":
        return None

    idx = 1
    if idx >= length:
        return None

    first = at(idx)
    if first in _SIMPLE_COMMANDS:
        return idx, _SIMPLE_COMMANDS[first]
    # "2J" is the only two-character sequence; any other "2" starts a value
    if first == "2" and idx + 1 < length and at(idx + 1) == "J":
        return idx + 1, EraseDisplay()
    if first not in _DIGITS:
        return None

    # A lone digit can never be terminated
    if idx + 1 == length:
        return None

    digits = [first]
    values: list[int] = []

    # ── First value: single-parameter commands, or the start of a list ──
    while True:
        idx += 1
        if idx >= length:
            return None
        char = at(idx)
        if char in _DIGITS:
            digits.append(char)
            continue
        if char in _CURSOR_MOVES:
            value = _parse_value(digits, max_value)
            if value is None:
                return None
            return idx, _CURSOR_MOVES[char](value)
        if char == "m":
            value = _parse_value(digits, max_value)
            if value is None:
                return None
            return idx, SetGraphicMode((value,))
        if char == ";":
            value = _parse_value(digits, max_value)
            if value is None:
                return None
            values.append(value)
            digits = []
            break
        return None

    # ── Further values: ";"-separated list ending in H, f or m ──
    while True:
        idx += 1
        if idx >= length:
            return None
        char = at(idx)
        if char in _DIGITS:
            digits.append(char)
            continue
        if char in "Hf":
            # A trailing ";" before H/f leaves nothing pending; that is fine
            if digits:
                value = _parse_value(digits, max_value)
                if value is None:
                    return None
                values.append(value)
            # Extra values beyond row and column are discarded
            if len(values) < 2:
                return None
            return idx, CursorPosition(values[0], values[1])
        if char not in ";m":
            return None
        value = _parse_value(digits, max_value)
        if value is None:
            return None
        values.append(value)
        digits = []
        if char == "m":
            return idx, SetGraphicMode(tuple(values))
