"""Control commands — the closed set of ANSI sequences ansilex recognizes.

Each command is a frozen dataclass so values compare and hash structurally.
``ControlCommand`` is the union of all variants; downstream renderers
pattern-match on it with ``match``/``case``.

Deliberately incomplete relative to the full terminal command set: mode
setting (``ESC[=nh`` / ``ESC[=nl``) and keyboard string redefinition
(``ESC[code;"string"p``) are not modeled.

Every command can re-emit its canonical escape sequence via ``.sequence``.
"""

from dataclasses import dataclass
from typing import Union

ESC = "\x1b"
CSI = ESC + "["


def _fuse(final: str, *params: int) -> str:
    """Join parameters with ``;`` and wrap them in ``CSI ... final``."""
    return CSI + ";".join(str(p) for p in params) + final


# ── Cursor positioning ───────────────────────────────────────────────────


@dataclass(frozen=True)
class CursorHome:
    """``ESC[H`` or ``ESC[f`` — move the cursor to the top-left corner."""

    @property
    def sequence(self) -> str:
        return _fuse("H")


@dataclass(frozen=True)
class CursorPosition:
    """``ESC[row;colH`` or ``ESC[row;colf``."""

    row: int
    col: int

    @property
    def sequence(self) -> str:
        return _fuse("H", self.row, self.col)


@dataclass(frozen=True)
class CursorUp:
    amount: int

    @property
    def sequence(self) -> str:
        return _fuse("A", self.amount)


@dataclass(frozen=True)
class CursorDown:
    amount: int

    @property
    def sequence(self) -> str:
        return _fuse("B", self.amount)


@dataclass(frozen=True)
class CursorForward:
    amount: int

    @property
    def sequence(self) -> str:
        return _fuse("C", self.amount)


@dataclass(frozen=True)
class CursorBackward:
    amount: int

    @property
    def sequence(self) -> str:
        return _fuse("D", self.amount)


@dataclass(frozen=True)
class SaveCursorPosition:
    @property
    def sequence(self) -> str:
        return _fuse("s")


@dataclass(frozen=True)
class RestoreCursorPosition:
    @property
    def sequence(self) -> str:
        return _fuse("u")


# ── Erasing ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EraseDisplay:
    """``ESC[2J`` — clear the whole screen."""

    @property
    def sequence(self) -> str:
        return _fuse("J", 2)


@dataclass(frozen=True)
class EraseLine:
    """``ESC[K`` — clear from the cursor to the end of the line."""

    @property
    def sequence(self) -> str:
        return _fuse("K")


# ── Graphic rendition ────────────────────────────────────────────────────


@dataclass(frozen=True)
class SetGraphicMode:
    """``ESC[v;...;vm`` — Select Graphic Rendition (colors, bold, ...).

    ``values`` keeps the source order and always holds at least one code.
    """

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        # Accept any iterable (e.g. a list) but store an immutable tuple
        values = tuple(self.values)
        if not values:
            raise ValueError("SetGraphicMode requires at least one value")
        object.__setattr__(self, "values", values)

    @property
    def sequence(self) -> str:
        return _fuse("m", *self.values)


ControlCommand = Union[
    CursorHome,
    CursorPosition,
    CursorUp,
    CursorDown,
    CursorForward,
    CursorBackward,
    SaveCursorPosition,
    RestoreCursorPosition,
    EraseDisplay,
    EraseLine,
    SetGraphicMode,
]


def command_params(command: ControlCommand) -> list[int]:
    """Return the numeric parameters carried by a command, in source order."""
    match command:
        case CursorPosition(row=row, col=col):
            return [row, col]
        case CursorUp(amount=n) | CursorDown(amount=n):
            return [n]
        case CursorForward(amount=n) | CursorBackward(amount=n):
            return [n]
        case SetGraphicMode(values=values):
            return list(values)
        case _:
            return []
