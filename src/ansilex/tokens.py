"""Scanner output tokens — plain-text runs and recognized control commands.

``Text.value`` is a view of the scanned input: a ``str`` slice for text
input, a zero-copy ``memoryview`` slice for bytes-like input. The input
buffer must stay alive and unmodified while the tokens are in use.

Both token types record the half-open ``span`` of source units they cover.
Spans are excluded from equality and repr, so ``Text("hi") == Text("hi", (4, 6))``.
"""

from dataclasses import dataclass, field
from typing import Union

from .commands import ControlCommand


@dataclass(frozen=True)
class Text:
    """A run of plain (non-control) content."""

    value: str | memoryview
    span: tuple[int, int] = field(default=(0, 0), compare=False, repr=False)

    @property
    def text(self) -> str:
        """The run as ``str``; bytes input is decoded as UTF-8."""
        if isinstance(self.value, str):
            return self.value
        return bytes(self.value).decode("utf-8", errors="replace")

    def __eq__(self, other: object) -> bool:
        # memoryview == bytes compares content; keep str and bytes distinct
        if not isinstance(other, Text):
            return NotImplemented
        if isinstance(self.value, str) != isinstance(other.value, str):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        if isinstance(self.value, str):
            return hash(self.value)
        return hash(bytes(self.value))


@dataclass(frozen=True)
class Control:
    """A recognized control sequence."""

    command: ControlCommand
    span: tuple[int, int] = field(default=(0, 0), compare=False, repr=False)


Token = Union[Text, Control]
