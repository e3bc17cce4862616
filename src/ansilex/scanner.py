"""Stream scanner — splits a buffer into Text and Control tokens.

Walks the input unit by unit (code points for ``str``, bytes for bytes-like
input). Every escape marker is handed to ``recognize()``; recognized
sequences become ``Control`` tokens and everything between them becomes
``Text`` tokens slicing the input. Bytes input is wrapped in a ``memoryview``,
so its slices share the caller's buffer instead of copying it.

An escape marker that does not start a recognized sequence is not dropped:
it becomes the first unit of the next ``Text`` run. Joining the source spans
of all tokens therefore always reproduces the input exactly.

Bytes input is assumed to be UTF-8 (or another ASCII-compatible encoding).
The scanner only splits at ASCII units, so multi-byte characters are never cut.

Key functions: scan(), strip_controls().
"""

from .recognizer import MAX_PARAMETER, Buffer, as_byte_view, recognize
from .tokens import Control, Text, Token

ESC_MARKER = 0x1B


def scan(text: Buffer, *, max_value: int = MAX_PARAMETER) -> list[Token]:
    """Split ``text`` into an ordered list of Text and Control tokens.

    Empty input yields an empty list. Plain text with no recognized escape
    sequences yields a single ``Text`` token.
    """
    if not isinstance(text, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"expected str or bytes-like input, got {type(text).__name__}")
    if not text:
        return []

    # str slices are the only view Python offers for text; bytes get a
    # memoryview so Text tokens share the caller's buffer
    if isinstance(text, str):
        view: str | memoryview = text
        haystack: str | bytes | bytearray = text
        marker: str | int = chr(ESC_MARKER)
    else:
        view = as_byte_view(text)
        haystack = text if isinstance(text, (bytes, bytearray)) else view.tobytes()
        marker = ESC_MARKER

    length = len(view)
    tokens: list[Token] = []
    watermark = 0
    cursor = 0

    while (cursor := haystack.find(marker, cursor)) >= 0:
        # Flush text seen since the last recognized sequence
        if cursor != watermark:
            tokens.append(Text(view[watermark:cursor], (watermark, cursor)))
            watermark = cursor

        result = recognize(
            view, length - cursor - 1, offset=cursor + 1, max_value=max_value
        )
        if result is None:
            # Unrecognized: the marker stays part of the next text run
            cursor += 1
            continue

        consumed, command = result
        end = cursor + consumed + 2
        tokens.append(Control(command, (cursor, end)))
        cursor = watermark = end

    if watermark < length:
        tokens.append(Text(view[watermark:], (watermark, length)))

    return tokens


def strip_controls(text: Buffer, *, max_value: int = MAX_PARAMETER) -> str | bytes:
    """Return ``text`` with every recognized control sequence removed.

    Unrecognized escape sequences are plain text and are kept. The result has
    the same type as the input (``bytes`` for any bytes-like input).
    """
    tokens = scan(text, max_value=max_value)
    if isinstance(text, str):
        return "".join(t.value for t in tokens if isinstance(t, Text))
    return b"".join(bytes(t.value) for t in tokens if isinstance(t, Text))
