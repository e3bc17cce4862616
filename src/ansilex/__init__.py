"""ansilex — split terminal output into plain text and ANSI control tokens.

    >>> from ansilex import scan
    >>> scan("\\x1b[1mbold\\x1b[0m")
    [Control(command=SetGraphicMode(values=(1,))), Text(value='bold'), Control(command=SetGraphicMode(values=(0,)))]
"""

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
from .recognizer import MAX_PARAMETER, recognize
from .scanner import scan, strip_controls
from .tokens import Control, Text, Token

__all__ = [
    "MAX_PARAMETER",
    "Control",
    "ControlCommand",
    "CursorBackward",
    "CursorDown",
    "CursorForward",
    "CursorHome",
    "CursorPosition",
    "CursorUp",
    "EraseDisplay",
    "EraseLine",
    "RestoreCursorPosition",
    "SaveCursorPosition",
    "SetGraphicMode",
    "Text",
    "Token",
    "recognize",
    "scan",
    "strip_controls",
]
