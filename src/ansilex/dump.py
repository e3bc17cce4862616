"""Token dump formats used by the ansilex command.

  - format_token(): one human-readable line per token.
  - token_to_dict(): JSON-ready mapping per token.
"""

from typing import Any

from .commands import command_params
from .tokens import Control, Text, Token


def _decoded(token: Text, encoding: str) -> str:
    if isinstance(token.value, str):
        return token.value
    return bytes(token.value).decode(encoding, errors="replace")


def format_token(token: Token, encoding: str = "utf-8") -> str:
    """Render a token as ``Text '...'`` or ``Control <command repr>``."""
    if isinstance(token, Text):
        return f"Text {_decoded(token, encoding)!r}"
    return f"Control {token.command!r}"


def token_to_dict(token: Token, encoding: str = "utf-8") -> dict[str, Any]:
    """Convert a token into a JSON-serializable dict."""
    if isinstance(token, Control):
        return {
            "type": "control",
            "span": list(token.span),
            "command": type(token.command).__name__,
            "params": command_params(token.command),
        }
    return {
        "type": "text",
        "span": list(token.span),
        "text": _decoded(token, encoding),
    }
