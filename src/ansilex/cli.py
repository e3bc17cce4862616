"""Command-line argument parsing for ansilex.

Defines CLI flags and applies precedence: CLI flag > env var > .env > default.
Called by main.py before Config instantiation; sets os.environ for any
explicitly provided flags so Config reads the overridden values.
"""

import argparse
import codecs
import os
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _non_negative_int(value: str) -> int:
    """Argparse type for non-negative integers."""
    result = int(value)
    if result < 0:
        msg = f"must be non-negative, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return result


def _codec_name(value: str) -> str:
    """Argparse type for a registered text encoding."""
    try:
        codecs.lookup(value)
    except LookupError:
        msg = f"unknown encoding: {value}"
        raise argparse.ArgumentTypeError(msg) from None
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments and return namespace.

    Args:
        argv: Argument list (defaults to sys.argv[1:]). Pass explicitly for testing.
    """
    parser = argparse.ArgumentParser(
        prog="ansilex",
        description="Split text with ANSI escape sequences into text and control tokens",
    )

    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        metavar="FILE",
        help="input file (default: stdin; '-' also reads stdin)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="show version and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging (env: ANSILEX_LOG_LEVEL=DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        metavar="LEVEL",
        help="logging level: DEBUG, INFO, WARNING, ERROR (env: ANSILEX_LOG_LEVEL)",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="print one JSON object per token",
    )
    output.add_argument(
        "--strip",
        action="store_true",
        help="print the input with recognized control sequences removed",
    )

    parser.add_argument(
        "--encoding",
        type=_codec_name,
        metavar="ENC",
        help="encoding used to decode text runs (default: utf-8, env: ANSILEX_ENCODING)",
    )
    parser.add_argument(
        "--max-parameter",
        type=_non_negative_int,
        metavar="N",
        help="largest numeric parameter accepted (default: 2**64-1, env: ANSILEX_MAX_PARAMETER)",
    )

    return parser.parse_args(argv)


# Mapping: argparse dest → environment variable name
_FLAG_TO_ENV: list[tuple[str, str]] = [
    ("encoding", "ANSILEX_ENCODING"),
    ("max_parameter", "ANSILEX_MAX_PARAMETER"),
]


def apply_args_to_env(args: argparse.Namespace) -> None:
    """Set environment variables from explicitly provided CLI flags.

    Call BEFORE Config instantiation to ensure CLI flags take precedence.
    Only sets env vars for flags that were explicitly provided (not None).
    """
    # --verbose always wins over --log-level
    if args.verbose:
        os.environ["ANSILEX_LOG_LEVEL"] = "DEBUG"
    elif args.log_level is not None:
        os.environ["ANSILEX_LOG_LEVEL"] = args.log_level.upper()

    for attr, env_var in _FLAG_TO_ENV:
        value = getattr(args, attr)
        if value is None:
            continue
        os.environ[env_var] = str(value)
