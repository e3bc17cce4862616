"""Application entry point — CLI dispatcher and logging bootstrap.

``main()`` parses flags (cli.py), writes explicit flags to the environment,
configures logging, loads Config and then scans the input file or stdin.
Logs go to stderr so token output on stdout stays clean.
"""

import json
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

import structlog

from .cli import apply_args_to_env, parse_args
from .dump import format_token, token_to_dict
from .scanner import ESC_MARKER, scan
from .tokens import Control, Text


def setup_logging(log_level: str) -> None:
    """Configure structured, colored logging on stderr."""
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                pad_event=40,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Configure stdlib logging for third-party libs (python-dotenv)
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            ],
        )
    )
    root.addHandler(handler)
    root.setLevel(numeric_level)


def _package_version() -> str:
    try:
        return version("ansilex")
    except PackageNotFoundError:
        return "unknown"


def _read_input(path: os.PathLike[str] | None) -> bytes:
    if path is None or str(path) == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def run(argv: list[str] | None = None) -> int:
    """Scan the requested input and print its tokens. Returns an exit status."""
    args = parse_args(argv)
    if args.version:
        print(f"ansilex {_package_version()}")
        return 0

    apply_args_to_env(args)
    setup_logging(os.environ.get("ANSILEX_LOG_LEVEL", "WARNING").upper())
    logger = structlog.get_logger("ansilex.main")

    try:
        from .config import Config

        cfg = Config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        data = _read_input(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    tokens = scan(data, max_value=cfg.max_parameter)
    controls = sum(1 for t in tokens if isinstance(t, Control))
    logger.info(
        "Scanned %d bytes into %d tokens (%d control)",
        len(data),
        len(tokens),
        controls,
    )
    unrecognized = sum(
        bytes(t.value).count(ESC_MARKER) for t in tokens if isinstance(t, Text)
    )
    if unrecognized:
        logger.debug("%d escape marker(s) left as text", unrecognized)

    out = sys.stdout
    if args.strip:
        out.flush()
        out.buffer.write(b"".join(bytes(t.value) for t in tokens if isinstance(t, Text)))
        out.flush()
        return 0

    for token in tokens:
        if args.json:
            out.write(json.dumps(token_to_dict(token, cfg.encoding)) + "\n")
        else:
            out.write(format_token(token, cfg.encoding) + "\n")
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
