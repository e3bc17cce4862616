"""CLI configuration — reads env vars into a Config object.

Loads ANSILEX_LOG_LEVEL, ANSILEX_ENCODING and ANSILEX_MAX_PARAMETER from
environment variables (with .env support). Variables already present in the
environment win over the local .env file.

Only the command-line front end imports this module; recognize() and scan()
take their settings as arguments and never read configuration.

Key class: Config (built by main.run() after CLI flags reach the environment).
"""

import codecs
import os
from pathlib import Path

import structlog
from dotenv import load_dotenv

from .cli import LOG_LEVELS
from .recognizer import MAX_PARAMETER

logger = structlog.get_logger()


class Config:
    """Front-end configuration loaded from environment variables."""

    def __init__(self) -> None:
        # load_dotenv default override=False: real env vars take priority
        local_env = Path(".env")
        if local_env.is_file():
            load_dotenv(local_env)
            logger.debug("Loaded env from %s", local_env.resolve())

        self.log_level: str = os.getenv("ANSILEX_LOG_LEVEL", "WARNING").upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"ANSILEX_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

        self.encoding: str = os.getenv("ANSILEX_ENCODING", "utf-8")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"ANSILEX_ENCODING is not a known codec: {e}") from e

        max_str = os.getenv("ANSILEX_MAX_PARAMETER")
        if max_str is not None:
            try:
                self.max_parameter: int = int(max_str)
            except ValueError as e:
                raise ValueError(
                    f"ANSILEX_MAX_PARAMETER must be a valid integer: {e}"
                ) from e
            if self.max_parameter < 0:
                raise ValueError(
                    f"ANSILEX_MAX_PARAMETER must be non-negative, got {max_str}"
                )
        else:
            self.max_parameter = MAX_PARAMETER

        logger.debug(
            "Config initialized: log_level=%s, encoding=%s, max_parameter=%d",
            self.log_level,
            self.encoding,
            self.max_parameter,
        )

