"""Logging from config and env.

Levels (inclusive):
- ERROR: the fatal message of a failed run
- WARNING: isolated collaborator failures and ERROR
- INFO: progress of a run, WARNING, and ERROR
- DEBUG: request URLs and all levels above

Configure via config file (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from verbump.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names mean INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Apply level and format to the root logger.

    Connection pool chatter of requests stays at WARNING unless DEBUG is
    asked for.
    """
    config = config or LoggingConfig()
    level = _resolve_level(config.level)
    logging.basicConfig(level=level, format=config.format or DEFAULT_FORMAT, force=True)
    logging.getLogger("urllib3").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
