"""
Logging configuration — central setup for the CLI.

Called once at startup by the CLI entry point.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Levels are resolved in precedence order:
    CLI flag  >  RESTIFY_BOOST_LOG_LEVEL env var  >  WARNING (default)

Optional file output via RESTIFY_BOOST_LOG_FILE / RESTIFY_BOOST_LOG_FILE_LEVEL.
Console output always goes to stderr so ``--json`` output on stdout
stays parseable.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "RESTIFY_BOOST_LOG_LEVEL"
LOG_FILE_ENV = "RESTIFY_BOOST_LOG_FILE"
LOG_FILE_LEVEL_ENV = "RESTIFY_BOOST_LOG_FILE_LEVEL"

# ── Formats, most detailed first ────────────────────────────────

# (threshold, format, datefmt): the first threshold >= level applies
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(levelname)s: %(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# SQLAlchemy logs every statement and pool checkout at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.dialects")


def level_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Translate CLI verbosity flags into a level name.

    Without any flag the env var (or WARNING) applies.
    """
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LOG_LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file path. Defaults to RESTIFY_BOOST_LOG_FILE.
        log_file_level: Level for the log file. Defaults to
            RESTIFY_BOOST_LOG_FILE_LEVEL, then ``level``.
        quiet_third_party: Hold SQLAlchemy's loggers at WARNING unless
            the console runs at DEBUG.
    """
    console_level = _parse_level(level)
    log_file = log_file or os.environ.get(LOG_FILE_ENV)
    log_file_level = log_file_level or os.environ.get(LOG_FILE_LEVEL_ENV)

    handlers = [_console_handler(console_level)]
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    # Root passes everything any handler wants; handlers filter
    root.setLevel(min(h.level for h in handlers))

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next(
        (f, d) for threshold, f, d in _CONSOLE_FORMATS if level <= threshold
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
