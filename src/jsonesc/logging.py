"""Logging setup for the jsonesc CLI.

Everything goes through the standard library root logger. Two handlers hang
off it:

- a Rich console handler on stderr (stdout only ever carries conversion
  results), filtered by the -v/-q verbosity;
- an optional flight recorder: a `MemoryHandler` that keeps the last records
  at DEBUG and writes them to a file only when something at WARNING or above
  happens, or at exit when a force flush was requested.

`configure_logging` wires both from a `LogSettings`; `log_startup` records what
the run looks like (streams, clipboard command, library versions) so a
flushed log is useful on its own.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from jsonesc import config

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "jsonesc"
DEFAULT_CAPACITY = 2000  # pragma: no mutate
VERBOSITY_STEP = 10  # pragma: no mutate

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] %(levelname)-8s %(name)s:%(lineno)d (pid %(process)d): %(message)s"
)


@dataclass(frozen=True)
class LogSettings:
    """How a CLI run should log.

    Attributes:
        console_level: Threshold for the console handler.
        debug: Debug console layout (timestamps, logger names, source paths);
            forces the console to DEBUG.
        color: Allow ANSI colors on the console.
        log_path: Flight recorder file; `None` disables the recorder.
        capacity: Records kept in memory by the flight recorder.
        force_flush: Write the recorder's buffer at exit even without a WARNING.
        logger_levels: Per-logger minimum levels, applied to both handlers.
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = DEFAULT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Return the console level for ``-v`` and ``-q`` counts, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + VERBOSITY_STEP * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside jsonesc with their top-level package.

    Sets ``record.prefix`` to e.g. ``[click_extra]``, or to ``""`` for jsonesc's
    own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".", 1)[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def make_console_handler(settings: LogSettings) -> RichHandler:
    """Build the stderr console handler described by ``settings``."""
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.console_level,
        console=Console(color_system="auto" if settings.color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def make_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_CAPACITY,
    force_flush: bool = False,
) -> MemoryHandler:
    """Build a flight recorder writing to ``path``.

    The file is truncated on the first flush of a run and not created at all
    if nothing is ever flushed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=force_flush,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the console handler and, when enabled, the flight recorder.

    Replaces any handlers already on the root logger, whose level is set to
    DEBUG so each handler does its own filtering.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [make_console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            make_flight_recorder(
                settings.log_path, settings.capacity, settings.force_flush
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def _stream_encoding(stream: object) -> str:
    return getattr(stream, "encoding", None) or "<unknown>"


def log_startup(
    logger: logging.Logger,
    app_version: str,
    settings: LogSettings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics for this run."""
    recorder = (
        f"ON ({settings.log_path})" if settings.log_path is not None else "OFF"
    )
    logger.info(
        "jsonesc %s starting: console %s, flight recorder %s",
        app_version,
        logging.getLevelName(settings.console_level),
        recorder,
    )
    logger.debug(
        "Python %s on %s %s, pid %d",
        platform.python_version(),
        platform.system(),
        platform.release(),
        os.getpid(),
    )
    logger.debug("Working directory: %s", os.getcwd())
    logger.debug(
        "Stream encodings: stdin=%s stdout=%s stderr=%s",
        _stream_encoding(sys.stdin),
        _stream_encoding(sys.stdout),
        _stream_encoding(sys.stderr),
    )
    clipboard_command = config.get_clipboard_command()
    logger.debug(
        "Clipboard command: %s",
        " ".join(clipboard_command) if clipboard_command else "auto-detect",
    )
    logger.debug(
        "Libraries: click %s, click-extra %s, rich %s",
        _distribution_version("click"),
        _distribution_version("click-extra"),
        _distribution_version("rich"),
    )
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if settings.log_path is not None:
        logger.debug(
            "Flight recorder keeps %d records, force flush %s",
            settings.capacity,
            "on" if settings.force_flush else "off",
        )
    logger.debug(
        "Logger levels: %s",
        ", ".join(
            f"{name}={logging.getLevelName(level)}"
            for name, level in sorted(settings.logger_levels.items())
        )
        or "<none>",
    )
