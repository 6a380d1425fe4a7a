"""Logging options of the top-level ``jsonesc`` group.

`logging_options` attaches them; Click passes their values to the group
callback, which folds them into a `jsonesc.logging.LogSettings`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from platformdirs import user_log_dir

from jsonesc.logging import DEFAULT_CAPACITY

from .helpers.log_level_parser import parse_log_level

DEFAULT_LOG_PATH = (
    Path(user_log_dir("jsonesc", appauthor=False, ensure_exists=True)) / "latest.log"
)


def logging_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach -v/-q, --debug, -L and the flight recorder options."""
    options = [
        click.option(
            "--verbose",
            "-v",
            "verbose_count",
            count=True,
            help="Show more on the console: -v adds INFO, -vv adds DEBUG.",
        ),
        click.option(
            "--quiet",
            "-q",
            "quiet_count",
            count=True,
            help="Show less on the console: -q hides warnings, -qq hides errors.",
        ),
        click.option(
            "--debug/--no-debug",
            default=False,
            help="Log everything to the console with timestamps and source lines.",
        ),
        click.option(
            "-L",
            "--logger-level",
            "logger_levels",
            multiple=True,
            callback=parse_log_level,
            default=("click_extra=WARNING",),
            envvar="JSONESC_LOGGER_LEVELS",
            show_default=True,
            show_envvar=True,
            help=(
                "NAME=LEVEL floor for one logger and its children, e.g. "
                "-L jsonesc.adapters=DEBUG. Repeatable; the env var takes a "
                "comma or space separated list."
            ),
        ),
        click.option(
            "--flight-recorder/--no-flight-recorder",
            "flight_recorder",
            default=True,
            envvar="JSONESC_FLIGHT_RECORDER",
            show_envvar=True,
            help=(
                "Keep recent DEBUG records in memory and write them to --log-path "
                "when a warning or error is logged."
            ),
        ),
        click.option(
            "--log-path",
            type=click.Path(dir_okay=False, path_type=Path),
            default=DEFAULT_LOG_PATH,
            envvar="JSONESC_LOG_PATH",
            show_default=True,
            show_envvar=True,
            help="File the flight recorder writes to; replaced on every run.",
        ),
        click.option(
            "--force-flush/--no-force-flush",
            "force_flush",
            default=False,
            envvar="JSONESC_FORCE_FLUSH_FLIGHT_RECORDER",
            show_envvar=True,
            help="Write the flight recorder's buffer at exit even if nothing went wrong.",
        ),
        click.option(
            "--flight-recorder-capacity",
            type=click.IntRange(min=1),
            default=DEFAULT_CAPACITY,
            hidden=True,
            envvar="JSONESC_FLIGHT_RECORDER_CAPACITY",
            help="Records kept by the flight recorder.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
