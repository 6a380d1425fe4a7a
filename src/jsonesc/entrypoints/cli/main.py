"""jsonesc CLI entry point.

Defines the top-level ``jsonesc`` command (via Click-Extra), configures
logging for every subcommand, and registers the subcommands.

Currently available commands
- ``jsonesc escape``   : raw text to escaped JSON string body.
- ``jsonesc unescape`` : escaped JSON string body back to raw text.
- ``jsonesc shell``    : interactive input/output panel.

Notes
- The CLI version is sourced from `jsonesc.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ jsonesc --version
    $ jsonesc escape 'café'
    $ jsonesc -v unescape --copy 'caf\\u00E9'
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from jsonesc import __version__
from jsonesc.logging import LogSettings, configure_logging, console_level, log_startup

from .convert import escape_cmd, unescape_cmd
from .helpers import hyperlink
from .logging_options import logging_options
from .shell import shell

logger = logging.getLogger(__name__)

JSON_STRINGS_RFC_URL = "https://www.rfc-editor.org/rfc/rfc8259#section-7"

HELP = """jsonesc command-line interface.

    Escape plain text into the body of a JSON string literal and back. Escaped
    output is pure printable ASCII: quotes, backslashes, slashes and control
    characters use their short escapes, everything outside printable ASCII
    becomes \\uXXXX (one escape per UTF-16 code unit).
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  JSON strings: " + hyperlink(JSON_STRINGS_RFC_URL),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@logging_options
@clickx.pass_context
def jsonesc(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    *,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    flight_recorder: bool,
    log_path: Path,
    force_flush: bool,
    flight_recorder_capacity: int,
) -> None:
    """jsonesc command-line interface."""
    settings = LogSettings(
        console_level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, __version__, settings, handlers)
    ctx.call_on_close(logging.shutdown)


jsonesc.add_command(escape_cmd)
jsonesc.add_command(unescape_cmd)
jsonesc.add_command(shell)
