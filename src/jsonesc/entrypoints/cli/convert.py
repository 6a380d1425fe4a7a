"""``jsonesc escape`` / ``jsonesc unescape``: one-shot conversions.

Behavior
- Input comes from the TEXT argument, ``--file`` (``-`` for stdin), or stdin.
- The result goes to **stdout**; status lines (copy confirmation, errors) go
  to **stderr** so results can be piped.
- Input bytes are decoded as UTF-8 without newline translation; results are
  written to stdout as UTF-8.
- An invalid string to unescape, or a result holding an unpaired surrogate,
  prints a diagnostic and exits 1.

Examples
    $ jsonesc escape 'path/to "file"'
    path\\/to \\"file\\"
    $ printf 'a\\\\nb' | jsonesc unescape
    a
    b
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from jsonesc import bootstrap

from .helpers import ResultEncodingError, error, read_input, success, warn, write_result

if TYPE_CHECKING:
    from typing import BinaryIO

    from jsonesc.service_layer import ConversionPanel

COPIED_MSG = "Copied!"
NOTHING_TO_COPY_MSG = "Nothing to copy."
COPY_FAILED_MSG = "Result was not copied to the clipboard."


def copy_output(panel: ConversionPanel) -> bool:
    """Copy the panel output and report the outcome on stderr."""
    if not panel.output_text:
        warn(NOTHING_TO_COPY_MSG)
        return False
    if panel.copy():
        success(COPIED_MSG)
        return True
    warn(COPY_FAILED_MSG)
    return False


def conversion_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by ``escape`` and ``unescape``."""
    options = [
        click.argument("text", required=False),
        click.option(
            "--file",
            "-f",
            "file",
            type=click.File("rb"),
            help="Read UTF-8 input from FILE ('-' for stdin) instead of TEXT.",
        ),
        click.option(
            "--keep-newline",
            is_flag=True,
            help="Keep the trailing line ending of input read from a file or stdin.",
        ),
        click.option(
            "--quoted",
            is_flag=True,
            help="Work with complete JSON string literals, surrounding quotes included.",
        ),
        click.option(
            "--copy",
            "-c",
            "copy",
            is_flag=True,
            help="Also copy the result to the system clipboard.",
        ),
        click.option(
            "--no-newline",
            "-n",
            "no_newline",
            is_flag=True,
            help="Do not print a newline after the result.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("escape")
@conversion_options
def escape_cmd(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    text: str | None,
    file: BinaryIO | None,
    keep_newline: bool,
    quoted: bool,
    copy: bool,
    no_newline: bool,
) -> None:
    """Escape TEXT into the body of a JSON string literal."""
    panel = bootstrap.bootstrap(input_text=read_input(text, file, keep_newline))
    panel.escape(quoted=quoted)
    write_result(panel.output_text, nl=not no_newline)
    if copy:
        copy_output(panel)


@click.command("unescape")
@conversion_options
@click.pass_context
def unescape_cmd(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    text: str | None,
    file: BinaryIO | None,
    keep_newline: bool,
    quoted: bool,
    copy: bool,
    no_newline: bool,
) -> None:
    """Unescape TEXT, the body of a JSON string literal, back into raw text."""
    panel = bootstrap.bootstrap(input_text=read_input(text, file, keep_newline))
    if not panel.unescape(quoted=quoted):
        error(panel.output_text)
        ctx.exit(1)
    try:
        write_result(panel.output_text, nl=not no_newline)
    except ResultEncodingError as e:
        error(str(e))
        ctx.exit(1)
    if copy:
        copy_output(panel)
