"""``jsonesc shell``: an interactive conversion panel.

Lines typed at the prompt accumulate in the input field. Colon commands act
on the panel; results print to stdout, status lines to stderr.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from jsonesc import bootstrap

from .convert import copy_output
from .helpers import ResultEncodingError, error, success, warn, write_result
from .helpers.text_io import decode_input, strip_line_ending

if TYPE_CHECKING:
    from jsonesc.service_layer import ConversionPanel

logger = logging.getLogger(__name__)

PROMPT = "> "

SHELL_HELP = """\
Type or paste text; each line is appended to the input field.

  :escape     escape the input into the output field
  :unescape   unescape the input into the output field
  :copy       copy the output field to the clipboard
  :clear      empty both fields
  :show       print both fields
  :help       show this help
  :quit       leave the shell (Ctrl-D works too)

Start a line with '::' to enter a literal line beginning with ':'."""


class PanelShell:
    """Line-oriented driver for a `ConversionPanel`.

    Args:
        panel: The panel to drive.
        quoted: Forwarded to escape/unescape.
    """

    def __init__(self, panel: ConversionPanel, quoted: bool = False) -> None:
        self.panel = panel
        self.quoted = quoted
        self._lines: list[str] = []
        self._commands = {
            ":escape": self.do_escape,
            ":unescape": self.do_unescape,
            ":copy": self.do_copy,
            ":clear": self.do_clear,
            ":show": self.do_show,
            ":help": self.do_help,
        }

    def feed(self, line: str) -> bool:
        """Process one line of input.

        Returns:
            bool: False once the shell should stop.
        """
        if line.startswith("::"):
            self._append(line[1:])
            return True
        if not line.startswith(":"):
            self._append(line)
            return True
        name = line.strip().lower()
        if name in {":quit", ":q", ":exit"}:
            return False
        if (command := self._commands.get(name)) is None:
            warn(f"Unknown command {name!r}. Type :help for a list.")
            return True
        logger.debug("Shell command %s", name)
        command()
        return True

    def _append(self, line: str) -> None:
        self._lines.append(line)
        self.panel.input_text = "\n".join(self._lines)

    def _print_output(self) -> None:
        try:
            write_result(self.panel.output_text)
        except ResultEncodingError as e:
            error(str(e))

    def do_escape(self) -> None:
        self.panel.escape(quoted=self.quoted)
        self._print_output()

    def do_unescape(self) -> None:
        if self.panel.unescape(quoted=self.quoted):
            self._print_output()
        else:
            error(self.panel.output_text)

    def do_copy(self) -> None:
        copy_output(self.panel)

    def do_clear(self) -> None:
        self._lines.clear()
        self.panel.clear()
        success("Cleared.")

    def do_show(self) -> None:
        fields = (("input ", self.panel.input_text), ("output", self.panel.output_text))
        for label, text in fields:
            # unpaired surrogates print as \udXXX
            click.echo(f"{label}: {text}".encode("utf-8", "backslashreplace"))

    def do_help(self) -> None:  # pylint: disable=no-self-use
        click.echo(SHELL_HELP)


@click.command()
@click.option(
    "--quoted",
    is_flag=True,
    help="Work with complete JSON string literals, surrounding quotes included.",
)
def shell(quoted: bool) -> None:
    """Open an interactive escape/unescape panel."""
    stdin = click.get_binary_stream("stdin")
    interactive = stdin.isatty()
    runner = PanelShell(bootstrap.bootstrap(), quoted=quoted)
    if interactive:
        click.echo("jsonesc shell. Type :help for commands.", err=True)
    while True:
        if interactive:
            click.echo(PROMPT, nl=False, err=True)
        raw = stdin.readline()
        if not raw:
            break
        try:
            line = decode_input(raw, "Line")
        except click.UsageError as e:
            warn(f"{e.message} Ignored.")
            continue
        if not runner.feed(strip_line_ending(line)):
            break
