"""Unit tests for :class:`jsonesc.entrypoints.cli.shell.PanelShell`."""

from __future__ import annotations

import pytest

from jsonesc.adapters.clipboard import MemoryClipboard
from jsonesc.entrypoints.cli.shell import SHELL_HELP, PanelShell
from jsonesc.service_layer import UNESCAPE_ERROR_PREFIX, ConversionPanel

# pylint: disable=redefined-outer-name


@pytest.fixture
def shell(panel: ConversionPanel) -> PanelShell:
    """A shell driving the shared in-memory panel."""
    return PanelShell(panel)


def feed_all(shell: PanelShell, *lines: str) -> list[bool]:
    """Feed several lines, returning each continue flag."""
    return [shell.feed(line) for line in lines]


def test_lines_accumulate_in_input(shell: PanelShell) -> None:
    """Plain lines are joined with newlines, blank lines included."""
    feed_all(shell, "first", "", "third")
    assert shell.panel.input_text == "first\n\nthird"


def test_double_colon_enters_literal_line(shell: PanelShell) -> None:
    """'::' escapes a leading colon."""
    shell.feed("::escape")
    assert shell.panel.input_text == ":escape"


def test_escape_prints_result(shell: PanelShell, capsys: pytest.CaptureFixture) -> None:
    """:escape prints the escaped input to stdout."""
    feed_all(shell, "a/b", "c", ":escape")
    assert capsys.readouterr().out == "a\\/b\\nc\n"


def test_quoted_shell(panel: ConversionPanel, capsys: pytest.CaptureFixture) -> None:
    """A quoted shell wraps escapes in quotes."""
    feed_all(PanelShell(panel, quoted=True), "x", ":escape")
    assert capsys.readouterr().out == '"x"\n'


def test_unescape_success_and_failure(
    shell: PanelShell, capsys: pytest.CaptureFixture
) -> None:
    """Valid input prints to stdout; invalid input prints the diagnostic to stderr."""
    feed_all(shell, "caf\\u00E9", ":unescape")
    assert capsys.readouterr().out == "café\n"

    feed_all(shell, ":clear", "bad\\q", ":unescape")
    captured = capsys.readouterr()
    assert UNESCAPE_ERROR_PREFIX in captured.err
    assert captured.out == ""


def test_copy(
    shell: PanelShell, memory_clipboard: MemoryClipboard, capsys: pytest.CaptureFixture
) -> None:
    """:copy sends the output field to the clipboard and confirms on stderr."""
    feed_all(shell, "é", ":escape", ":copy")
    assert memory_clipboard.text == "\\u00E9"
    assert "Copied!" in capsys.readouterr().err


def test_copy_with_empty_output(
    shell: PanelShell, memory_clipboard: MemoryClipboard, capsys: pytest.CaptureFixture
) -> None:
    """:copy before any conversion warns and copies nothing."""
    shell.feed(":copy")
    assert memory_clipboard.writes == []
    assert "Nothing to copy." in capsys.readouterr().err


def test_clear_and_show(shell: PanelShell, capsys: pytest.CaptureFixture) -> None:
    """:clear empties both fields and the line buffer."""
    feed_all(shell, "abc", ":escape", ":clear", "new", ":show")
    out = capsys.readouterr().out
    assert out.endswith("input : new\noutput: \n")


def test_help(shell: PanelShell, capsys: pytest.CaptureFixture) -> None:
    """:help prints the command list."""
    shell.feed(":help")
    assert SHELL_HELP in capsys.readouterr().out


def test_unknown_command_warns(shell: PanelShell, capsys: pytest.CaptureFixture) -> None:
    """Unknown commands warn but keep the shell running."""
    assert shell.feed(":frobnicate") is True
    assert "Unknown command ':frobnicate'" in capsys.readouterr().err


@pytest.mark.parametrize("command", [":quit", ":q", ":exit", ":QUIT "])
def test_quit(shell: PanelShell, command: str) -> None:
    """Quit commands stop the shell."""
    assert shell.feed(command) is False


def test_unpaired_surrogate_result_is_reported(
    shell: PanelShell, capsys: pytest.CaptureFixture
) -> None:
    """A lone surrogate cannot be printed; the shell says so and keeps going."""
    assert feed_all(shell, "\\uD800", ":unescape") == [True, True]
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unpaired surrogate U+D800 at index 0" in captured.err


def test_show_escapes_unpaired_surrogates(
    shell: PanelShell, capsys: pytest.CaptureFixture
) -> None:
    """:show renders a lone surrogate as a backslash escape."""
    feed_all(shell, "x\\uDC00", ":unescape")
    capsys.readouterr()
    shell.feed(":show")
    assert capsys.readouterr().out == "input : x\\uDC00\noutput: x\\udc00\n"
