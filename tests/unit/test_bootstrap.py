"""Unit tests for :mod:`jsonesc.bootstrap`."""

import pytest

from jsonesc import bootstrap, config
from jsonesc.adapters.clipboard import MemoryClipboard, SystemClipboard
from jsonesc.service_layer import ConversionPanel


def test_default_uses_system_clipboard_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an override the panel gets a SystemClipboard honoring the env."""
    monkeypatch.setenv(config.CLIPBOARD_CMD_ENVVAR, "my-copy --flag")
    panel = bootstrap.bootstrap()
    assert isinstance(panel, ConversionPanel)
    assert isinstance(panel.clipboard, SystemClipboard)
    assert panel.clipboard.command == ["my-copy", "--flag"]


def test_clipboard_override_and_initial_input() -> None:
    """An injected clipboard and initial input are used as given."""
    clipboard = MemoryClipboard()
    panel = bootstrap.bootstrap(clipboard=clipboard, input_text="abc")
    assert panel.clipboard is clipboard
    assert panel.input_text == "abc"
