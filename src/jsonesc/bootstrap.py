"""Bootstrap (composition root) for jsonesc.

Wires concrete adapters into the service layer. Entry points import this
module rather than reaching into `jsonesc.adapters` themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonesc import config
from jsonesc.adapters.clipboard import SystemClipboard
from jsonesc.service_layer import ConversionPanel

if TYPE_CHECKING:
    from jsonesc.interfaces.clipboard import Clipboard


def build_clipboard() -> Clipboard:
    """Build the system clipboard, honoring `JSONESC_CLIPBOARD_CMD`."""
    return SystemClipboard(command=config.get_clipboard_command())


def bootstrap(clipboard: Clipboard | None = None, input_text: str = "") -> ConversionPanel:
    """Build a conversion panel with injected dependencies.

    Args:
        clipboard: Clipboard override (tests pass a `MemoryClipboard`);
            defaults to the system clipboard.
        input_text: Initial contents of the input field.
    """
    return ConversionPanel(clipboard or build_clipboard(), input_text=input_text)
