"""Clipboard interface definitions."""

import abc

# pylint: disable=too-few-public-methods


class ClipboardError(Exception):
    """Raised when text could not be written to the clipboard."""


class Clipboard(abc.ABC):
    """Contract for a write-only text clipboard."""

    @abc.abstractmethod
    def write_text(self, text: str) -> None:
        """Replace the clipboard contents with ``text``.

        Args:
            text: The text to place on the clipboard.

        Raises:
            ClipboardError: If the write did not succeed.
        """
