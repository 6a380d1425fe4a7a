"""Conversion panel: an input/output field pair driven by four actions.

The panel is what a front end (CLI, interactive shell) talks to. It owns the
two text fields and turns domain results and errors into output text, so
every front end renders failures the same way.
"""

import logging

from jsonesc.domain import escape, unescape
from jsonesc.domain.errors import ParseError
from jsonesc.interfaces.clipboard import Clipboard, ClipboardError

logger = logging.getLogger(__name__)

UNESCAPE_ERROR_PREFIX = "ERROR: Invalid string to unescape. Please check the format."


def render_parse_error(error: ParseError) -> str:
    """Format a `ParseError` for display in the output field."""
    return f"{UNESCAPE_ERROR_PREFIX}\n\nDetails: {error}"


class ConversionPanel:
    """Holds the input and output text and applies transforms between them.

    Args:
        clipboard: Where `copy()` sends the output text.
        input_text: Initial contents of the input field.

    Attributes:
        input_text: Text the next `escape()`/`unescape()` reads.
        output_text: Result of the last action, or a rendered error message.
    """

    def __init__(self, clipboard: Clipboard, input_text: str = "") -> None:
        self.clipboard = clipboard
        self.input_text = input_text
        self.output_text = ""

    def escape(self, quoted: bool = False) -> None:
        """Escape the input field into the output field."""
        if not self.input_text:
            self.output_text = ""
            return
        self.output_text = escape(self.input_text, quoted=quoted)
        logger.debug(
            "Escaped %d characters into %d", len(self.input_text), len(self.output_text)
        )

    def unescape(self, quoted: bool = False) -> bool:
        """Unescape the input field into the output field.

        On failure the output field receives the rendered error message.

        Returns:
            bool: True if the input was valid, False otherwise.
        """
        if not self.input_text:
            self.output_text = ""
            return True
        try:
            self.output_text = unescape(self.input_text, quoted=quoted)
        except ParseError as e:
            logger.info("Invalid string to unescape: %s", e)
            self.output_text = render_parse_error(e)
            return False
        logger.debug(
            "Unescaped %d characters into %d",
            len(self.input_text),
            len(self.output_text),
        )
        return True

    def copy(self) -> bool:
        """Copy the output field to the clipboard.

        Returns:
            bool: True if text was copied; False if the output is empty or the
            clipboard write failed (the failure is logged).
        """
        if not self.output_text:
            return False
        try:
            self.clipboard.write_text(self.output_text)
        except ClipboardError as e:
            logger.error("Failed to copy text: %s", e)
            return False
        logger.info("Copied %d characters to the clipboard", len(self.output_text))
        return True

    def clear(self) -> None:
        """Empty both fields."""
        self.input_text = ""
        self.output_text = ""
