"""Clipboard adapters for jsonesc.

Two implementations of `jsonesc.interfaces.Clipboard`:

- `SystemClipboard` pipes text into a platform clipboard program
  (``pbcopy``, ``wl-copy``, ``xclip``, ``xsel`` or ``clip``).
- `MemoryClipboard` keeps writes in a list; meant for tests and dry runs.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import TYPE_CHECKING

from jsonesc.interfaces.clipboard import Clipboard, ClipboardError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Probed in order; the first program found on PATH wins.
CANDIDATE_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)

DEFAULT_TIMEOUT_SECONDS = 5.0  # pragma: no mutate


class ClipboardCommandNotFoundError(ClipboardError):
    """Raised when no clipboard program is available on PATH."""

    def __init__(self, candidates: Sequence[Sequence[str]]) -> None:
        names = ", ".join(command[0] for command in candidates)
        super().__init__(
            f"No clipboard program found (tried: {names}). "
            "Install one or set JSONESC_CLIPBOARD_CMD."
        )
        self.candidates = candidates


def find_clipboard_command(
    candidates: Sequence[Sequence[str]] = CANDIDATE_COMMANDS,
) -> list[str]:
    """Return the first candidate command whose program is on PATH.

    Raises:
        ClipboardCommandNotFoundError: If none of the candidates is installed.
    """
    for command in candidates:
        if shutil.which(command[0]):
            return list(command)
    raise ClipboardCommandNotFoundError(candidates)


class SystemClipboard(Clipboard):
    """Clipboard backed by an external program reading from stdin.

    The command is resolved lazily on first write, so constructing the adapter
    never fails on machines without a clipboard.
    """

    def __init__(
        self,
        command: Sequence[str] | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._command = list(command) if command else None
        self._timeout = timeout

    @property
    def command(self) -> list[str]:
        """The resolved clipboard command."""
        if self._command is None:
            self._command = find_clipboard_command()
            logger.debug("Using clipboard command: %s", self._command)
        return self._command

    def write_text(self, text: str) -> None:
        command = self.command
        # Windows' clip.exe reads UTF-16; everything else expects UTF-8.
        encoding = "utf-16-le" if command[0].lower() in {"clip", "clip.exe"} else "utf-8"
        try:
            subprocess.run(
                command,
                input=text.encode(encoding, errors="surrogatepass"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"Clipboard command {command[0]!r} failed: {e}") from e


class MemoryClipboard(Clipboard):
    """In-memory clipboard that records every write."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    @property
    def text(self) -> str | None:
        """The most recent write, or `None` if nothing was written."""
        return self.writes[-1] if self.writes else None

    def write_text(self, text: str) -> None:
        self.writes.append(text)
