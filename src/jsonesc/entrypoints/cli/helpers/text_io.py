"""Byte-exact text I/O for the conversion commands.

Input and results travel through the binary streams and are decoded and
encoded as UTF-8 here, so ``\\r\\n`` and lone ``\\r`` reach the escaper
untouched and nothing depends on the locale's encoding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from typing import BinaryIO

ENCODING = "utf-8"  # pragma: no mutate


class ResultEncodingError(Exception):
    """Raised when a result holds an unpaired surrogate and cannot be written.

    Attributes:
        index: Position of the offending code unit in the result.
        code: The surrogate's code unit.
    """

    def __init__(self, cause: UnicodeEncodeError) -> None:
        self.index = cause.start
        self.code = ord(cause.object[cause.start])
        super().__init__(
            f"Cannot write the result as UTF-8: unpaired surrogate "
            f"U+{self.code:04X} at index {self.index}. Keep it escaped instead."
        )


def strip_line_ending(text: str) -> str:
    """Drop a single trailing ``\\n`` or ``\\r\\n`` from ``text``."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def decode_input(data: bytes, source: str) -> str:
    """Decode UTF-8 ``data`` read from ``source``.

    Raises:
        click.UsageError: If ``data`` is not valid UTF-8.
    """
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise click.UsageError(
            f"{source} is not valid UTF-8 (byte 0x{data[e.start]:02x} at offset {e.start})."
        ) from e


def read_input(
    text: str | None, file: BinaryIO | None = None, keep_newline: bool = False
) -> str:
    """Resolve the text a command should convert.

    A positional ``text`` is used verbatim. Otherwise the bytes of ``file``
    (or stdin) are decoded as UTF-8 and, unless ``keep_newline`` is set, lose
    the line ending that ``echo`` and most editors append.

    Raises:
        click.UsageError: If both ``text`` and ``file`` are given, or the
            bytes read are not valid UTF-8.
    """
    if text is not None and file is not None:
        raise click.UsageError("Pass TEXT or --file, not both.")
    if text is not None:
        return text
    if file is not None:
        source = f"File {getattr(file, 'name', '<file>')!r}"
        data = file.read()
    else:
        source = "Standard input"
        data = click.get_binary_stream("stdin").read()
    decoded = decode_input(data, source)
    return decoded if keep_newline else strip_line_ending(decoded)


def write_result(text: str, nl: bool = True) -> None:
    """Write ``text`` to stdout as UTF-8, followed by a newline unless ``nl`` is False.

    Raises:
        ResultEncodingError: If ``text`` cannot be encoded; nothing is written.
    """
    try:
        data = text.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise ResultEncodingError(e) from e
    click.echo(data, nl=nl)
