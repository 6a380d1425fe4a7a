"""Escape text into the body of a JSON string literal.

The output is pure printable ASCII. Besides the escapes JSON requires, the
forward slash is escaped as ``\\/`` and every UTF-16 code unit outside
32..126 becomes ``\\uXXXX`` (uppercase hex). Characters beyond the Basic
Multilingual Plane are split into their surrogate pair first, so each half
gets its own ``\\uXXXX`` escape; standard JSON parsers join the pair back.

Examples:
    ```py
    >>> escape('say "hi"\\n')
    'say \\\\"hi\\\\"\\\\n'
    >>> escape("café")
    'caf\\\\u00E9'
    ```
"""

from collections.abc import Iterator

NAMED_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

PRINTABLE_MIN = 32  # pragma: no mutate
PRINTABLE_MAX = 126  # pragma: no mutate
BMP_MAX = 0xFFFF  # pragma: no mutate


def _code_units(char: str) -> Iterator[int]:
    """Yield the UTF-16 code unit(s) of a single character."""
    code_point = ord(char)
    if code_point <= BMP_MAX:
        yield code_point
        return
    offset = code_point - 0x10000
    yield 0xD800 | (offset >> 10)
    yield 0xDC00 | (offset & 0x3FF)


def _escape_char(char: str) -> str:
    if (named := NAMED_ESCAPES.get(char)) is not None:
        return named
    code_point = ord(char)
    if PRINTABLE_MIN <= code_point <= PRINTABLE_MAX:
        return char
    return "".join(f"\\u{unit:04X}" for unit in _code_units(char))


def escape(text: str, quoted: bool = False) -> str:
    """Return ``text`` escaped for use inside a JSON string literal.

    Never fails: every character has a defined mapping.

    Args:
        text: Raw text; may be empty.
        quoted: Wrap the result in double quotes, yielding a complete literal.

    Returns:
        str: The escaped body (or literal, when ``quoted``).
    """
    body = "".join(_escape_char(char) for char in text)
    return f'"{body}"' if quoted else body
