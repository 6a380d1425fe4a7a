"""Unescape the body of a JSON string literal back into raw text.

Rather than inverting the escape table by hand, the body is wrapped in double
quotes and handed to the standard library JSON decoder, which implements the
full string-literal grammar: the named escapes, ``\\/``, ``\\uXXXX`` with
surrogate-pair reassembly, and rejection of raw control characters, stray
quotes and dangling backslashes.
"""

import json

from .errors import NotAStringError, ParseError

_DECODER = json.JSONDecoder(strict=True)


def unescape(text: str, quoted: bool = False) -> str:
    """Return the raw text encoded by the escaped string body ``text``.

    Args:
        text: An escaped string body, e.g. ``a\\nb``.
        quoted: Treat ``text`` as a complete literal that already carries its
            surrounding double quotes. JSON whitespace (space, tab, CR, LF)
            around the literal is ignored.

    Returns:
        str: The decoded text.

    Raises:
        ParseError: If ``text`` is not valid under the JSON string grammar.
        NotAStringError: If ``quoted`` is set and ``text`` is valid JSON
            but not a string.
    """
    offset = 0 if quoted else 1
    literal = text if quoted else f'"{text}"'
    try:
        value = _DECODER.decode(literal)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, text, e.pos - offset) from e
    if not isinstance(value, str):
        raise NotAStringError(text, type(value).__name__)
    return value
