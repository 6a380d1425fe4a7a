"""CLI helpers for jsonesc.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, message emitters that write to stderr with emoji to ASCII
fallbacks, UTF-8 text I/O for conversion input and results, and the
``NAME=LEVEL`` option parser.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn
from .text_io import ResultEncodingError, read_input, write_result

__all__ = [
    "ResultEncodingError",
    "error",
    "hyperlink",
    "read_input",
    "success",
    "warn",
    "write_result",
]
