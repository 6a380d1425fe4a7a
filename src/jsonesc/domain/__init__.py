"""Domain layer for jsonesc.

Pure text transforms with no I/O: the escaper and its inverse, plus the
errors they raise.
"""

from .escaper import escape
from .unescaper import unescape

__all__ = ["escape", "unescape"]
