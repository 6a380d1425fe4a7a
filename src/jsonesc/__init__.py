"""jsonesc

Escape plain text into the body of a JSON string literal, and back.
Escaping follows a fixed per-character table (ASCII-only output, ``\\/`` and
``\\uXXXX`` for everything outside printable ASCII) so the result can be pasted
into hand-written JSON payloads verbatim.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
