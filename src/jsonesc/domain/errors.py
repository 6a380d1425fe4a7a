"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Unescape errors
# ============================================================================


class ParseError(DomainError):
    """Raised when text is not a valid escaped JSON string body.

    Positions refer to the text handed to the unescaper, not to the
    quote-wrapped literal that is actually parsed.

    Attributes:
        msg: The parser's diagnostic, without position information.
        doc: The text that failed to parse.
        pos: Zero-based index into ``doc`` where parsing failed.
        lineno: One-based line of ``pos``.
        colno: One-based column of ``pos``.
    """

    def __init__(self, msg: str, doc: str, pos: int) -> None:
        pos = max(0, min(pos, len(doc)))
        lineno = doc.count("\n", 0, pos) + 1
        colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(f"{msg}: line {lineno} column {colno} (char {pos})")
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno


class NotAStringError(ParseError):
    """Raised when a quoted literal parses to a JSON value that is not a string."""

    def __init__(self, doc: str, type_name: str) -> None:
        super().__init__(f"Expected a JSON string literal, got {type_name}", doc, 0)
        self.type_name = type_name
