"""Service layer for jsonesc.

Implements the application use-cases on top of the domain transforms: the
conversion panel that pairs an input field with an output field.

Dependency rule: may import `jsonesc.domain` and `jsonesc.interfaces`, but
not `jsonesc.adapters` or `jsonesc.entrypoints`.
"""

from .panel import UNESCAPE_ERROR_PREFIX, ConversionPanel, render_parse_error

__all__ = ["ConversionPanel", "UNESCAPE_ERROR_PREFIX", "render_parse_error"]
