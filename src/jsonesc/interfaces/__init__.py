"""Interfaces (application boundary) for jsonesc.

Defines framework-free contracts shared by the service layer and adapters,
currently the clipboard port.

Dependency rule: this package is independent; do not import from any
`jsonesc.*` modules. It may be imported by `jsonesc.service_layer`,
`jsonesc.adapters`, and `jsonesc.bootstrap`.
"""

from .clipboard import Clipboard, ClipboardError

__all__ = ["Clipboard", "ClipboardError"]
