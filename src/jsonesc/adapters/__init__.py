"""Adapters (infrastructure) for jsonesc.

Concrete implementations of the interfaces ports, e.g. the system clipboard.

Dependency rule: may import `jsonesc.interfaces`; the domain must not import
this package.
"""
