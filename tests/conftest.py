"""Global pytest fixtures and default markers for jsonesc."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonesc.adapters.clipboard import MemoryClipboard
from jsonesc.service_layer import ConversionPanel
from tests.fakes import FailingClipboard

# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "functional", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item after the top-level test folder it lives in."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if folder in FOLDER_MARKERS and item.get_closest_marker(folder) is None:
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture
def memory_clipboard() -> MemoryClipboard:
    """Return a fresh in-memory clipboard."""
    return MemoryClipboard()


@pytest.fixture
def failing_clipboard() -> FailingClipboard:
    """Return a clipboard that raises `ClipboardError` on every write."""
    return FailingClipboard()


@pytest.fixture
def panel(memory_clipboard: MemoryClipboard) -> ConversionPanel:
    """Return an empty conversion panel wired to an in-memory clipboard."""
    return ConversionPanel(memory_clipboard)
