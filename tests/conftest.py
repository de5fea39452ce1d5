from __future__ import annotations

import pytest

from arthur.extension import _extension_registry


@pytest.fixture(autouse=True)
def _clean_registry():
    """Restore the extension registry after each test."""
    saved = _extension_registry.copy()
    yield
    _extension_registry.clear()
    _extension_registry.update(saved)
